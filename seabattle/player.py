"""Human and computer players."""

from __future__ import annotations

import random

from seabattle.board import Board
from seabattle.ship import Cell, Ship

GRID_SIZE = 10
FLEET = (4, 3, 2, 1)


class Player:
    """A player with a name and a board of ships."""

    def __init__(self, name: str = "Gracz", board: Board | None = None) -> None:
        self.name = name
        self.board = board if board is not None else Board(GRID_SIZE)

    def add_ship(self, ship: Ship) -> None:
        """Place a ship on the board; ships that do not fit are dropped."""
        self.board.add_ship(ship)

    @property
    def ships(self) -> list[Ship]:
        """A copy of the list of ships on the board."""
        return list(self.board.ships)


class AIPlayer(Player):
    """A computer opponent that places ships and shoots at random."""

    def __init__(self, name: str = "Komputer", rng: random.Random | None = None) -> None:
        super().__init__(name)
        self.rng = rng if rng is not None else random.Random()
        self.shots_fired: set[Cell] = set()

    def place_ships_randomly(self) -> None:
        """Place the fleet at random positions and orientations."""
        for length in FLEET:
            while True:
                x = self.rng.randrange(GRID_SIZE)
                y = self.rng.randrange(GRID_SIZE)
                horizontal = self.rng.randrange(2) == 1
                if self.board.add_ship(Ship(length, (x, y), horizontal)):
                    break

    def choose_shot(self) -> Cell:
        """Pick a random cell not shot at before."""
        if len(self.shots_fired) >= GRID_SIZE * GRID_SIZE:
            raise RuntimeError("every cell has already been shot at")
        while True:
            shot = (self.rng.randrange(GRID_SIZE), self.rng.randrange(GRID_SIZE))
            if shot not in self.shots_fired:
                self.shots_fired.add(shot)
                return shot