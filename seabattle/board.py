"""The battle grid holding ships and shot markers."""

from __future__ import annotations

from seabattle.ship import Cell, Ship


class Board:
    """A square grid with ships, hit markers and missed shots."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.ships: list[Ship] = []
        self.missed_shots: list[Cell] = []
        self.hit_markers: list[Cell] = []

    def add_ship(self, ship: Ship) -> bool:
        """Add a ship unless it leaves the grid or overlaps another; report success."""
        for x, y in ship.cells():
            if x >= self.size or y >= self.size or self.is_cell_occupied((x, y)):
                return False
        self.ships.append(ship)
        return True

    def is_cell_occupied(self, cell: Cell) -> bool:
        """Whether any ship covers the cell."""
        return any(ship.occupies(cell) for ship in self.ships)

    def is_cell_hit(self, cell: Cell) -> bool:
        """Whether the cell holds a ship, i.e. a shot there would hit."""
        return any(ship.occupies(cell) for ship in self.ships)

    def all_ships_sunk(self) -> bool:
        """Whether every ship on the board is sunk."""
        return all(ship.is_sunk() for ship in self.ships)

    def attack(self, pos: Cell) -> bool:
        """Fire at a cell, record the marker and report whether a ship was hit."""
        pos = tuple(pos)
        for ship in self.ships:
            if ship.occupies(pos):
                ship.hit_at(pos)
                self.hit_markers.append(pos)
                return True
        self.missed_shots.append(pos)
        return False

    def mark_shot(self, pos: Cell, hit: bool) -> None:
        """Record the outcome of a shot without touching any ship."""
        (self.hit_markers if hit else self.missed_shots).append(tuple(pos))

    def serialize_ships(self) -> str:
        """Encode ships as 'length,x,y,horizontal;' records."""
        return "".join(
            f"{ship.length},{ship.position[0]},{ship.position[1]},{int(ship.horizontal)};"
            for ship in self.ships
        )

    def load_ships_from_string(self, data: str) -> None:
        """Replace the ships with those encoded in data.

        Records without exactly four fields are skipped, as are ships that do
        not fit. A field that is not an integer raises ValueError.
        """
        self.ships.clear()
        for token in data.split(";"):
            if not token:
                continue
            fields = token.split(",")
            if fields[-1] == "":
                fields.pop()
            values = [int(field) for field in fields]
            if len(values) != 4:
                continue
            length, x, y, horizontal = values
            self.add_ship(Ship(length, (x, y), horizontal != 0))