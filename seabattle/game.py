"""A single-player match against the computer."""

from __future__ import annotations

import logging
import math

import pygame

from seabattle.player import GRID_SIZE, AIPlayer, Player
from seabattle.render import TextureManager, draw_board
from seabattle.ship import Cell

logger = logging.getLogger(__name__)

TILE_SIZE = 40.0
PLAYER_OFFSET = (50.0, 50.0)
AI_OFFSET = (550.0, 50.0)
BACKGROUND_PATH = "menu_bg_clear.png"
RESULT_FONT_PATH = "arial.ttf"
RESULT_FONT_SIZE = 72
WIN_COLOR = (0, 255, 0)
LOSE_COLOR = (255, 0, 0)
FRAME_RATE = 60


def cell_at(mouse_pos: tuple[int, int], offset: tuple[float, float], tile_size: float) -> Cell:
    """The grid cell under a mouse position, dividing with truncation toward zero.

    The result may lie outside the grid; callers check the bounds.
    """
    tile = int(tile_size)
    dx = int(mouse_pos[0]) - int(offset[0])
    dy = int(mouse_pos[1]) - int(offset[1])
    return (int(dx / tile), int(dy / tile))


def _on_grid(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def _load_background() -> pygame.Surface | None:
    try:
        return pygame.image.load(BACKGROUND_PATH)
    except (pygame.error, OSError):
        logger.error("failed to load %s", BACKGROUND_PATH)
        return None


class Game:
    """Turns alternate between the human and the computer until a fleet is sunk."""

    def __init__(self, human: Player, ai: AIPlayer | None = None) -> None:
        self.human = human
        self.ai = ai if ai is not None else AIPlayer("Komputer")
        if not self.ai.board.ships:
            self.ai.place_ships_randomly()
        self.player_turn = True

    def player_shoot(self, cell: Cell) -> bool:
        """Fire at the computer's board and pass the turn; report whether it hit."""
        if not self.player_turn:
            raise RuntimeError("it is not the player's turn")
        cell = tuple(cell)
        if not _on_grid(cell):
            raise ValueError(f"cell {cell} is outside the grid")
        hit = self.ai.board.attack(cell)
        self.player_turn = False
        return hit

    def ai_turn(self) -> tuple[Cell, bool]:
        """Let the computer fire at the human's board; return the cell and whether it hit."""
        shot = self.ai.choose_shot()
        hit = self.human.board.attack(shot)
        self.player_turn = True
        return shot, hit

    def winner(self) -> Player | None:
        """The player who has sunk the other's fleet, or None while the game goes on."""
        if self.ai.board.all_ships_sunk():
            return self.human
        if self.human.board.all_ships_sunk():
            return self.ai
        return None

    def run(self, screen: pygame.Surface, textures: TextureManager) -> None:
        """Play the match on screen, then show the result until a click."""
        background = _load_background()
        clock = pygame.time.Clock()

        while True:
            closed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    closed = True
                elif (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                    and self.player_turn
                ):
                    cell = cell_at(event.pos, AI_OFFSET, TILE_SIZE)
                    if _on_grid(cell):
                        self.player_shoot(cell)
            if closed:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                return

            if not self.player_turn:
                self.ai_turn()

            winner = self.winner()

            screen.fill((0, 0, 0))
            if background is not None:
                screen.blit(background, (0, 0))
            draw_board(screen, textures, self.human.board, TILE_SIZE, PLAYER_OFFSET, True)
            draw_board(screen, textures, self.ai.board, TILE_SIZE, AI_OFFSET, False)
            pygame.display.flip()

            if winner is not None:
                break
            clock.tick(FRAME_RATE)

        self._show_result(screen, background, winner is self.human)

    def _show_result(
        self, screen: pygame.Surface, background: pygame.Surface | None, player_won: bool
    ) -> None:
        pygame.font.init()
        try:
            font = pygame.font.Font(RESULT_FONT_PATH, RESULT_FONT_SIZE)
        except (pygame.error, OSError):
            logger.error("failed to load font %s", RESULT_FONT_PATH)
            return

        text = font.render(
            "WYGRANA!" if player_won else "PRZEGRANA!",
            True,
            WIN_COLOR if player_won else LOSE_COLOR,
        )
        clock = pygame.time.Clock()
        start = pygame.time.get_ticks()
        center = (screen.get_width() / 2, screen.get_height() / 2)

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                    return
                if event.type == pygame.MOUSEBUTTONDOWN:
                    return

            elapsed = (pygame.time.get_ticks() - start) / 1000.0
            scale = 1.0 + 0.05 * math.sin(elapsed * 2.0)
            scaled = pygame.transform.rotozoom(text, 0, scale)

            screen.fill((0, 0, 0))
            if background is not None:
                screen.blit(background, (0, 0))
            screen.blit(scaled, scaled.get_rect(center=(round(center[0]), round(center[1]))))
            pygame.display.flip()
            clock.tick(FRAME_RATE)