"""Screens on which a player lays out the fleet."""

from __future__ import annotations

import logging

import pygame

from seabattle.game import TILE_SIZE, Game, cell_at
from seabattle.player import FLEET, GRID_SIZE, Player
from seabattle.render import TextureManager, draw_board
from seabattle.ship import Cell, Ship

logger = logging.getLogger(__name__)

BOARD_OFFSET = (50.0, 50.0)
BACKGROUND_PATH = "menu_bg_clear.png"
GHOST_FILL = (150, 150, 150, 100)
GRID_FILL = (128, 128, 128, 100)
GRID_OUTLINE = (0, 0, 0)
FRAME_RATE = 60


def _translucent_rect(surface: pygame.Surface, color, rect: pygame.Rect) -> None:
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(color)
    surface.blit(overlay, rect.topleft)


def _draw_ghost(surface: pygame.Surface, cells: list[Cell]) -> None:
    side = max(1, int(TILE_SIZE - 2))
    for gx, gy in cells:
        rect = pygame.Rect(
            round(BOARD_OFFSET[0] + gx * TILE_SIZE),
            round(BOARD_OFFSET[1] + gy * TILE_SIZE),
            side,
            side,
        )
        _translucent_rect(surface, GHOST_FILL, rect)


def _draw_grid(surface: pygame.Surface) -> None:
    side = int(TILE_SIZE)
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            rect = pygame.Rect(
                round(BOARD_OFFSET[0] + col * TILE_SIZE),
                round(BOARD_OFFSET[1] + row * TILE_SIZE),
                side,
                side,
            )
            _translucent_rect(surface, GRID_FILL, rect)
            pygame.draw.rect(surface, GRID_OUTLINE, rect.inflate(2, 2), 1)


def _load_background() -> pygame.Surface | None:
    try:
        return pygame.image.load(BACKGROUND_PATH)
    except (pygame.error, OSError):
        logger.error("failed to load %s", BACKGROUND_PATH)
        return None


def _left_click(event: pygame.event.Event) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and event.button == 1


class PlacementScreen:
    """Places ships of decreasing length, starting with the longest, on a player's board."""

    def __init__(self, font: pygame.font.Font | None, player: Player) -> None:
        self.font = font
        self.player = player
        self.current_ship_length = max(FLEET)
        self.horizontal = True
        self.ghost_position: Cell | None = None

    def rotate(self) -> None:
        """Switch the next ship between horizontal and vertical."""
        self.horizontal = not self.horizontal

    def place(self, cell: Cell) -> bool:
        """Put the next ship at cell; report whether it fitted."""
        if self.is_finished():
            return False
        ship = Ship(self.current_ship_length, tuple(cell), self.horizontal)
        if not self.player.board.add_ship(ship):
            return False
        self.current_ship_length -= 1
        return True

    def is_finished(self) -> bool:
        """Whether every ship of the fleet has been placed."""
        return self.current_ship_length < 1

    def ghost_cells(self) -> list[Cell]:
        """The cells the next ship would cover at the ghost position."""
        if self.ghost_position is None or self.is_finished():
            return []
        return Ship(self.current_ship_length, self.ghost_position, self.horizontal).cells()

    def run(self, screen: pygame.Surface, textures: TextureManager) -> None:
        """Let the player place ships with the mouse; Escape leaves once all are placed."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE and self.is_finished():
                        return
                    if event.key == pygame.K_r:
                        self.rotate()
                if _left_click(event) and self.ghost_position is not None:
                    self.place(self.ghost_position)

            self.ghost_position = cell_at(pygame.mouse.get_pos(), BOARD_OFFSET, TILE_SIZE)

            screen.fill((0, 0, 0))
            draw_board(screen, textures, self.player.board, TILE_SIZE, BOARD_OFFSET, True)
            _draw_ghost(screen, self.ghost_cells())
            pygame.display.flip()
            clock.tick(FRAME_RATE)


class SinglePlayerScreen:
    """Fleet placement that starts a game against the computer once done."""

    def __init__(self, font: pygame.font.Font | None) -> None:
        self.font = font
        self.player = Player("Gracz")
        self.placement = PlacementScreen(font, self.player)

    def run(self, screen: pygame.Surface, textures: TextureManager) -> None:
        """Place the fleet, then play; Escape returns to the caller at any time."""
        background = _load_background()
        placement = self.placement
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return
                    if event.key == pygame.K_r:
                        placement.rotate()
                if (
                    _left_click(event)
                    and placement.ghost_position is not None
                    and placement.place(placement.ghost_position)
                    and placement.is_finished()
                ):
                    Game(self.player).run(screen, textures)
                    return

            placement.ghost_position = cell_at(pygame.mouse.get_pos(), BOARD_OFFSET, TILE_SIZE)

            screen.fill((0, 0, 0))
            if background is not None:
                screen.blit(background, (0, 0))
            _draw_grid(screen)
            draw_board(screen, textures, self.player.board, TILE_SIZE, BOARD_OFFSET, True)
            _draw_ghost(screen, placement.ghost_cells())
            pygame.display.flip()
            clock.tick(FRAME_RATE)