"""Drawing boards and ships onto pygame surfaces."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from seabattle.board import Board
from seabattle.ship import Ship

logger = logging.getLogger(__name__)

TEXTURE_TILE = 40.0
SHIP_LENGTHS = (1, 2, 3, 4)
GRID_FILL = (128, 128, 128, 100)
GRID_OUTLINE = (0, 0, 0)
MISS_FILL = (100, 100, 100, 180)

Offset = tuple[float, float]


class TextureManager:
    """Ship and explosion images, loaded from a directory."""

    def __init__(self) -> None:
        self._ships: dict[int, pygame.Surface] = {}
        self._boom = pygame.Surface((0, 0))

    @staticmethod
    def _load(path: Path) -> pygame.Surface:
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError, FileNotFoundError):
            logger.error("failed to load %s", path)
            return pygame.Surface((0, 0))

    def load_textures(self, directory: str | Path = ".") -> None:
        """Load ship_1.png to ship_4.png and boom.png; missing files become empty images."""
        base = Path(directory)
        for length in SHIP_LENGTHS:
            self._ships[length] = self._load(base / f"ship_{length}.png")
        self._boom = self._load(base / "boom.png")

    def ship_texture(self, length: int) -> pygame.Surface:
        """The image for a ship of the given length; KeyError if there is none."""
        return self._ships[length]

    def boom_texture(self) -> pygame.Surface:
        """The image drawn over hit cells."""
        return self._boom


def _is_empty(image: pygame.Surface) -> bool:
    width, height = image.get_size()
    return width == 0 or height == 0


def _blit_translucent(surface: pygame.Surface, color, rect: pygame.Rect) -> None:
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(color)
    surface.blit(overlay, rect.topleft)


def draw_ship(
    surface: pygame.Surface,
    textures: TextureManager,
    ship: Ship,
    tile_size: float,
    offset: Offset,
) -> None:
    """Draw a ship's image over its cells, turned a quarter for vertical ships."""
    texture = textures.ship_texture(ship.length)
    if _is_empty(texture):
        return
    factor = tile_size / TEXTURE_TILE
    width, height = texture.get_size()
    image = pygame.transform.scale(
        texture, (max(1, round(width * factor)), max(1, round(height * factor)))
    )
    x, y = ship.position
    left = offset[0] + x * tile_size
    top = offset[1] + y * tile_size
    if ship.horizontal:
        surface.blit(image, (round(left), round(top)))
        return
    image = pygame.transform.rotate(image, -90)
    center = (left + tile_size / 2, top + tile_size * ship.length / 2)
    surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))


def draw_board(
    surface: pygame.Surface,
    textures: TextureManager,
    board: Board,
    tile_size: float,
    offset: Offset,
    reveal_ships: bool,
) -> None:
    """Draw the grid, visible ships, hit markers and missed shots."""
    cell_side = max(1, int(tile_size - 2))
    for x in range(board.size):
        for y in range(board.size):
            left = round(offset[0] + x * tile_size)
            top = round(offset[1] + y * tile_size)
            rect = pygame.Rect(left, top, cell_side, cell_side)
            _blit_translucent(surface, GRID_FILL, rect)
            pygame.draw.rect(surface, GRID_OUTLINE, rect.inflate(2, 2), 1)

    for ship in board.ships:
        if reveal_ships or ship.is_sunk():
            draw_ship(surface, textures, ship, tile_size, offset)

    boom = textures.boom_texture()
    if not _is_empty(boom):
        side = max(1, round(tile_size))
        marker = pygame.transform.scale(boom, (side, side))
        for x, y in board.hit_markers:
            surface.blit(
                marker, (round(offset[0] + x * tile_size), round(offset[1] + y * tile_size))
            )

    radius = tile_size / 6
    diameter = max(1, round(radius * 2))
    dot = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
    pygame.draw.circle(dot, MISS_FILL, (diameter / 2, diameter / 2), diameter / 2)
    for x, y in board.missed_shots:
        surface.blit(
            dot,
            (
                round(offset[0] + x * tile_size + tile_size / 3),
                round(offset[1] + y * tile_size + tile_size / 3),
            ),
        )