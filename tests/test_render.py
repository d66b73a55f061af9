import pygame
import pytest

from seabattle.board import Board
from seabattle.render import TextureManager, draw_board, draw_ship
from seabattle.ship import Ship

RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def textures(tmp_path):
    for length in range(1, 5):
        image = pygame.Surface((40 * length, 40))
        image.fill(RED)
        pygame.image.save(image, str(tmp_path / f"ship_{length}.png"))
    boom = pygame.Surface((10, 10))
    boom.fill(BLUE)
    pygame.image.save(boom, str(tmp_path / "boom.png"))
    manager = TextureManager()
    manager.load_textures(tmp_path)
    return manager


def _canvas():
    surface = pygame.Surface((500, 500))
    surface.fill((0, 0, 0))
    return surface


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_ship_texture_before_loading_raises():
    with pytest.raises(KeyError):
        TextureManager().ship_texture(1)


def test_missing_files_give_empty_images(tmp_path):
    manager = TextureManager()
    manager.load_textures(tmp_path)
    assert manager.ship_texture(3).get_size() == (0, 0)
    assert manager.boom_texture().get_size() == (0, 0)


def test_loaded_textures_keep_their_size(textures):
    for length in range(1, 5):
        assert textures.ship_texture(length).get_size() == (40 * length, 40)
    assert textures.boom_texture().get_size() == (10, 10)
    with pytest.raises(KeyError):
        textures.ship_texture(5)


def test_draw_horizontal_ship(textures):
    surface = _canvas()
    draw_ship(surface, textures, Ship(3, (1, 2), True), 40, (0, 0))
    for cell_x, cell_y in Ship(3, (1, 2), True).cells():
        assert _rgb(surface, (cell_x * 40 + 20, cell_y * 40 + 20)) == RED
    assert _rgb(surface, (20, 100)) == (0, 0, 0)
    assert _rgb(surface, (180, 100)) == (0, 0, 0)


def test_draw_vertical_ship_covers_its_cells(textures):
    surface = _canvas()
    ship = Ship(3, (1, 1), False)
    draw_ship(surface, textures, ship, 40, (0, 0))
    for cell_x, cell_y in ship.cells():
        assert _rgb(surface, (cell_x * 40 + 20, cell_y * 40 + 20)) == RED
    assert _rgb(surface, (100, 60)) == (0, 0, 0)
    assert _rgb(surface, (60, 180)) == (0, 0, 0)


def test_draw_ship_respects_offset(textures):
    surface = _canvas()
    draw_ship(surface, textures, Ship(1, (0, 0), True), 40, (50, 50))
    assert _rgb(surface, (70, 70)) == RED
    assert _rgb(surface, (20, 20)) == (0, 0, 0)


def test_hidden_ship_not_drawn(textures):
    board = Board(10)
    board.add_ship(Ship(2, (0, 0), True))
    surface = _canvas()
    draw_board(surface, textures, board, 40, (0, 0), False)
    assert _rgb(surface, (20, 20)) == _rgb(surface, (220, 220))
    assert _rgb(surface, (20, 20)) != (0, 0, 0)


def test_revealed_ship_drawn(textures):
    board = Board(10)
    board.add_ship(Ship(2, (0, 0), True))
    surface = _canvas()
    draw_board(surface, textures, board, 40, (0, 0), True)
    assert _rgb(surface, (20, 20)) == RED
    assert _rgb(surface, (60, 20)) == RED


def test_sunk_ship_drawn_even_when_hidden(textures):
    board = Board(10)
    board.add_ship(Ship(1, (4, 4), True))
    board.add_ship(Ship(1, (6, 6), True))
    board.attack((4, 4))
    surface = pygame.Surface((500, 500))
    draw_board(surface, textures, board, 40, (0, 0), False)
    # The hit marker covers the cell; the ship beneath it is drawn first.
    assert _rgb(surface, (180, 180)) == BLUE
    assert _rgb(surface, (260, 260)) == _rgb(surface, (300, 20))


def test_hit_marker_and_miss_dot(textures):
    board = Board(10)
    board.mark_shot((2, 2), True)
    board.mark_shot((5, 5), False)
    surface = _canvas()
    draw_board(surface, textures, board, 40, (0, 0), False)
    assert _rgb(surface, (85, 85)) == BLUE
    assert _rgb(surface, (100, 100)) == BLUE
    empty_centre = _rgb(surface, (300, 20))
    assert _rgb(surface, (220, 220)) != empty_centre
    assert _rgb(surface, (205, 205)) == _rgb(surface, (285, 5))


def test_grid_outline_is_black_between_cells(textures):
    board = Board(10)
    surface = pygame.Surface((500, 500))
    surface.fill((255, 255, 255))
    draw_board(surface, textures, board, 40, (0, 0), False)
    assert _rgb(surface, (39, 20)) == (0, 0, 0)
    assert _rgb(surface, (20, 20)) == _rgb(surface, (380, 380))
    assert _rgb(surface, (450, 450)) == (255, 255, 255)