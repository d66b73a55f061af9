import pytest

from seabattle.placement import PlacementScreen, SinglePlayerScreen
from seabattle.player import FLEET, Player


@pytest.fixture
def screen():
    return PlacementScreen(None, Player())


def test_starts_with_longest_horizontal_ship(screen):
    assert screen.current_ship_length == max(FLEET)
    assert screen.horizontal is True
    assert screen.is_finished() is False


def test_place_adds_ship_and_shortens_next(screen):
    assert screen.place((0, 0)) is True
    ship = screen.player.ships[0]
    assert ship.length == FLEET[0]
    assert ship.horizontal is True
    assert ship.position == (0, 0)
    assert screen.current_ship_length == FLEET[1]


def test_rotate_makes_next_ship_vertical(screen):
    screen.rotate()
    assert screen.place((2, 3)) is True
    ship = screen.player.ships[0]
    assert ship.horizontal is False
    assert ship.cells() == [(2, 3 + i) for i in range(FLEET[0])]


def test_rotate_twice_restores_orientation(screen):
    screen.rotate()
    screen.rotate()
    assert screen.horizontal is True


def test_overlapping_place_is_refused(screen):
    screen.place((0, 0))
    assert screen.place((1, 0)) is False
    assert screen.current_ship_length == FLEET[1]
    assert len(screen.player.ships) == 1


def test_place_outside_grid_is_refused(screen):
    assert screen.place((8, 0)) is False
    assert screen.player.ships == []
    assert screen.current_ship_length == max(FLEET)


def test_whole_fleet_finishes_placement(screen):
    for row in range(len(FLEET)):
        assert screen.place((0, row * 2)) is True
    assert screen.is_finished() is True
    assert [ship.length for ship in screen.player.ships] == list(FLEET)
    assert screen.place((0, 9)) is False
    assert len(screen.player.ships) == len(FLEET)


def test_ghost_cells_follow_ghost_position(screen):
    assert screen.ghost_cells() == []
    screen.ghost_position = (1, 1)
    assert screen.ghost_cells() == [(1 + i, 1) for i in range(FLEET[0])]


def test_single_player_screen_starts_with_empty_player():
    single = SinglePlayerScreen(None)
    assert single.player.name == "Gracz"
    assert single.player.ships == []
    assert single.placement.player is single.player
    assert single.placement.is_finished() is False