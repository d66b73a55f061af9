import pytest

from seabattle.board import Board
from seabattle.ship import Ship


def test_add_ship_within_bounds():
    board = Board(10)
    assert board.add_ship(Ship(4, (0, 0), True))
    assert len(board.ships) == 1


def test_add_ship_out_of_bounds_rejected():
    board = Board(10)
    assert not board.add_ship(Ship(4, (7, 0), True))
    assert not board.add_ship(Ship(3, (0, 8), False))
    assert board.ships == []


def test_add_overlapping_ship_rejected():
    board = Board(10)
    assert board.add_ship(Ship(3, (2, 2), True))
    assert not board.add_ship(Ship(3, (3, 0), False))
    assert len(board.ships) == 1


def test_cell_occupancy():
    board = Board(10)
    ship = Ship(2, (5, 5), False)
    board.add_ship(ship)
    for cell in ship.cells():
        assert board.is_cell_occupied(cell)
        assert board.is_cell_hit(cell)
    assert not board.is_cell_occupied((0, 0))
    assert not board.is_cell_hit((0, 0))


def test_attack_hit_and_miss_markers():
    board = Board(10)
    board.add_ship(Ship(2, (0, 0), True))
    assert board.attack((0, 0))
    assert not board.attack((9, 9))
    assert board.hit_markers == [(0, 0)]
    assert board.missed_shots == [(9, 9)]


def test_all_ships_sunk_after_attacks():
    board = Board(10)
    ships = [Ship(2, (0, 0), True), Ship(1, (5, 5), True)]
    for ship in ships:
        board.add_ship(ship)
    assert not board.all_ships_sunk()
    for ship in ships:
        for cell in ship.cells():
            board.attack(cell)
    assert board.all_ships_sunk()


def test_empty_board_counts_as_sunk():
    assert Board(10).all_ships_sunk()


def test_mark_shot_does_not_touch_ships():
    board = Board(10)
    ship = Ship(1, (3, 3), True)
    board.add_ship(ship)
    board.mark_shot((3, 3), True)
    board.mark_shot((4, 4), False)
    assert board.hit_markers == [(3, 3)]
    assert board.missed_shots == [(4, 4)]
    assert not ship.is_sunk()


def test_serialize_format():
    board = Board(10)
    board.add_ship(Ship(4, (0, 0), True))
    board.add_ship(Ship(1, (2, 3), False))
    assert board.serialize_ships() == "4,0,0,1;1,2,3,0;"


def test_serialize_load_round_trip():
    source = Board(10)
    for ship in (Ship(4, (1, 1), True), Ship(3, (0, 4), False), Ship(2, (6, 6), True)):
        source.add_ship(ship)
    target = Board(10)
    target.load_ships_from_string(source.serialize_ships())
    assert [(s.length, s.position, s.horizontal) for s in target.ships] == [
        (s.length, s.position, s.horizontal) for s in source.ships
    ]


def test_load_replaces_existing_ships():
    board = Board(10)
    board.add_ship(Ship(4, (0, 0), True))
    board.load_ships_from_string("1,9,9,0;")
    assert [(s.length, s.position) for s in board.ships] == [(1, (9, 9))]


def test_load_skips_malformed_and_colliding_records():
    board = Board(10)
    board.load_ships_from_string("2,0,0,1;;3,0,0;2,1,0,0;1,5,5,1")
    assert [(s.length, s.position) for s in board.ships] == [(2, (0, 0)), (1, (5, 5))]


def test_load_rejects_non_integer_field():
    with pytest.raises(ValueError):
        Board(10).load_ships_from_string("2,x,0,1;")


def test_load_empty_string_clears():
    board = Board(10)
    board.add_ship(Ship(1, (0, 0), True))
    board.load_ships_from_string("")
    assert board.ships == []