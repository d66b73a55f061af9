# seabattle

A Battleship game for the desktop, built on pygame. Place your fleet on a
10×10 grid, then sink the enemy fleet before it sinks yours. You can play
against the computer or against another player over the local network.
The on-screen texts are in Polish.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
seabattle
```

Options:

- `--host ADDRESS` – address of the hosting player, used when joining an
  online game (default `192.168.1.46`).
- `--port PORT` – TCP port of the online game (default `54000`).
- `--assets DIR` – directory holding the menu images and fonts (default: the
  working directory).

The 1000×500 window opens on a main menu:

1. **Single player.** Place four ships of lengths 4, 3, 2 and 1 by clicking
   on your board; the next ship is shown as a grey outline under the mouse.
   Press `R` to switch between horizontal and vertical placement and `Escape`
   to go back to the menu. After the last ship is placed the battle starts:
   click on the computer's board (on the right) to fire. The computer fires
   back after each of your shots, never twice at the same cell. Enemy ships
   stay hidden until sunk; hits are marked with an explosion image and misses
   with a grey dot. When one fleet is sunk a pulsing "WYGRANA!" or
   "PRZEGRANA!" appears; a click returns to the menu.
2. **Online game.** Press `Y` to host or `N` to join the host given by
   `--host`. The host waits for one connection on `--port`. Each player places
   a fleet (`Escape` finishes once all ships are placed), the fleets are
   exchanged, and then the players take turns firing; the host fires first.
   A player whose own fleet is sunk sees "PRZEGRANA" and the other side is
   told it has won. After the game ends a click returns to the menu.
3. **Settings.** Does nothing.
4. **Exit.**

### Files the game needs

From the `--assets` directory: `ship_1.png` … `ship_4.png`, `boom.png`,
`menu_bg_clear.png` and the `Roboto-Regular.ttf` font. A missing image is
logged and the game carries on without it. A missing `Roboto-Regular.ttf`
shows an error for three seconds and the program exits with status 1.

The single-player screens also read `menu_bg_clear.png` from the working
directory, and the result screen of a single-player game needs `arial.ttf`
there; without it the result screen is skipped.

## Using the library

The game rules live in plain Python classes that need no window:

```python
from seabattle.board import Board
from seabattle.ship import Ship

board = Board(10)
board.add_ship(Ship(3, (2, 4), True))   # occupies (2, 4), (3, 4), (4, 4)
board.attack((3, 4))                    # True: a hit
board.attack((0, 0))                    # False: a miss
board.all_ships_sunk()                  # False
board.serialize_ships()                 # "3,2,4,1;"
```

- `seabattle.ship.Ship` – cells, hits and sinking of one ship.
- `seabattle.board.Board` – ship placement (`add_ship` refuses ships that
  leave the grid or overlap), `attack`, `mark_shot`, and
  `serialize_ships` / `load_ships_from_string` for the `length,x,y,horizontal;`
  text format.
- `seabattle.player.Player` and `seabattle.player.AIPlayer` – the computer
  places its fleet with `place_ships_randomly` and picks new targets with
  `choose_shot`; it accepts its own `random.Random` for repeatable games.
- `seabattle.game.Game` – a match against the computer: `player_shoot`,
  `ai_turn` and `winner`; `cell_at` turns a mouse position into a grid cell.
- `seabattle.placement.PlacementScreen` – fleet placement state: `rotate`,
  `place` and `is_finished`.
- `seabattle.network.NetworkManager` – a blocking TCP connection (as host with
  `start_server` or as client with `start_client`) carrying text messages,
  boards, shots and shot results. Every packet is a 32-bit big-endian length
  followed by its payload; strings are encoded with `encode_string` and read
  with `decode_string`. Failures raise `ConnectionError`. It can be used as a
  context manager.
- `seabattle.lan.GameLAN` – the online match built on `NetworkManager`.
- `seabattle.render` – `TextureManager`, `draw_ship` and `draw_board` for
  drawing onto pygame surfaces.

## What it does not do

- The **Settings** menu entry has no screen behind it.
- The online game has no lobby or discovery: the client needs the host's
  address, and a lost connection ends the match without reconnecting.