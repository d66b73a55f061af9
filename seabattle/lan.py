"""A two-player match over the network."""

from __future__ import annotations

import logging
import select
import time

import pygame

from seabattle.game import TILE_SIZE, cell_at
from seabattle.network import NetworkManager
from seabattle.placement import PlacementScreen
from seabattle.player import GRID_SIZE, Player
from seabattle.render import TextureManager, draw_board
from seabattle.ship import Cell

logger = logging.getLogger(__name__)

PLAYER_OFFSET = (50.0, 50.0)
ENEMY_OFFSET = (500.0, 50.0)
END_TEXT_POSITION = (250, 400)
END_TEXT_SIZE = 50
END_TEXT_COLOR = (255, 255, 255)
PLACEMENT_POLL_SECONDS = 0.1
FRAME_RATE = 60

PLACEMENT_DONE = "PLACEMENT_DONE"
SHIPS_PREFIX = "SHIPS:"
GAME_OVER_HOST_WINS = "GAME_OVER:HOST_WINS"
GAME_OVER_CLIENT_LOSES = "GAME_OVER:CLIENT_LOSES"
LOSS_TEXT = "PRZEGRANA"
WIN_TEXT = "WYGRANA"


def _on_grid(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


class GameLAN:
    """A match against a remote player; the host shoots first."""

    def __init__(
        self,
        player: Player,
        enemy: Player,
        network: NetworkManager,
        is_server: bool,
        font: pygame.font.Font | None = None,
    ) -> None:
        self.player = player
        self.enemy = enemy
        self.network = network
        self.is_server = is_server
        self.font = font
        self.my_turn = is_server
        self.game_over = False
        self.i_won = False
        self.placement_done = False
        self.opponent_placement_done = False
        self.end_text = ""

    def _receive(self) -> str | None:
        try:
            return self.network.receive_message()
        except ValueError:
            logger.warning("ignoring a malformed message")
            return None

    def _has_pending_data(self) -> bool:
        sock = self.network.socket
        if sock is None:
            return False
        readable, _, _ = select.select([sock], [], [], 0)
        return bool(readable)

    def handle_incoming_messages_during_placement(self) -> str | None:
        """Wait for one message about the opponent's fleet and apply it."""
        message = self._receive()
        if message is None:
            return None
        if message == PLACEMENT_DONE:
            self.opponent_placement_done = True
        elif message.startswith(SHIPS_PREFIX):
            data = message[len(SHIPS_PREFIX):]
            logger.info("received ships: %s", data)
            self.enemy.board.load_ships_from_string(data)
        return message

    def handle_incoming_messages_during_game(self) -> str | None:
        """Wait for one message and apply a game-over notice if it is one."""
        message = self._receive()
        if message == GAME_OVER_HOST_WINS:
            self.game_over = True
            self.i_won = False
            logger.info("received notice of defeat")
        elif message == GAME_OVER_CLIENT_LOSES:
            self.game_over = True
            self.i_won = True
            logger.info("received notice of victory")
        return message

    def fire(self, cell: Cell) -> bool:
        """Shoot at the opponent, record the reported result and pass the turn."""
        if not self.my_turn:
            raise RuntimeError("it is not this player's turn")
        cell = tuple(cell)
        self.network.send_shot(cell)
        hit = self.network.receive_shot_result()
        self.enemy.board.mark_shot(cell, hit)
        self.my_turn = False
        return hit

    def answer_shot(self) -> tuple[Cell, bool]:
        """Take the opponent's shot on the own board, report the result and take the turn."""
        shot = self.network.receive_shot()
        hit = self.player.board.attack(shot)
        self.network.send_shot_result(hit)
        self.my_turn = True
        return shot, hit

    def check_game_over(self) -> bool:
        """Decide the game from the boards and tell the opponent; report whether it is over."""
        if not self.game_over and self.player.board.all_ships_sunk():
            self.game_over = True
            self.i_won = False
            self.network.send_message(GAME_OVER_HOST_WINS)
            self.end_text = LOSS_TEXT
        if not self.game_over and self.is_server and self.enemy.board.all_ships_sunk():
            self.game_over = True
            self.i_won = True
            self.network.send_message(GAME_OVER_CLIENT_LOSES)
            self.end_text = WIN_TEXT
        return self.game_over

    def start_placement_phase(self, screen: pygame.Surface, textures: TextureManager) -> None:
        """Place the own fleet, send it, and wait until the opponent has placed theirs."""
        PlacementScreen(self.font, self.player).run(screen, textures)
        self.placement_done = True
        self.network.send_message(PLACEMENT_DONE)
        self.network.send_message(SHIPS_PREFIX + self.player.board.serialize_ships())
        while not self.opponent_placement_done:
            self.handle_incoming_messages_during_placement()
            time.sleep(PLACEMENT_POLL_SECONDS)

    def run(self, screen: pygame.Surface, textures: TextureManager) -> None:
        """Play the whole match on screen until a click after the end or the window closes."""
        try:
            self.start_placement_phase(screen, textures)
            if pygame.event.peek(pygame.QUIT):
                return
            self._play(screen, textures)
        except ConnectionError as exc:
            logger.error("connection lost: %s", exc)

    def _end_font(self) -> pygame.font.Font:
        if self.font is not None:
            return self.font
        pygame.font.init()
        return pygame.font.Font(None, END_TEXT_SIZE)

    def _play(self, screen: pygame.Surface, textures: TextureManager) -> None:
        end_font = self._end_font()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                    return
                if (
                    not self.game_over
                    and self.my_turn
                    and event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                ):
                    cell = cell_at(event.pos, ENEMY_OFFSET, TILE_SIZE)
                    if _on_grid(cell):
                        self.fire(cell)
                if self.game_over and event.type == pygame.MOUSEBUTTONDOWN:
                    return

            if not self.game_over and not self.my_turn and self._has_pending_data():
                self.answer_shot()

            if self._has_pending_data():
                self.handle_incoming_messages_during_game()

            self.check_game_over()

            screen.fill((0, 0, 0))
            draw_board(screen, textures, self.player.board, TILE_SIZE, PLAYER_OFFSET, True)
            draw_board(screen, textures, self.enemy.board, TILE_SIZE, ENEMY_OFFSET, False)
            if self.game_over and self.end_text:
                text = end_font.render(self.end_text, True, END_TEXT_COLOR)
                screen.blit(text, END_TEXT_POSITION)
            pygame.display.flip()
            clock.tick(FRAME_RATE)