"""Main menu and entry point of the game."""

from __future__ import annotations

import argparse
import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Sequence

import pygame

from seabattle.board import Board
from seabattle.lan import GameLAN
from seabattle.network import NetworkManager
from seabattle.placement import SinglePlayerScreen
from seabattle.player import GRID_SIZE, Player
from seabattle.render import TextureManager

logger = logging.getLogger(__name__)

WINDOW_SIZE = (1000, 500)
WINDOW_TITLE = "Bitwa Morska Online"
MENU_TEXTURE_PATH = "menu_bg_clear.png"
FONT_PATH = "Roboto-Regular.ttf"
FALLBACK_FONT_PATH = "arial.ttf"
DEFAULT_HOST = "192.168.1.46"
DEFAULT_PORT = 54000
TITLE = "BITWA MORSKA ONLINE"
MENU_LABELS = (
    "1. TRYB JEDNOOSOBOWY",
    "2. GRA ONLINE",
    "3. USTAWIENIA",
    "4. WYJSCIE",
)
HOST_QUESTION = "Czy chcesz byc HOSTEM? (Y/N)"
FONT_ERROR = "Blad: Nie mozna zaladowac czcionki."
MENU_COLOR = (20, 40, 60)
HOVER_COLOR = (255, 255, 0)
QUESTION_COLOR = (255, 255, 255)
ERROR_COLOR = (255, 0, 0)
OPTION_LEFT = 300
OPTION_TOP = 150
OPTION_SPACING = 60
TITLE_CENTER = (WINDOW_SIZE[0] // 2, 60)
QUESTION_POSITION = (250, 450)
FONT_ERROR_POSITION = (200, 200)
FONT_ERROR_DELAY_MS = 3000
FRAME_RATE = 60


class _Choice(IntEnum):
    SINGLE_PLAYER = 0
    ONLINE = 1
    SETTINGS = 2
    EXIT = 3


@dataclass
class _Fonts:
    option: pygame.font.Font
    title: pygame.font.Font
    question: pygame.font.Font
    banner: pygame.font.Font


def hovered_option(rects, mouse_pos) -> int | None:
    """Index of the first rectangle containing the mouse position, or None."""
    for index, rect in enumerate(rects):
        if pygame.Rect(rect).collidepoint(mouse_pos):
            return index
    return None


def _port(value: str) -> int:
    port = int(value)
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return port


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(prog="seabattle", description="Sea battle game.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address of the hosting player")
    parser.add_argument("--port", type=_port, default=DEFAULT_PORT, help="TCP port of the game")
    parser.add_argument("--assets", default=".", help="directory with images and fonts")
    return parser.parse_args(argv)


def _load_fonts(assets: Path) -> _Fonts:
    path = str(assets / FONT_PATH)
    return _Fonts(
        option=pygame.font.Font(path, 36),
        title=pygame.font.Font(path, 60),
        question=pygame.font.Font(path, 24),
        banner=pygame.font.Font(path, 50),
    )


def _draw_font_error(screen: pygame.Surface, assets: Path) -> None:
    screen.fill((0, 0, 0))
    try:
        font = pygame.font.Font(str(assets / FALLBACK_FONT_PATH), 24)
    except (OSError, pygame.error):
        font = None
    if font is not None:
        screen.blit(font.render(FONT_ERROR, True, ERROR_COLOR), FONT_ERROR_POSITION)
    pygame.display.flip()
    pygame.time.wait(FONT_ERROR_DELAY_MS)


def _load_background(assets: Path) -> pygame.Surface | None:
    path = assets / MENU_TEXTURE_PATH
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError):
        logger.warning("menu background not loaded (%s)", path)
        return None
    return pygame.transform.scale(image, WINDOW_SIZE)


def _ask_host(screen: pygame.Surface, font: pygame.font.Font) -> bool | None:
    """Ask whether to host; None if the window was closed meanwhile."""
    screen.blit(font.render(HOST_QUESTION, True, QUESTION_COLOR), QUESTION_POSITION)
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                return None
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_y:
                    return True
                if event.key == pygame.K_n:
                    return False
        pygame.time.wait(10)


def _play_online(
    screen: pygame.Surface, textures: TextureManager, fonts: _Fonts, args: argparse.Namespace
) -> None:
    is_server = _ask_host(screen, fonts.question)
    if is_server is None:
        return
    with NetworkManager() as network:
        try:
            if is_server:
                network.start_server(args.port)
            else:
                network.start_client(args.host, args.port)
        except ConnectionError as exc:
            logger.error("%s", exc)
            return
        local = Player("Gracz", Board(GRID_SIZE))
        remote = Player("Gracz", Board(GRID_SIZE))
        GameLAN(local, remote, network, is_server, fonts.banner).run(screen, textures)


def _run_menu(args: argparse.Namespace) -> int:
    assets = Path(args.assets)
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(WINDOW_TITLE)
    textures = TextureManager()
    textures.load_textures(assets)

    try:
        fonts = _load_fonts(assets)
    except (OSError, pygame.error):
        logger.error("cannot load font %s", FONT_PATH)
        _draw_font_error(screen, assets)
        return 1

    background = _load_background(assets)
    normal = [fonts.option.render(label, True, MENU_COLOR) for label in MENU_LABELS]
    highlighted = [fonts.option.render(label, True, HOVER_COLOR) for label in MENU_LABELS]
    rects = [
        image.get_rect(topleft=(OPTION_LEFT, OPTION_TOP + index * OPTION_SPACING))
        for index, image in enumerate(normal)
    ]
    title = fonts.title.render(TITLE, True, MENU_COLOR)
    start = pygame.time.get_ticks()
    clock = pygame.time.Clock()

    while True:
        elapsed = (pygame.time.get_ticks() - start) / 1000.0
        scale = 1.0 + 0.05 * math.sin(elapsed * 2)
        hovered = hovered_option(rects, pygame.mouse.get_pos())

        screen.fill((0, 0, 0))
        if background is not None:
            screen.blit(background, (0, 0))
        pulsing = pygame.transform.rotozoom(title, 0, scale)
        screen.blit(pulsing, pulsing.get_rect(center=TITLE_CENTER))
        for index, rect in enumerate(rects):
            image = highlighted[index] if index == hovered else normal[index]
            screen.blit(image, rect)
        pygame.display.flip()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and hovered is not None:
                if hovered == _Choice.SINGLE_PLAYER:
                    SinglePlayerScreen(fonts.option).run(screen, textures)
                elif hovered == _Choice.ONLINE:
                    _play_online(screen, textures, fonts, args)
                elif hovered == _Choice.EXIT:
                    return 0
        clock.tick(FRAME_RATE)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game window with its main menu; return the exit status."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    print(f"Current working dir: {Path.cwd()}")
    pygame.init()
    try:
        return _run_menu(args)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())