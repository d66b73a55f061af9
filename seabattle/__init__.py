"""Battleship board game with a computer opponent and a LAN mode."""

__version__ = "0.1.0"