"""Ships placed on a battle grid."""

from __future__ import annotations

Cell = tuple[int, int]


class Ship:
    """A ship covering consecutive cells, horizontally or vertically."""

    def __init__(self, length: int, position: Cell, horizontal: bool) -> None:
        x, y = position
        self.length = length
        self.position: Cell = (x, y)
        self.horizontal = bool(horizontal)
        self._hits = [False] * max(length, 0)

    def __repr__(self) -> str:
        orientation = "horizontal" if self.horizontal else "vertical"
        return f"Ship(length={self.length}, position={self.position}, {orientation})"

    @property
    def hits(self) -> tuple[bool, ...]:
        """Hit state of each segment, from the bow onwards."""
        return tuple(self._hits)

    def cells(self) -> list[Cell]:
        """The cells the ship covers, starting at its position."""
        x, y = self.position
        if self.horizontal:
            return [(x + i, y) for i in range(self.length)]
        return [(x, y + i) for i in range(self.length)]

    def occupies(self, cell: Cell) -> bool:
        """Whether the ship covers the given cell."""
        return tuple(cell) in self.cells()

    def hit_at(self, cell: Cell) -> None:
        """Mark the segment on the given cell as hit; other cells are ignored."""
        try:
            index = self.cells().index(tuple(cell))
        except ValueError:
            return
        self._hits[index] = True

    def is_sunk(self) -> bool:
        """Whether every segment has been hit."""
        return all(self._hits)