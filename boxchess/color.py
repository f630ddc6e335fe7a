"""Side colours."""

from __future__ import annotations

from enum import Enum


class PlayerColor(Enum):
    """The two sides of a chess game."""

    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> PlayerColor:
        """Return the other side."""
        return PlayerColor.BLACK if self is PlayerColor.WHITE else PlayerColor.WHITE