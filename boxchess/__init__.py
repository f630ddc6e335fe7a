"""A two-player chess game: board logic, pieces and a pygame window."""

__version__ = "0.1.0"