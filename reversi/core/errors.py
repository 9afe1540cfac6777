class ReversiError(Exception):
    """Base exception for the engine."""


class InvalidSizeError(ReversiError, ValueError):
    """Board size is not a positive even integer."""


class OutOfBoundsError(ReversiError, IndexError):
    """Coordinate outside the board."""
