"""Custom exceptions shared by all layers."""


class GameOfLifeError(Exception):
    """Top-level exception for anything raised by this application."""


class InvalidRequestError(GameOfLifeError):
    """Request data is malformed or out of range. Never mutates persisted state."""


class GridShapeError(InvalidRequestError):
    """Array-of-arrays grid whose rows do not all have the same length."""


class BoardNotFoundError(GameOfLifeError):
    """No board is stored under the requested ID."""


class StorageError(GameOfLifeError):
    """The persistence layer could not complete a read or write."""
