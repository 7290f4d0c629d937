"""Custom exceptions for the map generator."""


class MapGenError(Exception):
    """Base exception for map generator errors."""

    pass


class InvalidDimensionsError(MapGenError, ValueError):
    """Raised when a grid is constructed with non-positive dimensions."""

    pass


class MutationLimitError(MapGenError):
    """Raised when a mutation would push a cell past the uint16 range."""

    pass


class InputError(MapGenError):
    """Raised when console input fails to parse or is out of range."""

    pass
