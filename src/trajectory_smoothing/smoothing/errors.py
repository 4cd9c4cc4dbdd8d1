"""Error and warning types raised by the smoothing core."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Missing, malformed or out-of-range input to a smoothing operation."""


class NumericalFailure(ArithmeticError):
    """The least-squares solve could not produce a usable fit."""


class DataQualityWarning(UserWarning):
    """Coincident consecutive points were found and corrected."""

    def __init__(self, message: str, index: int = -1, previous=None, current=None) -> None:
        super().__init__(message)
        self.index = index
        self.previous = previous
        self.current = current
