"""Exception types raised by the classification models.

Every error carries a component prefix in its message (``ClassificationSVM:``,
``ClassificationSVM.predict:``, ``fitcnet:`` ...) so callers can tell which
entry point rejected the input. Each type also derives from the closest
builtin, which keeps ``except ValueError`` style handling working.
"""

from __future__ import annotations


class ClassificationError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, component: str, message: str):
        self.component = component
        self.message = message
        super().__init__(f"{component}: {message}")


class ArityError(ClassificationError, TypeError):
    """Raised when arguments are missing or name/value pairs are unbalanced."""


class ShapeError(ClassificationError, ValueError):
    """Raised for row/column count mismatches or empty inputs."""


class OptionTypeError(ClassificationError, TypeError):
    """Raised when an option value (or X/Y) has the wrong type."""


class DomainError(ClassificationError, ValueError):
    """Raised when a value lies outside its allowed range."""


class UnsupportedValueError(ClassificationError, ValueError):
    """Raised when a correctly typed value is not one of the allowed choices."""


class UnknownOptionError(ClassificationError, ValueError):
    """Raised for an unrecognised option name."""


class MissingValueError(ClassificationError, ValueError):
    """Raised when NaN values appear where they are not allowed."""


class FormulaError(ClassificationError, ValueError):
    """Raised when a model formula cannot be parsed or resolved."""


class SolverError(ClassificationError, RuntimeError):
    """Raised when the underlying solver fails during training or prediction."""


__all__ = [
    "ClassificationError",
    "ArityError",
    "ShapeError",
    "OptionTypeError",
    "DomainError",
    "UnsupportedValueError",
    "UnknownOptionError",
    "MissingValueError",
    "FormulaError",
    "SolverError",
]
