"""
Domain models and value objects.

Contains the sparse polynomial value type and its term record.
"""

from src.core.domain.exceptions import (
    EmptyPolynomialError,
    InvalidArgumentError,
    NullArgumentError,
    PolynomialError,
)
from src.core.domain.polynomial import Polynomial, add, multiply, subtract
from src.core.domain.term import Term

__all__ = [
    # Term model
    "Term",
    # Polynomial model
    "Polynomial",
    "add",
    "subtract",
    "multiply",
    # Exceptions
    "PolynomialError",
    "NullArgumentError",
    "InvalidArgumentError",
    "EmptyPolynomialError",
]
