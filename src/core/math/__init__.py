"""
Core math modules

Epsilon-примитивы, общие для всех операций над полиномами.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_POLY,
    # NaN/Inf validation
    is_valid_float,
    # Epsilon comparisons
    is_within_tolerance,
    is_zero,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_POLY",
    # Numerical Safeguards — NaN/Inf validation
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_within_tolerance",
    "is_zero",
]
