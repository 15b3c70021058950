"""
Numerical Safeguards — Epsilon-примитивы для полиномов

Модуль централизует все сравнения float, которые используются при работе
с разреженными полиномами:
- Epsilon-параметр для коэффициентов и степеней
- NaN/Inf проверка входных значений
- Проверка "коэффициент равен нулю" с учётом толерантности
- Проверка "две степени совпадают" с учётом толерантности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Коэффициент с abs(c) <= EPS_POLY считается нулём
2. Степени с abs(d1 - d2) < EPS_POLY считаются равными
3. Все сравнения степеней в полиноме проходят через is_within_tolerance
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность для коэффициентов и степеней полинома.
# Коэффициенты ниже порога не хранятся, степени ближе порога совпадают.
EPS_POLY: Final[float] = 1e-5


# =============================================================================
# NaN/Inf ПРОВЕРКА
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: float = EPS_POLY) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Граница включительная: abs(value) == tol тоже считается нулём.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_POLY)

    Returns:
        True если abs(value) <= tol

    Examples:
        >>> is_zero(0.0)
        True
        >>> is_zero(1e-6)
        True
        >>> is_zero(-2e-5)
        False
    """
    return abs(value) <= tol


def is_within_tolerance(a: float, b: float, tol: float = EPS_POLY) -> bool:
    """
    Совпадение двух значений с учётом абсолютной толерантности.

    Используется для сравнения степеней членов полинома. Граница строгая:
    значения, отстоящие ровно на tol, различны.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_POLY)

    Returns:
        True если abs(a - b) < tol

    Raises:
        ValueError: Если tol <= 0

    Examples:
        >>> is_within_tolerance(2.0, 2.0 + 1e-6)
        True
        >>> is_within_tolerance(2.0, 2.1)
        False
    """
    if tol <= 0:
        raise ValueError(f"tol must be positive, got {tol}")

    return abs(a - b) < tol
