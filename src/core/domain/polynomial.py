"""
Polynomial — Разреженный полином одной переменной

Полином хранится как список членов Term(degree, coefficient).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Член с abs(coefficient) <= EPS_POLY никогда не хранится
2. Степени сравниваются только через is_within_tolerance (abs(d1 - d2) < EPS_POLY)
3. add_member не допускает двух членов с совпадающей степенью
4. Арифметика (add/subtract/multiply) не изменяет операнды и всегда
   возвращает новый экземпляр

Исключение из инварианта 3: конструктор из последовательности членов не
устраняет дубликаты степеней. Каждый член проходит только фильтр нулевого
коэффициента и добавляется как есть.

Правило "установить коэффициент, удалив нулевой член" реализовано только в
__setitem__. Арифметика накапливает результат через индексатор.
"""

import logging
from typing import Iterable, Iterator

from src.core.domain.exceptions import (
    EmptyPolynomialError,
    InvalidArgumentError,
    NullArgumentError,
)
from src.core.domain.term import Term
from src.core.math.numerical_safeguards import is_within_tolerance, is_zero

logger = logging.getLogger(__name__)


# =============================================================================
# HELPERS
# =============================================================================


def _to_term(member: Term | tuple[float, float] | None) -> Term:
    """
    Приведение члена или пары (degree, coefficient) к собственной копии Term.

    Парой считается только tuple из двух элементов; list и другие
    последовательности отклоняются.

    Raises:
        NullArgumentError: Если member is None
        InvalidArgumentError: Если member не Term и не пара
    """
    if member is None:
        raise NullArgumentError("term must not be None")

    if isinstance(member, Term):
        return member.model_copy()

    if isinstance(member, tuple):
        if len(member) != 2:
            raise InvalidArgumentError(
                f"term pair must be (degree, coefficient), got {len(member)} items"
            )
        return Term.from_pair(member)

    raise InvalidArgumentError(
        f"expected Term or (degree, coefficient) pair, got {type(member).__name__}"
    )


def _is_operand(value: object) -> bool:
    """Поддерживается ли значение как операнд арифметики"""
    return isinstance(value, (Polynomial, tuple))


# =============================================================================
# POLYNOMIAL
# =============================================================================


class Polynomial:
    """
    Разреженный полином одной переменной.

    Создание:
    - Polynomial(): пустой полином
    - Polynomial(terms): из последовательности Term или пар (degree, coefficient)
    - Polynomial.from_term(term) / Polynomial.from_pair(pair): из одного члена

    Доступ:
    - count / len(p), degree
    - find, contains / `degree in p`
    - p[degree] (get/set), to_array

    Арифметика:
    - add / subtract / multiply и операторы +, -, *
    - Второй операнд: Polynomial или пара (degree, coefficient)

    Пара (degree, coefficient) везде принимается только как tuple:
    Polynomial([[2, 3]]), add_member([2, 3]) и p + [2, 3] отклоняются.
    """

    def __init__(self, terms: Iterable[Term | tuple[float, float]] = ()):
        """
        Создание полинома из последовательности членов.

        Каждый член фильтруется независимо: abs(coefficient) <= EPS_POLY
        отбрасывается. Дубликаты степеней НЕ устраняются.

        Args:
            terms: Последовательность Term или пар (degree, coefficient)

        Raises:
            NullArgumentError: Если terms или один из элементов is None
        """
        if terms is None:
            raise NullArgumentError("terms must not be None")

        if isinstance(terms, Term):
            terms = (terms,)

        self._terms: list[Term] = []
        for member in terms:
            term = _to_term(member)
            if not is_zero(term.coefficient):
                self._terms.append(term)

    @classmethod
    def from_term(cls, term: Term) -> "Polynomial":
        """
        Полином из одного члена (пустой, если коэффициент нулевой).

        Raises:
            NullArgumentError: Если term is None
        """
        if term is None:
            raise NullArgumentError("term must not be None")
        return cls((term,))

    @classmethod
    def from_pair(cls, pair: tuple[float, float]) -> "Polynomial":
        """
        Явное преобразование пары (degree, coefficient) в одночленный полином.

        Используется перегрузками арифметики с парой.

        Raises:
            NullArgumentError: Если pair is None
        """
        if pair is None:
            raise NullArgumentError("pair must not be None")
        return cls((pair,))

    def copy(self) -> "Polynomial":
        """Новый полином с копиями всех хранимых членов"""
        return Polynomial(self._terms)

    __copy__ = copy

    # -------------------------------------------------------------------------
    # Term access
    # -------------------------------------------------------------------------

    @property
    def count(self) -> int:
        """Количество хранимых членов"""
        return len(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    @property
    def degree(self) -> float:
        """
        Степень полинома: максимальная степень среди хранимых членов.

        Raises:
            EmptyPolynomialError: Если полином не содержит членов
        """
        if not self._terms:
            raise EmptyPolynomialError("degree is undefined for an empty polynomial")
        return max(term.degree for term in self._terms)

    def _index_of(self, degree: float) -> int | None:
        for index, term in enumerate(self._terms):
            if is_within_tolerance(term.degree, degree):
                return index
        return None

    def find(self, degree: float) -> Term | None:
        """
        Поиск хранимого члена со степенью в пределах EPS_POLY.

        Args:
            degree: Искомая степень

        Returns:
            Хранимый Term или None
        """
        index = self._index_of(degree)
        if index is None:
            return None
        return self._terms[index]

    def contains(self, degree: float) -> bool:
        """True, если find(degree) находит член"""
        return self._index_of(degree) is not None

    def __contains__(self, degree: float) -> bool:
        return self.contains(degree)

    def to_array(self) -> list[Term]:
        """
        Независимый снимок хранимых членов.

        Изменение результата не затрагивает полином, и наоборот.
        """
        return [term.model_copy() for term in self._terms]

    def __iter__(self) -> Iterator[Term]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        pairs = [term.as_pair() for term in self._terms]
        return f"Polynomial({pairs!r})"

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_member(self, member: Term | tuple[float, float]) -> None:
        """
        Добавление нового уникального члена.

        Args:
            member: Term или пара (degree, coefficient)

        Raises:
            NullArgumentError: Если member is None
            InvalidArgumentError: Если коэффициент нулевой или член с такой
                степенью уже существует (полином не изменяется)
        """
        term = _to_term(member)

        if is_zero(term.coefficient):
            logger.debug("add_member rejected: zero coefficient at degree %s", term.degree)
            raise InvalidArgumentError(
                f"coefficient must be non-zero, got {term.coefficient} at degree {term.degree}"
            )

        if self.contains(term.degree):
            logger.debug("add_member rejected: degree %s already present", term.degree)
            raise InvalidArgumentError(f"term with degree {term.degree} already exists")

        self._terms.append(term)

    def remove_member(self, degree: float) -> bool:
        """
        Удаление члена заданной степени.

        Returns:
            True если член был удалён, False если такого члена нет
        """
        index = self._index_of(degree)
        if index is None:
            return False
        del self._terms[index]
        return True

    def __getitem__(self, degree: float) -> float:
        """Коэффициент члена заданной степени или 0.0, если члена нет"""
        term = self.find(degree)
        if term is None:
            return 0.0
        return term.coefficient

    def __setitem__(self, degree: float, value: float) -> None:
        """
        Установка коэффициента члена заданной степени.

        - Ненулевое значение: перезапись коэффициента или вставка нового члена
        - Нулевое значение (abs(value) <= EPS_POLY): удаление члена, если он есть
        """
        index = self._index_of(degree)

        if not is_zero(value):
            if index is not None:
                self._terms[index].coefficient = value
            else:
                self._terms.append(Term(degree=degree, coefficient=value))
        elif index is not None:
            del self._terms[index]

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "Polynomial | tuple[float, float]") -> "Polynomial":
        """
        Сумма с полиномом или парой (degree, coefficient).

        Raises:
            NullArgumentError: Если other is None
        """
        if other is None:
            raise NullArgumentError("polynomial must not be None")
        return add(self, other)

    def subtract(self, other: "Polynomial | tuple[float, float]") -> "Polynomial":
        """
        Разность с полиномом или парой (degree, coefficient).

        Raises:
            NullArgumentError: Если other is None
        """
        if other is None:
            raise NullArgumentError("polynomial must not be None")
        return subtract(self, other)

    def multiply(self, other: "Polynomial | tuple[float, float]") -> "Polynomial":
        """
        Произведение с полиномом или парой (degree, coefficient).

        Raises:
            NullArgumentError: Если other is None
        """
        if other is None:
            raise NullArgumentError("polynomial must not be None")
        return multiply(self, other)

    def __add__(self, other):
        if other is not None and not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        if other is not None and not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        if other is not None and not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        if other is not None and not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        if other is not None and not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        if other is not None and not _is_operand(other):
            return NotImplemented
        return multiply(other, self)


# =============================================================================
# BINARY OPERATIONS
# =============================================================================


def _coerce(operand: Polynomial | tuple[float, float] | None) -> Polynomial:
    """
    Приведение операнда к Polynomial.

    Пара (degree, coefficient) превращается в одночленный полином через
    Polynomial.from_pair.

    Raises:
        NullArgumentError: Если operand is None
        InvalidArgumentError: Если тип операнда не поддерживается
    """
    if operand is None:
        raise NullArgumentError("polynomial must not be None")

    if isinstance(operand, Polynomial):
        return operand

    if isinstance(operand, tuple):
        return Polynomial.from_pair(operand)

    raise InvalidArgumentError(f"unsupported operand type: {type(operand).__name__}")


def add(
    a: Polynomial | tuple[float, float], b: Polynomial | tuple[float, float]
) -> Polynomial:
    """
    Сумма a + b.

    Результат начинается с копии a; коэффициент каждого члена b прибавляется
    через индексатор (член создаётся или удаляется, если сумма обнулилась).

    Raises:
        NullArgumentError: Если a или b is None
    """
    left = _coerce(a)
    right = _coerce(b)

    result = left.copy()
    for term in right.to_array():
        result[term.degree] += term.coefficient

    logger.debug("add: %d + %d terms -> %d terms", left.count, right.count, result.count)
    return result


def subtract(
    a: Polynomial | tuple[float, float], b: Polynomial | tuple[float, float]
) -> Polynomial:
    """
    Разность a - b.

    Как add, но коэффициенты членов b вычитаются.

    Raises:
        NullArgumentError: Если a или b is None
    """
    left = _coerce(a)
    right = _coerce(b)

    result = left.copy()
    for term in right.to_array():
        result[term.degree] -= term.coefficient

    logger.debug("subtract: %d - %d terms -> %d terms", left.count, right.count, result.count)
    return result


def multiply(
    a: Polynomial | tuple[float, float], b: Polynomial | tuple[float, float]
) -> Polynomial:
    """
    Произведение a * b (почленное раскрытие скобок).

    Для каждой пары членов (из копии a и из b) произведение коэффициентов
    накапливается в степени degree_a + degree_b. Пары с нулевым
    коэффициентом пропускаются. Сложность O(n * m).

    Raises:
        NullArgumentError: Если a или b is None
    """
    left = _coerce(a)
    right = _coerce(b)

    left_terms = left.to_array()
    right_terms = right.to_array()

    result = Polynomial()
    for term_a in left_terms:
        for term_b in right_terms:
            if is_zero(term_a.coefficient) or is_zero(term_b.coefficient):
                continue
            result[term_a.degree + term_b.degree] += term_a.coefficient * term_b.coefficient

    logger.debug("multiply: %d * %d terms -> %d terms", left.count, right.count, result.count)
    return result
