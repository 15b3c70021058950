"""
Exceptions — Иерархия ошибок операций над полиномами

Все ошибки наследуются от PolynomialError и дополнительно от встроенного
исключения, ближайшего по смыслу (TypeError/ValueError), чтобы вызывающий
код мог ловить их как обычные ошибки аргументов.
"""


class PolynomialError(Exception):
    """Базовая ошибка операций над полиномом."""

    pass


class NullArgumentError(PolynomialError, TypeError):
    """
    Обязательный аргумент (полином или член) не передан.

    Возникает, когда вместо полинома или члена передан None.
    Не восстанавливается локально, всегда пробрасывается вызывающему.
    """

    pass


class InvalidArgumentError(PolynomialError, ValueError):
    """
    Недопустимый аргумент.

    Возникает в add_member при нулевом коэффициенте или при совпадении
    степени с уже существующим членом. Полином при этом не изменяется.

    Нулевым считается любой коэффициент с abs(c) <= EPS_POLY, а не только
    точный 0: иначе в полиноме оказался бы почти нулевой член.
    """

    pass


class EmptyPolynomialError(PolynomialError, ValueError):
    """
    Запрос не определён для пустого полинома.

    Возникает при чтении degree у полинома без членов.
    """

    pass
