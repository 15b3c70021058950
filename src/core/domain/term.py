"""
Term — Член полинома (степень, коэффициент)

Pydantic модель одного члена разреженного полинома.

Степень идентифицирует член внутри полинома, поэтому она неизменяема после
создания (frozen field). Коэффициент изменяемый: присваивание проходит
валидацию (validate_assignment=True).

Term сам по себе допускает нулевой коэффициент. Правило "нулевые члены не
хранятся" обеспечивает Polynomial.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# TERM MODEL
# =============================================================================


class Term(BaseModel):
    """
    Член полинома: coefficient * x^degree.

    Степень и коэффициент — конечные float (NaN/Inf отклоняются).
    """

    degree: float = Field(..., frozen=True, description="Степень члена (неизменяемая)")
    coefficient: float = Field(..., description="Коэффициент члена")

    model_config = {"validate_assignment": True}

    @field_validator("degree", "coefficient")
    @classmethod
    def validate_finite(cls, v: float, info) -> float:
        """Проверка, что значение конечное (не NaN/Inf)"""
        if not is_valid_float(v):
            raise ValueError(f"{info.field_name} must be a finite float, got {v}")
        return v

    @classmethod
    def from_pair(cls, pair: tuple[float, float]) -> "Term":
        """
        Создание члена из пары (degree, coefficient).

        Args:
            pair: Пара (степень, коэффициент)

        Returns:
            Новый Term
        """
        degree, coefficient = pair
        return cls(degree=degree, coefficient=coefficient)

    def as_pair(self) -> tuple[float, float]:
        """Пара (degree, coefficient)"""
        return (self.degree, self.coefficient)
