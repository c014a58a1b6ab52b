"""
EvaluationOutcome - итог вычисления одной строки

Immutable Pydantic модель для машиночитаемого вывода калькулятора.
Соответствует схеме contracts/schema/evaluation_outcome.json.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class ErrorOrigin(str, Enum):
    """Стадия, на которой произошла ошибка"""

    INPUT = "input"
    PARSE = "parse"
    MATH = "math"


# =============================================================================
# OUTCOME MODEL
# =============================================================================


class EvaluationOutcome(BaseModel):
    """
    Результат вычисления выражения.

    Инварианты:
    - ok=True → result задан, error_kind/error_origin отсутствуют
    - ok=False → result отсутствует, error_kind/error_origin/message заданы
    """

    expression: str = Field(..., description="Исходная строка выражения")
    ok: bool = Field(..., description="True если выражение успешно вычислено")
    result: str | None = Field(
        None,
        pattern=r"^-?\d+(\.\d+)?$",
        validate_default=True,
        description="Значение в позиционной записи",
    )
    error_kind: str | None = Field(None, min_length=1, description="Стабильный код ошибки")
    error_origin: ErrorOrigin | None = Field(None, description="Стадия ошибки")
    message: str | None = Field(
        None, validate_default=True, description="Текст ошибки для пользователя"
    )

    model_config = {"frozen": True}

    @field_validator("result")
    @classmethod
    def validate_result(cls, v: str | None, info) -> str | None:
        """result обязателен только для успешного вычисления"""
        ok = info.data.get("ok")
        if ok and v is None:
            raise ValueError("result is required when ok is true")
        if ok is False and v is not None:
            raise ValueError("result must be empty when ok is false")
        return v

    @field_validator("message")
    @classmethod
    def validate_error_fields(cls, v: str | None, info) -> str | None:
        """Поля ошибки заполняются только при ok=False"""
        ok = info.data.get("ok")
        error_fields = (info.data.get("error_kind"), info.data.get("error_origin"), v)
        if ok and any(field is not None for field in error_fields):
            raise ValueError("error fields must be empty when ok is true")
        if ok is False and any(field is None for field in error_fields):
            raise ValueError("error_kind, error_origin and message are required when ok is false")
        return v
