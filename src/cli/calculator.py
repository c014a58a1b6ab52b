"""
Calculator - один цикл parse → evaluate для строки ввода

try_calculate поднимает CalculatorError с указанием стадии (origin),
calculate никогда не поднимает ошибок разбора и вычисления и возвращает
EvaluationOutcome для машиночитаемого вывода.
"""

from decimal import Decimal

from src.core.domain.outcome import ErrorOrigin, EvaluationOutcome
from src.core.logging_utils import get_logger
from src.core.math.decimal_bounds import format_decimal
from src.engine import EvaluationError, evaluate
from src.parser import ParseError, parse

logger = get_logger(__name__)

INPUT_ERROR_KIND = "input_error"


class CalculatorError(Exception):
    """
    Ошибка одного цикла калькулятора.

    Исходная ошибка доступна через __cause__; текст для пользователя
    совпадает с текстом исходной ошибки.
    """

    def __init__(self, origin: ErrorOrigin, cause: BaseException):
        super().__init__(origin, cause)
        self.origin = origin
        self.cause = cause

    @property
    def kind(self) -> str:
        return getattr(self.cause, "kind", INPUT_ERROR_KIND)

    def __str__(self) -> str:
        return str(self.cause)


def try_calculate(line: str) -> Decimal:
    """
    Разбор и вычисление одной строки.

    Raises:
        CalculatorError: origin=PARSE или MATH, исходная ошибка в __cause__
    """
    try:
        root = parse(line)
    except ParseError as e:
        raise CalculatorError(ErrorOrigin.PARSE, e) from e

    try:
        return evaluate(root)
    except EvaluationError as e:
        raise CalculatorError(ErrorOrigin.MATH, e) from e


def outcome_from_error(expression: str, error: CalculatorError) -> EvaluationOutcome:
    return EvaluationOutcome(
        expression=expression,
        ok=False,
        error_kind=error.kind,
        error_origin=error.origin,
        message=str(error),
    )


def calculate(expression: str) -> EvaluationOutcome:
    """
    Вычисление строки в EvaluationOutcome.

    Examples:
        >>> calculate("1 / 2").result
        '0.5'
        >>> calculate("1 +").error_kind
        'leftover_elements'
    """
    try:
        value = try_calculate(expression)
    except CalculatorError as e:
        logger.info("Calculation of %r failed: %s (%s)", expression, e.kind, e)
        return outcome_from_error(expression, e)

    return EvaluationOutcome(
        expression=expression,
        ok=True,
        result=format_decimal(value),
    )
