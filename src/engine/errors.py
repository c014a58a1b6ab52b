"""
Evaluation Errors - выход результата за представимый диапазон

Деление на ноль отдельного вида не имеет: неограниченное частное
"насыщается" к соответствующей границе диапазона.
"""


class EvaluationError(ArithmeticError):
    """Базовый класс ошибок вычисления"""

    kind: str = "evaluation_error"
    display: str = "Error: Evaluation failed"

    def __str__(self) -> str:
        return self.display


class ExceedsMaximumPossibleValue(EvaluationError):
    """Результат больше MAX_DECIMAL"""

    kind = "exceeds_maximum_possible_value"
    display = "Number exceeds maximum value that can be represented."


class LessThanMinimumPossibleValue(EvaluationError):
    """Результат меньше MIN_DECIMAL"""

    kind = "less_than_minimum_possible_value"
    display = "Number less than minimum value that can be represented."
