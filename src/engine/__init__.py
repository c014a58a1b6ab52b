"""Engine - вычисление дерева выражения с контролем диапазона."""

from .errors import (
    EvaluationError,
    ExceedsMaximumPossibleValue,
    LessThanMinimumPossibleValue,
)
from .evaluator import evaluate

__all__ = [
    "evaluate",
    "EvaluationError",
    "ExceedsMaximumPossibleValue",
    "LessThanMinimumPossibleValue",
]
