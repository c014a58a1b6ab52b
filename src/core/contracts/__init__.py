"""
Contract Validation Module

Модуль для валидации JSON контрактов калькулятора.
"""

from .validators import (
    ContractValidator,
    EvaluationOutcomeValidator,
    SchemaLoader,
    validate_evaluation_outcome,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EvaluationOutcomeValidator",
    # Functions
    "validate_evaluation_outcome",
]
