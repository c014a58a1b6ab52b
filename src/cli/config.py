"""Конфигурация интерактивного калькулятора."""

import os
from dataclasses import dataclass, replace
from typing import Optional

from src.core.logging_utils import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

JSON_OUTPUT_ENV = "CALC_JSON_OUTPUT"

DEFAULT_BANNER = (
    "Type an arithmetic expression and press Enter to evaluate. Press Ctrl+C to exit."
)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация REPL.

    - json_output: печатать EvaluationOutcome как JSON вместо текста
    - log_level: уровень root logger
    - banner: приветствие перед первым вводом
    """

    json_output: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    banner: str = DEFAULT_BANNER

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        return cls(
            json_output=os.getenv(JSON_OUTPUT_ENV, "").strip().lower() in _TRUTHY,
            log_level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        )

    def with_overrides(
        self,
        json_output: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> "CalculatorConfig":
        """Флаги командной строки имеют приоритет над окружением."""
        config = self
        if json_output is not None:
            config = replace(config, json_output=json_output)
        if log_level is not None:
            config = replace(config, log_level=log_level.upper())
        return config
