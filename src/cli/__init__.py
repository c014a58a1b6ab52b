"""CLI - калькулятор поверх parser и engine.

- try_calculate / calculate: один цикл parse → evaluate
- REPL: python -m src.cli [--json] [--log-level LEVEL]
"""

from .calculator import CalculatorError, calculate, try_calculate
from .config import CalculatorConfig
from .repl import main, run_repl

__all__ = [
    "CalculatorConfig",
    "CalculatorError",
    "calculate",
    "main",
    "run_repl",
    "try_calculate",
]
