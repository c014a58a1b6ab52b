"""
REPL - интерактивный цикл калькулятора

Читает по одной строке, печатает значение или текст ошибки и продолжает.
Ошибки разбора, вычисления и чтения не завершают цикл; выход - только
по Ctrl+C или концу ввода.
"""

import argparse
import json
import sys
from typing import List, Optional, TextIO

from src.cli.calculator import CalculatorError, calculate, outcome_from_error, try_calculate
from src.cli.config import CalculatorConfig
from src.core.contracts import validate_evaluation_outcome
from src.core.domain.outcome import ErrorOrigin, EvaluationOutcome
from src.core.logging_utils import get_logger, set_log_level
from src.core.math.decimal_bounds import format_decimal

logger = get_logger(__name__)


def render_outcome(outcome: EvaluationOutcome) -> str:
    """JSON-представление outcome, проверенное по контракту."""
    data = outcome.model_dump(mode="json")
    validate_evaluation_outcome(data)
    return json.dumps(data, ensure_ascii=False)


def _evaluate_line(line: str, config: CalculatorConfig) -> str:
    if config.json_output:
        return render_outcome(calculate(line))
    try:
        return format_decimal(try_calculate(line))
    except CalculatorError as e:
        logger.info("Calculation of %r failed: %s", line, e.kind)
        return str(e)


def run_repl(config: CalculatorConfig, stdin: TextIO, stdout: TextIO) -> int:
    """
    Основной цикл.

    Returns:
        Код завершения (0 при Ctrl+C или конце ввода)
    """
    stdout.write(f"{config.banner}\n\n")
    stdout.flush()

    while True:
        try:
            raw = stdin.readline()
            if not raw:
                logger.debug("End of input")
                return 0
            line = raw.rstrip("\r\n")
            output = _evaluate_line(line, config)
        except KeyboardInterrupt:
            logger.debug("Interrupted")
            return 0
        except (OSError, UnicodeDecodeError) as e:
            error = CalculatorError(ErrorOrigin.INPUT, e)
            logger.warning("Failed to read input: %s", e)
            if config.json_output:
                output = render_outcome(outcome_from_error("", error))
            else:
                output = f"Error: {error}"

        stdout.write(f"{output}\n\n")
        stdout.flush()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.cli",
        description="Evaluate arithmetic expressions with exact decimal arithmetic",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        dest="json_output",
        help="Print each outcome as a JSON record",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Root logger level (overrides CALC_LOG_LEVEL)",
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_arg_parser().parse_args(argv)
    config = CalculatorConfig.from_env().with_overrides(
        json_output=args.json_output,
        log_level=args.log_level,
    )
    set_log_level(config.log_level)
    return run_repl(config, stdin or sys.stdin, stdout or sys.stdout)
