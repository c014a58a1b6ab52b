"""
Core math modules калькулятора

Точная десятичная арифметика в 96-битном диапазоне.
"""

from src.core.math.decimal_bounds import (
    # Limits
    MAX_DECIMAL,
    MAX_MANTISSA,
    MAX_SCALE,
    MIN_DECIMAL,
    # Fitting
    fit_decimal,
    is_representable,
    # Literals
    parse_decimal,
    parse_hex,
    # Checked arithmetic
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    negate,
    # Formatting
    format_decimal,
)

__all__ = [
    # Decimal Bounds - Limits
    "MAX_DECIMAL",
    "MAX_MANTISSA",
    "MAX_SCALE",
    "MIN_DECIMAL",
    # Decimal Bounds - Fitting
    "fit_decimal",
    "is_representable",
    # Decimal Bounds - Literals
    "parse_decimal",
    "parse_hex",
    # Decimal Bounds - Checked arithmetic
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_sub",
    "negate",
    # Decimal Bounds - Formatting
    "format_decimal",
]
