"""
Decimal Bounds - Exact Fixed-Point Arithmetic in a 96-bit Range

Модуль задаёт численную модель калькулятора: точное десятичное число с
целочисленной мантиссой не длиннее 96 бит и масштабом 0–28 знаков после
запятой. Никакой двоичной плавающей точки.

Основа - стандартный decimal.Decimal, но все операции выполняются через
собственный контекст с запасом точности, а результат затем "вписывается"
в модель:
- сохраняется наибольший масштаб ≤ MAX_SCALE, при котором мантисса
  помещается в 96 бит (округление half-even);
- если даже масштаб 0 не помещается, операция неуспешна (None).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все checked_* операции возвращают либо значение в диапазоне
   [MIN_DECIMAL, MAX_DECIMAL], либо None - исключений переполнения нет
2. Деление на ноль → None (классификацию выполняет вызывающий код)
3. Отрицательный ноль нормализуется в 0
4. Арифметика операторов Python (+, -, *) над Decimal здесь не
   используется: контекст по умолчанию округляет до 28 цифр
"""

import re
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
)
from typing import Final, Optional

# =============================================================================
# ГРАНИЦЫ МОДЕЛИ
# =============================================================================

# Максимальная мантисса: 96 бит без знака
MAX_MANTISSA: Final[int] = 2**96 - 1

# Максимальное количество знаков после запятой
MAX_SCALE: Final[int] = 28

# Границы представимого диапазона
MAX_DECIMAL: Final[Decimal] = Decimal(MAX_MANTISSA)
MIN_DECIMAL: Final[Decimal] = Decimal(-MAX_MANTISSA)

# Рабочая точность: произведение двух 29-значных мантисс с масштабом 28
# занимает не более 58 цифр, для деления берём заметный запас
WORKING_PRECISION: Final[int] = 120

_CONTEXT: Final[Context] = Context(
    prec=WORKING_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emax=999_999,
    Emin=-999_999,
    traps=[InvalidOperation, DivisionByZero],
)

# Только ASCII-цифры; "_" допускается между цифрами ("1_000")
_DIGITS = r"[0-9](?:_?[0-9])*"
_DECIMAL_LITERAL = re.compile(rf"[+-]?(?:{_DIGITS}\.?(?:{_DIGITS})?|\.{_DIGITS})")
_HEX_LITERAL = re.compile(r"[0-9a-fA-F]+")


# =============================================================================
# ВПИСЫВАНИЕ В МОДЕЛЬ
# =============================================================================


def _mantissa(value: Decimal, scale: int) -> int:
    return int(value.copy_abs().scaleb(scale, context=_CONTEXT))


def fit_decimal(value: Decimal) -> Optional[Decimal]:
    """
    Вписывание произвольного конечного Decimal в 96-битную модель.

    Масштаб уменьшается, пока мантисса не поместится в MAX_MANTISSA.

    Args:
        value: Точный (или вычисленный с WORKING_PRECISION) результат

    Returns:
        Значение модели или None, если целая часть не помещается

    Examples:
        >>> fit_decimal(Decimal("0.5"))
        Decimal('0.5')
        >>> fit_decimal(Decimal(2**96)) is None
        True
    """
    if not value.is_zero() and value.adjusted() > len(str(MAX_MANTISSA)) - 1:
        return None

    exponent = value.as_tuple().exponent
    scale = min(max(-exponent, 0), MAX_SCALE)

    while True:
        candidate = value.quantize(Decimal(1).scaleb(-scale), context=_CONTEXT)
        if _mantissa(candidate, scale) <= MAX_MANTISSA:
            if candidate.is_zero():
                return candidate.copy_abs()
            return candidate
        if scale == 0:
            return None
        scale -= 1


def is_representable(value: Decimal) -> bool:
    """Проверка, что значение уже является значением модели (без округления)."""
    if not value.is_finite():
        return False
    exponent = value.as_tuple().exponent
    scale = max(-exponent, 0)
    if scale > MAX_SCALE:
        return False
    return _mantissa(value, scale) <= MAX_MANTISSA


# =============================================================================
# РАЗБОР ЛИТЕРАЛОВ
# =============================================================================


def parse_decimal(literal: str) -> Decimal:
    """
    Разбор десятичного литерала: необязательный знак, цифры, одна точка.

    Лишние дробные знаки (больше MAX_SCALE) округляются half-even.
    Подчёркивание допускается только между цифрами и игнорируется.
    Экспоненциальная запись, NaN/Infinity и не-ASCII цифры не допускаются.

    Args:
        literal: Текст литерала без окружающих пробелов

    Returns:
        Значение модели

    Raises:
        ValueError: Если литерал пустой, некорректен или не помещается в 96 бит

    Examples:
        >>> parse_decimal("133.7")
        Decimal('133.7')
        >>> parse_decimal("1.2.3")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: Invalid decimal: two decimal points
    """
    if not literal:
        raise ValueError("Invalid decimal: empty")

    if _DECIMAL_LITERAL.fullmatch(literal) is None:
        if literal.count(".") > 1:
            raise ValueError("Invalid decimal: two decimal points")
        raise ValueError("Invalid decimal: unknown character")

    value = fit_decimal(Decimal(literal.replace("_", "")))
    if value is None:
        raise ValueError("Invalid decimal: overflow from too many digits")
    return value


def parse_hex(digits: str) -> Decimal:
    """
    Разбор шестнадцатеричных цифр (без префикса 0x) в целое значение модели.

    Raises:
        ValueError: Если цифр нет, встречен недопустимый символ
            или значение больше MAX_MANTISSA
    """
    if not digits:
        raise ValueError("Invalid decimal: empty")

    if _HEX_LITERAL.fullmatch(digits) is None:
        raise ValueError("Invalid decimal: invalid character in hexadecimal literal")

    mantissa = int(digits, 16)
    if mantissa > MAX_MANTISSA:
        raise ValueError("Invalid decimal: overflow from too many digits")
    return Decimal(mantissa)


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def checked_add(lhs: Decimal, rhs: Decimal) -> Optional[Decimal]:
    """Сложение; None при выходе за диапазон."""
    return fit_decimal(_CONTEXT.add(lhs, rhs))


def checked_sub(lhs: Decimal, rhs: Decimal) -> Optional[Decimal]:
    """Вычитание; None при выходе за диапазон."""
    return fit_decimal(_CONTEXT.subtract(lhs, rhs))


def checked_mul(lhs: Decimal, rhs: Decimal) -> Optional[Decimal]:
    """Умножение; None при выходе за диапазон."""
    return fit_decimal(_CONTEXT.multiply(lhs, rhs))


def checked_div(lhs: Decimal, rhs: Decimal) -> Optional[Decimal]:
    """
    Деление с округлением частного до MAX_SCALE знаков.

    Returns:
        Частное или None при делении на ноль либо выходе за диапазон

    Examples:
        >>> checked_div(Decimal(1), Decimal(3))
        Decimal('0.3333333333333333333333333333')
        >>> checked_div(Decimal(1), Decimal(0)) is None
        True
    """
    if rhs.is_zero():
        return None
    return fit_decimal(_CONTEXT.divide(lhs, rhs))


def negate(value: Decimal) -> Decimal:
    """Смена знака. Диапазон симметричен, поэтому операция всегда успешна."""
    if value.is_zero():
        return value.copy_abs()
    return value.copy_negate()


def format_decimal(value: Decimal) -> str:
    """
    Позиционная запись без экспоненты, масштаб сохраняется.

    Examples:
        >>> format_decimal(Decimal("0.5"))
        '0.5'
        >>> format_decimal(Decimal("1.000E+6"))
        '1000000'
    """
    if value.as_tuple().exponent > 0:
        value = value.quantize(Decimal(1), context=_CONTEXT)
    return format(value, "f")
