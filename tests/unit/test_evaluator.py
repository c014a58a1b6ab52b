"""
Тесты для Evaluator

Coverage:
- Базовые выражения end-to-end (parse → evaluate)
- Точность: никакой двоичной плавающей точки
- Классификация ошибок диапазона для Add/Sub/Mul/Div
- Деление на ноль по знаку делимого
- Первая ошибка прерывает вычисление
"""

from decimal import Decimal

import pytest

from src.core.domain.expression import Add, Div, Mul, Neg, Sub, Value
from src.core.math.decimal_bounds import MAX_DECIMAL, MIN_DECIMAL
from src.engine import (
    EvaluationError,
    ExceedsMaximumPossibleValue,
    LessThanMinimumPossibleValue,
    evaluate,
)
from src.parser import parse


def v(number) -> Value:
    return Value(Decimal(number))


MAX = Value(MAX_DECIMAL)
MIN = Value(MIN_DECIMAL)


# =============================================================================
# END-TO-END
# =============================================================================


class TestExpressions:
    """Строка → значение"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1 + 1", "2"),
            ("1 - 1", "0"),
            ("1 * 2", "2"),
            ("1 / 2", "0.5"),
            ("-1", "-1"),
            ("1000", "1000"),
            ("0x539", "1337"),
            ("1 + 2 * 3", "7"),
            ("(1 + 2) * 3", "9"),
            ("2 * -3", "-6"),
            ("1 - -1", "2"),
            ("- - 1", "1"),
            ("-(2 - 5) * 2", "6"),
            ("10 - 4 - 3", "3"),
            ("8 / 4 / 2", "1"),
        ],
    )
    def test_evaluate(self, text: str, expected: str) -> None:
        assert evaluate(parse(text)) == Decimal(expected)

    def test_exact_decimal(self) -> None:
        """0.1 + 0.2 == 0.3 точно"""
        assert evaluate(parse("0.1 + 0.2")) == Decimal("0.3")

    def test_scale_preserved(self) -> None:
        assert str(evaluate(parse("1.50 * 2"))) == "3.00"
        assert str(evaluate(parse("1 / 2"))) == "0.5"

    def test_repeating_fraction(self) -> None:
        assert str(evaluate(parse("1 / 3"))) == "0.3333333333333333333333333333"

    def test_max_literal_round_trip(self) -> None:
        assert evaluate(parse("79228162514264337593543950335")) == MAX_DECIMAL
        assert evaluate(parse("-79228162514264337593543950335")) == MIN_DECIMAL


# =============================================================================
# ОШИБКИ ДИАПАЗОНА
# =============================================================================


class TestOverflow:
    """Add/Sub"""

    def test_max_plus_one(self) -> None:
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(Add(MAX, v(1)))

    def test_min_minus_one(self) -> None:
        with pytest.raises(LessThanMinimumPossibleValue):
            evaluate(Sub(MIN, v(1)))

    def test_from_text(self) -> None:
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(parse("79228162514264337593543950335 + 1"))
        with pytest.raises(LessThanMinimumPossibleValue):
            evaluate(parse("-79228162514264337593543950335 - 1"))

    def test_add_failure_always_exceeds_maximum(self) -> None:
        """Add классифицируется как превышение максимума независимо от знака"""
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(Add(MIN, v(-1)))

    def test_sub_failure_always_below_minimum(self) -> None:
        """Sub классифицируется как выход за минимум независимо от знака"""
        with pytest.raises(LessThanMinimumPossibleValue):
            evaluate(Sub(MAX, v(-1)))


class TestMultiplicationSignLaw:
    """Mul: одинаковые знаки → Exceeds, разные → LessThan"""

    @pytest.mark.parametrize(
        "lhs, rhs, error",
        [
            (MAX, v(2), ExceedsMaximumPossibleValue),
            (MIN, v(-2), ExceedsMaximumPossibleValue),
            (MAX, v(-2), LessThanMinimumPossibleValue),
            (MIN, v(2), LessThanMinimumPossibleValue),
            (v("1e20"), v("1e10"), ExceedsMaximumPossibleValue),
            (v("-1e20"), v("1e10"), LessThanMinimumPossibleValue),
        ],
    )
    def test_sign_law(self, lhs, rhs, error) -> None:
        with pytest.raises(error):
            evaluate(Mul(lhs, rhs))


class TestDivisionByZeroLaw:
    """Div: делимое ≥ 0 → Exceeds, < 0 → LessThan"""

    @pytest.mark.parametrize(
        "text, error",
        [
            ("1 / 0", ExceedsMaximumPossibleValue),
            ("0 / 0", ExceedsMaximumPossibleValue),
            ("-1 / 0", LessThanMinimumPossibleValue),
            ("1 / -0", ExceedsMaximumPossibleValue),
            ("-1 / 0.000", LessThanMinimumPossibleValue),
        ],
    )
    def test_division_by_zero(self, text: str, error) -> None:
        with pytest.raises(error):
            evaluate(parse(text))

    def test_quotient_overflow_uses_dividend_sign(self) -> None:
        """Знак делителя не учитывается"""
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(Div(MAX, v("0.5")))
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(Div(MAX, v("-0.5")))
        with pytest.raises(LessThanMinimumPossibleValue):
            evaluate(Div(MIN, v("0.5")))


class TestErrorPropagation:
    """Короткое замыкание на первой ошибке"""

    def test_neg_propagates(self) -> None:
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(Neg(Add(MAX, v(1))))

    def test_left_operand_first(self) -> None:
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(Sub(Add(MAX, v(1)), Div(v(-1), v(0))))
        with pytest.raises(LessThanMinimumPossibleValue):
            evaluate(Add(Div(v(-1), v(0)), Add(MAX, v(1))))

    def test_errors_are_arithmetic_errors(self) -> None:
        with pytest.raises(ArithmeticError):
            evaluate(parse("1 / 0"))

    def test_display(self) -> None:
        with pytest.raises(EvaluationError) as exc_info:
            evaluate(parse("1 / 0"))
        assert str(exc_info.value) == "Number exceeds maximum value that can be represented."
        assert exc_info.value.kind == "exceeds_maximum_possible_value"

        with pytest.raises(EvaluationError) as exc_info:
            evaluate(parse("-1 / 0"))
        assert str(exc_info.value) == "Number less than minimum value that can be represented."


class TestNodes:
    """Инварианты узлов"""

    def test_value_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Value(Decimal(2**96))

    def test_value_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            Value(Decimal("NaN"))

    def test_unsupported_node(self) -> None:
        with pytest.raises(TypeError):
            evaluate("1")


class TestDeepTrees:
    """Глубокие деревья вычисляются без рекурсии"""

    DEPTH = 5000

    def test_long_additive_chain(self) -> None:
        assert evaluate(parse(" + ".join(["1"] * self.DEPTH))) == Decimal(self.DEPTH)

    def test_long_mixed_chain(self) -> None:
        assert evaluate(parse(" - ".join(["2"] * self.DEPTH))) == Decimal(2 - 2 * (self.DEPTH - 1))

    def test_deeply_nested_groups(self) -> None:
        text = "(" * self.DEPTH + "2 * 3" + ")" * self.DEPTH
        assert evaluate(parse(text)) == Decimal(6)

    def test_long_negation_chain(self) -> None:
        assert evaluate(parse("- " * self.DEPTH + "1")) == Decimal(1)
        assert evaluate(parse("- " * (self.DEPTH + 1) + "1")) == Decimal(-1)

    def test_error_deep_in_chain(self) -> None:
        text = " + ".join(["1"] * self.DEPTH) + " + 1 / 0"
        with pytest.raises(ExceedsMaximumPossibleValue):
            evaluate(parse(text))
