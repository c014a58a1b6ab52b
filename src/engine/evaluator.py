"""
Evaluator - вычисление дерева выражения в точное значение Decimal

Дерево обходится в глубину: сначала левый операнд, затем правый.
Первая же ошибка прерывает вычисление (ошибки не агрегируются).

Классификация ошибок диапазона:
- Add: переполнение → ExceedsMaximumPossibleValue
- Sub: переполнение → LessThanMinimumPossibleValue
- Mul: одинаковые знаки операндов → Exceeds..., разные → LessThan...
- Div (включая деление на ноль): делимое ≥ 0 → Exceeds..., < 0 → LessThan...
- Neg: ошибок не бывает, диапазон симметричен
"""

from decimal import Decimal
from typing import List, Tuple

from src.core.domain.expression import Add, Div, Mul, Neg, Node, Sub, Value
from src.core.logging_utils import get_logger
from src.core.math.decimal_bounds import (
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    negate,
)
from src.engine.errors import (
    EvaluationError,
    ExceedsMaximumPossibleValue,
    LessThanMinimumPossibleValue,
)

logger = get_logger(__name__)

_ZERO = Decimal(0)


def _overflow_for_product(lhs: Decimal, rhs: Decimal) -> EvaluationError:
    if (lhs < _ZERO) == (rhs < _ZERO):
        return ExceedsMaximumPossibleValue()
    return LessThanMinimumPossibleValue()


def _overflow_for_quotient(lhs: Decimal) -> EvaluationError:
    if lhs >= _ZERO:
        return ExceedsMaximumPossibleValue()
    return LessThanMinimumPossibleValue()


def _apply(node: Node, lhs: Decimal, rhs: Decimal) -> Decimal:
    """Применение бинарной операции к уже вычисленным операндам."""
    if isinstance(node, Add):
        result = checked_add(lhs, rhs)
        if result is None:
            raise ExceedsMaximumPossibleValue()
    elif isinstance(node, Sub):
        result = checked_sub(lhs, rhs)
        if result is None:
            raise LessThanMinimumPossibleValue()
    elif isinstance(node, Mul):
        result = checked_mul(lhs, rhs)
        if result is None:
            raise _overflow_for_product(lhs, rhs)
    else:
        result = checked_div(lhs, rhs)
        if result is None:
            raise _overflow_for_quotient(lhs)
    return result


def evaluate(node: Node) -> Decimal:
    """
    Вычисление узла.

    Обход выполняется явным стеком, поэтому глубина дерева (длинные цепочки
    Add/Sub, вложенные скобки, повторный унарный минус) не ограничена
    глубиной рекурсии интерпретатора.

    Args:
        node: Корень дерева (или любой поддерево)

    Returns:
        Точное значение модели Decimal

    Raises:
        ExceedsMaximumPossibleValue: Результат (или промежуточный) выше максимума
        LessThanMinimumPossibleValue: Результат (или промежуточный) ниже минимума

    Examples:
        >>> from src.parser import parse
        >>> evaluate(parse("1 + 2 * 3"))
        Decimal('7')
    """
    values: List[Decimal] = []
    # (узел, операнды уже вычислены)
    pending: List[Tuple[Node, bool]] = [(node, False)]

    while pending:
        current, ready = pending.pop()

        if isinstance(current, Value):
            values.append(current.value)
            continue

        if isinstance(current, Neg):
            if ready:
                values.append(negate(values.pop()))
            else:
                pending.append((current, True))
                pending.append((current.operand, False))
            continue

        if not isinstance(current, (Add, Sub, Mul, Div)):
            raise TypeError(f"Unsupported node type: {type(current).__name__}")

        if not ready:
            # Левый операнд снимается со стека первым
            pending.append((current, True))
            pending.append((current.rhs, False))
            pending.append((current.lhs, False))
            continue

        rhs = values.pop()
        lhs = values.pop()
        result = _apply(current, lhs, rhs)
        logger.debug("%s(%s, %s) = %s", type(current).__name__, lhs, rhs, result)
        values.append(result)

    return values.pop()
