"""
Expression - дерево арифметического выражения (AST)

Node - лист Value(Decimal) либо выражение Expr.
Expr - Add/Sub/Mul/Div над двумя узлами или Neg над одним.

Все узлы неизменяемы (frozen) и сравниваются по значению.
Дерево строится снизу вверх во время разбора, вычисляется один раз
и не разделяется между вызовами.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from src.core.domain.tokens import Operator
from src.core.math.decimal_bounds import is_representable


@dataclass(frozen=True)
class Value:
    """Лист дерева: значение модели Decimal"""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal) or not is_representable(self.value):
            raise ValueError(f"value must be a representable Decimal, got {self.value!r}")

    def __repr__(self) -> str:
        return f"Value({self.value})"


@dataclass(frozen=True)
class BinaryExpr:
    """Бинарная операция над двумя полностью построенными узлами"""

    lhs: "Node"
    rhs: "Node"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.lhs!r}, {self.rhs!r})"


@dataclass(frozen=True, repr=False)
class Add(BinaryExpr):
    """Сложение"""


@dataclass(frozen=True, repr=False)
class Sub(BinaryExpr):
    """Вычитание"""


@dataclass(frozen=True, repr=False)
class Mul(BinaryExpr):
    """Умножение"""


@dataclass(frozen=True, repr=False)
class Div(BinaryExpr):
    """Деление"""


@dataclass(frozen=True)
class Neg:
    """Смена знака (унарный минус)"""

    operand: "Node"

    def __repr__(self) -> str:
        return f"Neg({self.operand!r})"


Expr = Union[Add, Sub, Mul, Div, Neg]
Node = Union[Value, Expr]

_BINARY_BY_OPERATOR = {
    Operator.ADD: Add,
    Operator.SUB: Sub,
    Operator.MUL: Mul,
    Operator.DIV: Div,
}


def combine(operator: Operator, lhs: Node, rhs: Node) -> BinaryExpr:
    """Построение бинарного узла для оператора"""
    return _BINARY_BY_OPERATOR[operator](lhs, rhs)
