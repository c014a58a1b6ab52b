"""
Tokens - лексические единицы арифметического выражения

Токен - это значение (Decimal), оператор или граница группы.
Токены не ссылаются друг на друга и не хранят позицию во входной строке.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Бинарный оператор (Sub также может быть унарным минусом)"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def is_multiplicative(self) -> bool:
        """Mul/Div сворачиваются немедленно, Add/Sub откладываются до build()"""
        return self in (Operator.MUL, Operator.DIV)

    def __repr__(self) -> str:
        return self.name.capitalize()


class TokenKind(str, Enum):
    """Вид токена"""

    VALUE = "value"
    OPERATOR = "operator"
    GROUP_START = "group_start"
    GROUP_END = "group_end"


# =============================================================================
# TOKEN
# =============================================================================


@dataclass(frozen=True)
class Token:
    """
    Лексическая единица.

    Payload зависит от kind:
    - VALUE: value
    - OPERATOR: operator
    - GROUP_START / GROUP_END: без payload
    """

    kind: TokenKind
    value: Optional[Decimal] = None
    operator: Optional[Operator] = None

    @classmethod
    def of_value(cls, value: Decimal) -> "Token":
        return cls(kind=TokenKind.VALUE, value=value)

    @classmethod
    def of_operator(cls, operator: Operator) -> "Token":
        return cls(kind=TokenKind.OPERATOR, operator=operator)

    def __repr__(self) -> str:
        if self.kind == TokenKind.VALUE:
            return f"Value({self.value})"
        if self.kind == TokenKind.OPERATOR:
            return f"Operator({self.operator!r})"
        return "GroupStart" if self.kind == TokenKind.GROUP_START else "GroupEnd"


GROUP_START = Token(kind=TokenKind.GROUP_START)
GROUP_END = Token(kind=TokenKind.GROUP_END)
