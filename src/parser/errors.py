"""
Parse Errors - таксономия ошибок разбора выражения

Каждая ошибка прерывает текущий разбор целиком: частичных результатов нет.
У каждого класса есть стабильный код kind (для машиночитаемого вывода)
и текст для пользователя (str(error)).
"""

from src.core.domain.expression import Node
from src.core.domain.tokens import Operator


class ParseError(Exception):
    """Базовый класс ошибок разбора"""

    kind: str = "parse_error"
    display: str = "Error: Invalid expression"

    def __str__(self) -> str:
        return self.display


class InvalidValue(ParseError, ValueError):
    """
    Литерал не разобран как число.

    Хранит исходный литерал и причину от decimal_bounds
    (некорректные цифры, переполнение точности, пустой литерал).
    """

    kind = "invalid_value"

    def __init__(self, literal: str, reason: str):
        super().__init__(literal, reason)
        self.literal = literal
        self.reason = reason

    def __str__(self) -> str:
        return f"Error: {self.reason} in {self.literal!r}"


class UninitializedGroup(ParseError):
    """Закрывающая скобка без открывающей"""

    kind = "uninitialized_group"
    display = "Error: Unmatched closing parenthesis"


class UnterminatedGroup(ParseError):
    """Открывающая скобка без закрывающей"""

    kind = "unterminated_group"
    display = "Error: Unterminated group"


class UnexpectedOperator(ParseError):
    """Оператор там, где ожидался узел"""

    kind = "unexpected_operator"

    def __init__(self, operator: Operator):
        super().__init__(operator)
        self.operator = operator

    def __str__(self) -> str:
        return f"Error: Unexpected {self.operator!r} operator"


class UnexpectedNode(ParseError):
    """Узел там, где ожидался оператор"""

    kind = "unexpected_node"

    def __init__(self, node: Node):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Error: Unexpected {self.node!r} node"


class EmptyExpression(ParseError):
    """В выражении или группе нет ни одного токена"""

    kind = "empty"
    display = "Error: Empty expression"


class LeftoverElements(ParseError):
    """Висящий оператор без второго операнда"""

    kind = "leftover_elements"
    display = "Error: Unterminated expression"
