"""Parser - токенизация и построение дерева выражения.

- Ленивый tokenizer (операторы, скобки, десятичные и 0x-литералы)
- ExpressionBuilder с онлайн-разрешением приоритета
- parse(text) → Node
"""

from .builder import ExpressionBuilder
from .errors import (
    EmptyExpression,
    InvalidValue,
    LeftoverElements,
    ParseError,
    UnexpectedNode,
    UnexpectedOperator,
    UninitializedGroup,
    UnterminatedGroup,
)
from .parser import parse
from .tokenizer import parse_number, tokenize

__all__ = [
    "parse",
    "tokenize",
    "parse_number",
    "ExpressionBuilder",
    # Errors
    "ParseError",
    "InvalidValue",
    "UninitializedGroup",
    "UnterminatedGroup",
    "UnexpectedOperator",
    "UnexpectedNode",
    "EmptyExpression",
    "LeftoverElements",
]
