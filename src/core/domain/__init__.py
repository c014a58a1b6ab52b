"""
Domain models and value objects.

Contains tokens, the expression tree and the evaluation outcome record.
"""

from src.core.domain.expression import (
    Add,
    BinaryExpr,
    Div,
    Expr,
    Mul,
    Neg,
    Node,
    Sub,
    Value,
    combine,
)
from src.core.domain.outcome import ErrorOrigin, EvaluationOutcome
from src.core.domain.tokens import (
    GROUP_END,
    GROUP_START,
    Operator,
    Token,
    TokenKind,
)

__all__ = [
    # Tokens
    "Operator",
    "Token",
    "TokenKind",
    "GROUP_START",
    "GROUP_END",
    # Expression tree
    "Node",
    "Expr",
    "Value",
    "BinaryExpr",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Neg",
    "combine",
    # Outcome
    "EvaluationOutcome",
    "ErrorOrigin",
]
