"""
Parser - построение AST из строки выражения

Поток токенов дополняется синтетическим GroupEnd, поэтому верхний уровень
разбирается так же, как любая вложенная группа. Открывающая скобка кладёт
на стек новый ExpressionBuilder, закрывающая снимает его и передаёт
построенный узел в builder уровнем выше. Глубина вложенности ограничена
только памятью.
"""

from itertools import chain
from typing import Iterator, List

from src.core.domain.expression import Node, Value
from src.core.domain.tokens import GROUP_END, Token, TokenKind
from src.core.logging_utils import get_logger
from src.parser.builder import ExpressionBuilder
from src.parser.errors import InvalidValue, UninitializedGroup, UnterminatedGroup
from src.parser.tokenizer import tokenize

logger = get_logger(__name__)


def parse(text: str) -> Node:
    """
    Разбор строки в корневой узел дерева выражения.

    Args:
        text: Входная строка (одна строка пользовательского ввода)

    Returns:
        Корневой Node

    Raises:
        ParseError: Любая ошибка из таксономии src.parser.errors
    """
    tokens = chain(tokenize(text), [GROUP_END])
    root = _parse_groups(tokens)
    logger.debug("Parsed %r into %s", text, type(root).__name__)
    return root


def _has_more(tokens: Iterator[Token]) -> bool:
    """Остались ли элементы в потоке; некорректный литерал тоже считается элементом."""
    try:
        return next(tokens, None) is not None
    except InvalidValue:
        return True


def _parse_groups(tokens: Iterator[Token]) -> Node:
    """Разбор всех групп до GroupEnd верхнего уровня."""
    # builders[0] - верхний уровень, последний - текущая открытая группа
    builders: List[ExpressionBuilder] = [ExpressionBuilder()]

    for token in tokens:
        builder = builders[-1]

        if token.kind == TokenKind.VALUE:
            builder.add_node(Value(token.value))
        elif token.kind == TokenKind.OPERATOR:
            builder.add_operator(token.operator)
        elif token.kind == TokenKind.GROUP_START:
            builders.append(ExpressionBuilder())
        elif len(builders) > 1:
            builders.pop()
            builders[-1].add_node(builder.build())
        else:
            # Верхний уровень закрывается только синтетическим GroupEnd,
            # который всегда последний
            if _has_more(tokens):
                raise UninitializedGroup()
            return builder.build()

    raise UnterminatedGroup()
