"""
Tokenizer - ленивое разбиение строки на токены

Токенов всего два класса: статические (операторы и скобки) и динамические
(числовые литералы). Статические токены - односимвольные разделители,
поэтому строка режется по ним, остаток режется по пробелам, а каждый
непустой кусок превращается ровно в один токен.

Пробелы не значимы: "1+1" и "1 + 1" дают одинаковые последовательности.
"""

import re
from decimal import Decimal
from typing import Iterator

from src.core.domain.tokens import GROUP_END, GROUP_START, Operator, Token
from src.core.math.decimal_bounds import parse_decimal, parse_hex
from src.parser.errors import InvalidValue

SEPARATORS = "+-*/()"

HEX_PREFIX = "0x"

# Разделитель - отдельный кусок; всё остальное режется по пробелам
_CHUNK = re.compile(rf"[{re.escape(SEPARATORS)}]|[^{re.escape(SEPARATORS)}\s]+")

_STATIC_TOKENS = {
    "+": Token.of_operator(Operator.ADD),
    "-": Token.of_operator(Operator.SUB),
    "*": Token.of_operator(Operator.MUL),
    "/": Token.of_operator(Operator.DIV),
    "(": GROUP_START,
    ")": GROUP_END,
}


def parse_number(chunk: str) -> Decimal:
    """
    Разбор числового литерала: 0x-префикс → base-16, иначе base-10.

    Raises:
        ValueError: от decimal_bounds, с причиной ошибки
    """
    if chunk.startswith(HEX_PREFIX):
        return parse_hex(chunk[len(HEX_PREFIX):])
    return parse_decimal(chunk)


def tokenize(text: str) -> Iterator[Token]:
    """
    Ленивый однопроходный поток токенов.

    Ошибка литерала поднимается как InvalidValue в момент, когда до этого
    литерала доходит потребитель; токены перед ним уже выданы.

    Args:
        text: Входная строка

    Yields:
        Token в порядке следования во входной строке

    Raises:
        InvalidValue: Если кусок не является ни разделителем, ни числом
    """
    for match in _CHUNK.finditer(text):
        chunk = match.group()
        static = _STATIC_TOKENS.get(chunk)
        if static is not None:
            yield static
            continue
        try:
            value = parse_number(chunk)
        except ValueError as e:
            raise InvalidValue(chunk, str(e)) from e
        yield Token.of_value(value)
