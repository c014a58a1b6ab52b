"""
Expression Builder - онлайн-свёртка буфера с учётом приоритета операторов

Builder принимает узлы и операторы строго в порядке поступления и хранит
их в буфере (deque). Приоритет разрешается без отдельного прохода:
- Mul/Div сворачиваются сразу, как только пришёл правый операнд;
- Add/Sub откладываются до build(), потому что следующий оператор
  может оказаться мультипликативным;
- Sub в начале группы или сразу после другого оператора - унарный минус.

Допустимые формы буфера: Node, Operator, Node, Operator, ...
(с возможными цепочками Sub после оператора или в начале).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок свёртки (мультипликативные сразу, аддитивные в конце) задаёт
   приоритет; перестановка шагов меняет семантику
2. Наружу выходят только полностью построенные узлы
3. Любая ошибка терминальна для текущего разбора
"""

from collections import deque
from typing import Deque, Union

from src.core.domain.expression import Neg, Node, combine
from src.core.domain.tokens import Operator
from src.parser.errors import (
    EmptyExpression,
    LeftoverElements,
    UnexpectedNode,
    UnexpectedOperator,
)

Element = Union[Node, Operator]


def _is_operator(element: Element) -> bool:
    return isinstance(element, Operator)


class ExpressionBuilder:
    """Построитель AST для одной группы (одного уровня скобок)."""

    def __init__(self) -> None:
        self._buffer: Deque[Element] = deque()

    def __len__(self) -> int:
        return len(self._buffer)

    def add_node(self, node: Node) -> None:
        """
        Добавление узла. Результат зависит от текущего хвоста буфера.

        Унарный минус и Mul/Div сворачиваются, а получившийся узел
        вставляется заново по тем же правилам.

        Raises:
            UnexpectedNode: Если буфер не пуст и не заканчивается оператором
        """
        buffer = self._buffer

        while buffer:
            last = buffer[-1]
            if not _is_operator(last):
                raise UnexpectedNode(node)

            if len(buffer) == 1 or _is_operator(buffer[-2]):
                # Sub в начале или после оператора - унарный
                if last is not Operator.SUB:
                    raise UnexpectedNode(node)
                buffer.pop()
                node = Neg(node)
                continue

            if last.is_multiplicative:
                buffer.pop()
                lhs = buffer.pop()
                node = combine(last, lhs, node)
                continue

            # Add/Sub откладываются до build()
            break

        buffer.append(node)

    def add_operator(self, operator: Operator) -> None:
        """
        Добавление оператора. Допустим только после узла,
        кроме Sub, который может начинать цепочку унарных минусов.

        Raises:
            UnexpectedOperator: Если оператор стоит на месте узла
        """
        if operator is not Operator.SUB and (
            not self._buffer or _is_operator(self._buffer[-1])
        ):
            raise UnexpectedOperator(operator)
        self._buffer.append(operator)

    def build(self) -> Node:
        """
        Свёртка оставшихся Add/Sub слева направо в корневой узел.

        Raises:
            EmptyExpression: Буфер пуст
            UnexpectedOperator: В буфере единственный оператор
            LeftoverElements: Висящий оператор без правого операнда
        """
        buffer = self._buffer

        if not buffer:
            raise EmptyExpression()

        if len(buffer) == 1:
            element = buffer.pop()
            if _is_operator(element):
                raise UnexpectedOperator(element)
            return element

        if len(buffer) == 2 or _is_operator(buffer[-1]):
            raise LeftoverElements()

        root = buffer.popleft()
        while buffer:
            operator = buffer.popleft()
            rhs = buffer.popleft()
            root = combine(operator, root, rhs)
        return root
