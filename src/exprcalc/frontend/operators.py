from types import MappingProxyType
from typing import Mapping

from .ast_expressions import BinaryOp, UnaryOp

UNARY_OPERATORS: Mapping[str, UnaryOp] = MappingProxyType(
    {
        "+": "pos",
        "-": "neg",
    }
)

_binary_operators_by_level: dict[int, Mapping[str, BinaryOp]] = {
    1: MappingProxyType({"+": "add", "-": "sub"}),
    2: MappingProxyType({"*": "mul", "/": "div", "mod": "mod"}),
    3: MappingProxyType({"**": "pow"}),
}

PRECEDENCE_LEVELS = tuple(sorted(_binary_operators_by_level))


def binary_operators(precedence: int) -> Mapping[str, BinaryOp]:
    """Spelling-to-tag table for the binary operators of one precedence level.

    Level 1 binds loosest (`+ -`), level 3 tightest (`**`).
    """
    try:
        return _binary_operators_by_level[precedence]
    except KeyError:
        raise ValueError(f"Unknown precedence {precedence}") from None


def unary_operator(spelling: str) -> UnaryOp:
    return UNARY_OPERATORS[spelling]


def binary_operator(precedence: int, spelling: str) -> BinaryOp:
    return binary_operators(precedence)[spelling]
