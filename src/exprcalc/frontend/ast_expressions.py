from dataclasses import dataclass
from typing import Literal as TypingLiteral

UnaryOp = TypingLiteral["pos", "neg"]
BinaryOp = TypingLiteral["add", "sub", "mul", "div", "mod", "pow"]


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class Number(Expression):
    value: float


@dataclass(frozen=True, slots=True)
class Unary(Expression):
    op: UnaryOp
    arg: Expression


# A precedence level folds left to right: `first` is the leftmost operand and
# `ops` holds the remaining (operator, operand) pairs in source order.
# Empty `ops` means the node stands for `first` alone.
@dataclass(frozen=True, slots=True)
class Binary(Expression):
    first: Expression
    ops: tuple[tuple[BinaryOp, Expression], ...] = ()


@dataclass(frozen=True, slots=True)
class Call(Expression):
    name: str
    args: tuple[Expression, ...]
