from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import UnexpectedInput

from .ast_expressions import Binary, BinaryOp, Call, Expression, Number, Unary
from .operators import binary_operator, unary_operator

DEFAULT_MAX_DEPTH = 200


class ParseError(ValueError):
    """Raised when the source is not a complete, well-formed expression."""

    def __init__(self, source: str, position: int, message: str | None = None) -> None:
        self.source = source
        self.position = position
        self.remainder = source[position:]
        super().__init__(message or f"Failed at: `{self.remainder}`")


class AstTransformer(Transformer[Token, object]):
    def start(self, children: list[object]) -> Expression:
        [expr] = children
        return self._as_expression(expr)

    def number(self, children: list[object]) -> Number:
        [number] = children
        assert isinstance(number, Token)
        return Number(float(str(number)))

    def unary_op(self, children: list[object]) -> str:
        return self._spelling(children)

    def unary(self, children: list[object]) -> Unary:
        [spelling, arg] = children
        assert isinstance(spelling, str)
        return Unary(unary_operator(spelling), self._as_expression(arg))

    def add_op(self, children: list[object]) -> BinaryOp:
        return binary_operator(1, self._spelling(children))

    def mul_op(self, children: list[object]) -> BinaryOp:
        return binary_operator(2, self._spelling(children))

    def pow_op(self, children: list[object]) -> BinaryOp:
        return binary_operator(3, self._spelling(children))

    def binary_1(self, children: list[object]) -> Binary:
        return self._binary(children)

    def binary_2(self, children: list[object]) -> Binary:
        return self._binary(children)

    def binary_3(self, children: list[object]) -> Binary:
        return self._binary(children)

    def _binary(self, children: list[object]) -> Binary:
        first, *rest = children
        ops: list[tuple[BinaryOp, Expression]] = []
        for op, operand in zip(rest[::2], rest[1::2]):
            ops.append((cast(BinaryOp, op), self._as_expression(operand)))
        return Binary(self._as_expression(first), tuple(ops))

    def arguments(self, children: list[object]) -> tuple[Expression, ...]:
        return tuple(self._as_expression(child) for child in children)

    def call(self, children: list[object]) -> Call:
        [name, args] = children
        assert isinstance(name, Token)
        assert isinstance(args, tuple)
        return Call(name=str(name), args=cast(tuple[Expression, ...], args))

    def _spelling(self, children: list[object]) -> str:
        [token] = children
        assert isinstance(token, Token)
        return str(token)

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value


def _load_grammar_text() -> str:
    grammar_file = files("exprcalc.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


# The transformer runs while the LALR parser reduces, so building the tree
# never recurses, however deeply the source is nested.
@lru_cache(maxsize=1)
def _get_expression_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr", transformer=AstTransformer())


def parse_tree(source: str) -> Tree[Token]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[Token], tree)


def parse_expression(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expression:
    parser: Any = _get_expression_parser()
    try:
        expr = parser.parse(source)
    except UnexpectedInput as error:
        raise ParseError(source, _error_position(source, error)) from error

    assert isinstance(expr, Expression)
    depth = expression_depth(expr)
    if depth > max_depth:
        raise ParseError(
            source,
            0,
            f"Expression nesting depth {depth} exceeds the limit of {max_depth}",
        )
    return expr


def expression_depth(expr: Expression) -> int:
    """Number of nodes on the longest root-to-leaf path, computed iteratively."""
    deepest = 0
    pending: list[tuple[Expression, int]] = [(expr, 1)]
    while pending:
        node, depth = pending.pop()
        deepest = max(deepest, depth)
        pending.extend((child, depth + 1) for child in _children(node))
    return deepest


def _children(expr: Expression) -> list[Expression]:
    if isinstance(expr, Unary):
        return [expr.arg]
    if isinstance(expr, Binary):
        return [expr.first, *(operand for _, operand in expr.ops)]
    if isinstance(expr, Call):
        return list(expr.args)
    return []


# When the input ends too early lark reports the end marker at the position of
# the last token it read, so the remainder still points at the dangling part.
def _error_position(source: str, error: UnexpectedInput) -> int:
    position = getattr(error, "pos_in_stream", None)
    if not isinstance(position, int) or position < 0:
        return len(source)
    return min(position, len(source))
