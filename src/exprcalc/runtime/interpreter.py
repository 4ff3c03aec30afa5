import sys
from typing import TextIO, overload

from ..frontend.ast_expressions import Expression
from ..frontend.parser import ParseError, parse_expression
from .core import EvaluationError, RuntimeContext, Value
from .expression_evaluator import eval_expr


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> Value | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        expr = parse_expression(source)
    except ParseError as error:
        print(f"Syntax error: {error}", file=stream)
        return None

    try:
        return evaluate(expr, context)
    except EvaluationError as error:
        print(f"Runtime error: {error}", file=stream)
        return None


@overload
def evaluate(
    expr_or_source: Expression, context: RuntimeContext | None = None
) -> Value: ...


@overload
def evaluate(expr_or_source: str, context: RuntimeContext | None = None) -> Value: ...


def evaluate(
    expr_or_source: Expression | str, context: RuntimeContext | None = None
) -> Value:
    if isinstance(expr_or_source, str):
        expr = parse_expression(expr_or_source)
    else:
        expr = expr_or_source

    return eval_expr(expr, context or RuntimeContext())
