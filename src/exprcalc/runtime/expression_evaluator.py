import math
import operator
from typing import Callable

from ..frontend.ast_expressions import Binary, BinaryOp, Call, Expression, Number, Unary
from ..writer import indented_output
from .core import EvaluationError, RuntimeContext, Value
from .functions import lookup_builtin, power, require_arguments


def divide(a: Value, b: Value) -> Value:
    """IEEE 754 division: a zero divisor yields an infinity or nan, never an error."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def truncating_mod(a: Value, b: Value) -> Value:
    """Remainder of both operands truncated toward zero; the sign follows `a`."""
    try:
        dividend, divisor = int(a), int(b)
    except (OverflowError, ValueError):
        raise EvaluationError(f"mod needs finite operands, got {a} and {b}") from None
    if divisor == 0:
        raise EvaluationError("mod by zero")
    remainder = abs(dividend) % abs(divisor)
    return float(-remainder if dividend < 0 else remainder)


_binary_ops: dict[BinaryOp, Callable[[Value, Value], Value]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": divide,
    "mod": truncating_mod,
    "pow": power,
}


def apply_binary(op: BinaryOp, a: Value, b: Value) -> Value:
    try:
        implementation = _binary_ops[op]
    except KeyError:
        raise EvaluationError(f"unknown operator: {op!r}") from None
    return implementation(a, b)


def eval_expr(expr: Expression, context: RuntimeContext | None = None) -> Value:
    context = context or RuntimeContext()

    if isinstance(expr, Number):
        return expr.value

    if isinstance(expr, Unary):
        value = eval_expr(expr.arg, context)
        if expr.op == "pos":
            return value
        if expr.op == "neg":
            return -value
        raise EvaluationError(f"unknown operator: {expr.op!r}")

    if isinstance(expr, Binary):
        result = eval_expr(expr.first, context)
        for op, operand in expr.ops:
            right_value = eval_expr(operand, context)
            left_value, result = result, apply_binary(op, result, right_value)
            context.writer.debugln(f"[{left_value} {op} {right_value} => {result}]")
        return result

    if isinstance(expr, Call):
        return _eval_call(expr, context)

    raise EvaluationError(f"Unsupported expression type: {type(expr).__name__}")


def _eval_call(expr: Call, context: RuntimeContext) -> Value:
    builtin = lookup_builtin(expr.name)
    require_arguments(builtin, len(expr.args))

    context.writer.debugln(f"[call {expr.name}]")
    with indented_output(context.writer):
        args = [eval_expr(arg, context) for arg in expr.args[: builtin.arity]]
    result = builtin(args)
    context.writer.debugln(f"[{expr.name}({', '.join(map(str, args))}) => {result}]")
    return result
