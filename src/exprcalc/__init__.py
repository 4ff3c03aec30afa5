from .frontend.ast_expressions import Binary, Call, Expression, Number, Unary
from .frontend.parser import ParseError, parse_expression
from .runtime.core import EvaluationError, RuntimeContext
from .runtime.interpreter import evaluate, run_for_cli

__all__ = [
    "Binary",
    "Call",
    "EvaluationError",
    "Expression",
    "Number",
    "ParseError",
    "RuntimeContext",
    "Unary",
    "evaluate",
    "parse_expression",
    "run_for_cli",
]
