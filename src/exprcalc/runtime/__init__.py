from .core import EvaluationError, RuntimeContext
from .interpreter import evaluate, run_for_cli

__all__ = ["EvaluationError", "RuntimeContext", "evaluate", "run_for_cli"]
