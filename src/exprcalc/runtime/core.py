from dataclasses import dataclass, field

from ..writer import IndentingWriter

Value = float


class EvaluationError(Exception):
    """The expression parsed but cannot be evaluated."""


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)
