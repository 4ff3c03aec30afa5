from typing import Iterable

from .frontend.parser import ParseError
from .runtime.core import EvaluationError, RuntimeContext
from .runtime.interpreter import evaluate
from .samples import SAMPLE_CASES, SampleCase
from .writer import IndentingWriter, surrounding_box_title


def run_samples(
    cases: Iterable[SampleCase] = SAMPLE_CASES,
    writer: IndentingWriter | None = None,
) -> int:
    """Evaluate every case, report each mismatch or failure, return the error count."""
    writer = writer or IndentingWriter()
    context = RuntimeContext(writer=writer)
    errors = 0

    for source, expected in cases:
        try:
            result = evaluate(source, context)
        except (ParseError, EvaluationError) as error:
            writer.println(f"{source} : exception: {error}")
            errors += 1
            continue

        if result != expected:
            writer.println(f"{source} = {expected:g} : error, got {result:g}")
            errors += 1

    writer.println(f"Done with {errors} errors.")
    return errors


def run_demo() -> int:
    writer = IndentingWriter()

    with surrounding_box_title(writer):
        writer.println("SAMPLE EXPRESSIONS")

    return run_samples(SAMPLE_CASES, writer)


if __name__ == "__main__":
    run_demo()
