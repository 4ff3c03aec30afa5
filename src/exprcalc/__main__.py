import sys

from .demo import run_demo
from .runtime.interpreter import run_for_cli


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if not args:
        return 1 if run_demo() else 0

    status = 0
    for source in args:
        result = run_for_cli(source)
        if result is None:
            status = 1
        else:
            print(f"{source} = {result:g}")
    return status


if __name__ == "__main__":
    sys.exit(main())
