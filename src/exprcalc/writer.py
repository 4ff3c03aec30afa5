from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False


class IndentingWriter:
    def __init__(
        self,
        indent_size: int = 3,
        debug: bool | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._debug = DEBUG if debug is None else debug
        self._stream = stream

    @property
    def debug_enabled(self) -> bool:
        return self._debug

    def debug(self, message: str) -> None:
        if self._debug:
            self._print_indentation()
            self._write(message)

    def debugln(self, message: str) -> None:
        if self._debug:
            self.debug(message)
            self._write("\n")

    def print(self, message: str) -> None:
        self._print_indentation()
        self._write(message)

    def println(self, message: str) -> None:
        self.print(message + "\n")

    def indent(self) -> None:
        if self._debug:
            self._indents += 1

    def dedent(self) -> None:
        if self._debug:
            self._indents -= 1

    def print_division_line(self, size: int = 80) -> None:
        self._write("-" * size + "\n")

    def _print_indentation(self) -> None:
        if self._debug:
            self._write(" " * self._indent_size * self._indents)

    def _write(self, text: str) -> None:
        # Resolved per call so redirected stdout (pytest capsys) is honored.
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def surrounding_box_title(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        output_writer.print_division_line()
