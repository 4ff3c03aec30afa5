"""Builtin functions callable from expressions.

Each builtin declares how many arguments it reads. Arguments past that count
are accepted and ignored, fewer is an evaluation error.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from .core import EvaluationError, Value


def power(base: Value, exponent: Value) -> Value:
    """`base ** exponent` with the C library's `pow` results instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0.0:
            # 0 raised to a negative power is a pole.
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(value: Value) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _periodic(function: Callable[[Value], Value]) -> Callable[[Value], Value]:
    def call(value: Value) -> Value:
        if not math.isfinite(value):
            return math.nan
        return function(value)

    return call


@dataclass(frozen=True, slots=True)
class Builtin:
    name: str
    arity: int
    implementation: Callable[..., Value]

    def __call__(self, args: list[Value]) -> Value:
        return self.implementation(*args[: self.arity])


BUILTIN_FUNCTIONS: Mapping[str, Builtin] = MappingProxyType(
    {
        "abs": Builtin("abs", 1, math.fabs),
        "sin": Builtin("sin", 1, _periodic(math.sin)),
        "cos": Builtin("cos", 1, _periodic(math.cos)),
        "pow": Builtin("pow", 2, power),
    }
)


def lookup_builtin(name: str) -> Builtin:
    try:
        return BUILTIN_FUNCTIONS[name]
    except KeyError:
        raise EvaluationError(f"unknown function: {name}") from None


def require_arguments(builtin: Builtin, supplied: int) -> None:
    if supplied < builtin.arity:
        plural = "argument" if builtin.arity == 1 else "arguments"
        raise EvaluationError(
            f"{builtin.name} expects {builtin.arity} {plural}, got {supplied}"
        )
