"""Console input helpers.

Numeric readers keep asking until the entry parses. EOFError and
KeyboardInterrupt are left to the caller, which decides how to end the
session.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import TypeVar

from payroll.models.employee import EvalScore

T = TypeVar("T")

INVALID_INPUT_MESSAGE = "Invalid input. Try again."

EVAL_SCORE_PROMPT = (
    "Evaluation ("
    + ", ".join(f"{i}={score.value}" for i, score in enumerate(EvalScore))
    + "): "
)

# ASCII digits only: int()/float() would also take "1_000", "٣" and "nan".
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def read_line(prompt: str) -> str:
    """Read a whole line. Embedded spaces are kept and an empty line is valid."""
    return input(prompt)


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"Expected an integer, got {text!r}")
    return int(text)


def _parse_uint(text: str) -> int:
    value = _parse_int(text)
    if value < 0:
        raise ValueError(f"Expected a non-negative integer, got {value}")
    return value


def _parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f"Expected a number, got {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Expected a finite number, got {text!r}")
    return value


def _read_number(prompt: str, parse: Callable[[str], T]) -> T:
    while True:
        answer = input(prompt).strip()
        try:
            return parse(answer)
        except ValueError:
            print(INVALID_INPUT_MESSAGE)


def read_int(prompt: str) -> int:
    return _read_number(prompt, _parse_int)


def read_uint(prompt: str) -> int:
    return _read_number(prompt, _parse_uint)


def read_float(prompt: str) -> float:
    return _read_number(prompt, _parse_float)


def coerce_eval_score(raw: str) -> EvalScore:
    """Map menu input 0-4 to a score; anything else becomes AVERAGE."""
    try:
        return EvalScore.from_index(_parse_int(raw.strip()))
    except ValueError:
        return EvalScore.AVERAGE


def read_eval_score() -> EvalScore:
    return coerce_eval_score(input(EVAL_SCORE_PROMPT))
