"""Path tokenizer — raw `d` attribute → letter and number tokens.

Numbers may abut without separators as the path grammar allows:
`10.5.5` is `10.5` then `.5`, and `10-5` is `10` then `-5`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass

from vectoricon.engine.errors import MalformedPathData

# Optional sign, digits with at most one dot, optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE_RE = re.compile(r"\s+")
_NUMBER_START = frozenset("+-.0123456789")


@dataclass(frozen=True)
class LetterToken:
    letter: str
    offset: int


@dataclass(frozen=True)
class NumberToken:
    value: float
    offset: int


Token = LetterToken | NumberToken


def prepare_path_data(d: str) -> str:
    """Normalize separators and make sure the path ends with a close command."""
    # Leading whitespace is kept so token offsets index the raw attribute
    path = d.replace(",", " ").rstrip()
    if not path or path[-1] not in "Zz":
        path += "z"
    return path


def tokenize(path: str) -> Iterator[Token]:
    """Yield tokens from an already prepared path string."""
    pos = 0
    end = len(path)
    while pos < end:
        ws = _WHITESPACE_RE.match(path, pos)
        if ws:
            pos = ws.end()
            continue

        char = path[pos]
        if char in _NUMBER_START:
            match = _NUMBER_RE.match(path, pos)
            if match is None:
                raise MalformedPathData(f"Malformed number starting with {char!r}", pos)
            value = float(match.group(0))
            if not math.isfinite(value):
                raise MalformedPathData(f"Number {match.group(0)!r} out of range", pos)
            yield NumberToken(value, pos)
            pos = match.end()
        elif char.isalpha():
            yield LetterToken(char, pos)
            pos += 1
        else:
            raise MalformedPathData(f"Unexpected character {char!r}", pos)
