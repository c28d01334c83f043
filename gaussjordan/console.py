"""Prompt-driven console input that only hands validated data to the core."""

from __future__ import annotations

import math
import re
from collections import deque
from typing import Deque, TextIO

from .config import BANNER_LINES
from .linalg import Matrix

_INTEGER = re.compile(r"^[+-]?\d+$")
_INT_MAX = 2 ** 31 - 1
_INT_MIN = -(2 ** 31)


class TokenReader:
    """Yields whitespace-separated tokens from a text stream.

    Lines are pulled from the stream only when the buffered tokens run out, so
    prompts written between reads show up before the user is asked to type.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Deque[str] = deque()

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("input exhausted")
            self._pending.extend(line.split())
        return self._pending.popleft()


def print_welcome_banner(file: TextIO) -> None:
    for line in BANNER_LINES:
        print(line, file=file)
    print(file=file)


def parse_integer(token: str) -> int:
    """Parse a signed decimal that fits in 32 bits, else raise ``ValueError``."""

    if not _INTEGER.match(token):
        raise ValueError(f"not an integer: {token!r}")
    value = int(token)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


def parse_element(token: str) -> float:
    if "_" in token:
        raise ValueError(f"not a number: {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {token!r}")
    return value


def read_dimension(label: str, reader: TokenReader, file: TextIO) -> int:
    """Prompt until a non-negative integer count of ``label`` is entered."""

    while True:
        print(f"Enter # of {label} in the matrix: ", end="", file=file, flush=True)
        try:
            number = parse_integer(reader.next())
        except ValueError:
            print(f"Invalid input for {label}. Must be positive INTEGER. Try again.", file=file)
            continue
        if number >= 0:
            return number
        print(f"Invalid input for {label}. Must be POSITIVE integer. Try again.", file=file)


def read_element(reader: TokenReader, file: TextIO) -> float:
    while True:
        try:
            return parse_element(reader.next())
        except ValueError:
            print("Invalid input for element. Must be a double. Try again.", file=file)


def read_matrix(rows: int, cols: int, reader: TokenReader, file: TextIO) -> Matrix:
    """Read ``rows * cols`` elements in row-major order into a new matrix."""

    matrix = Matrix(rows, cols)
    if cols == 0:
        return matrix
    for r in range(rows):
        print(f"Enter {cols} elements for row {r}: ", end="", file=file, flush=True)
        for c in range(cols):
            matrix.set(r, c, read_element(reader, file))
    return matrix
