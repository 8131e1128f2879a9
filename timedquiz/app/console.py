from __future__ import annotations

"""Console I/O callbacks for the session engine."""

import sys
from typing import Callable, Iterator, TextIO


def stdin_lines(stream: TextIO | None = None) -> Iterator[str]:
    """Yield respondent lines without terminators until end of input."""
    src = stream or sys.stdin
    for raw in iter(src.readline, ""):
        yield raw.rstrip("\r\n")


def make_inform(stream: TextIO | None = None) -> Callable[[str], None]:
    out = stream or sys.stdout

    def inform(msg: str) -> None:
        print(msg, file=out, flush=True)

    return inform
