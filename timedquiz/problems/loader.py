from __future__ import annotations

"""CSV loader for question/answer files.

Each non-blank row must hold exactly two columns: the question text (kept
verbatim) and an integer answer (surrounding whitespace allowed). Rows are
validated through ``ProblemRecord`` and collected into a ``PromptSet``.
"""

import csv
from pathlib import Path
from typing import Iterable, List, Sequence

from pydantic import ValidationError

from ..app.explain import trace as xtrace
from .schema import ProblemRecord, PromptSet


class ProblemSetError(ValueError):
    """Raised when a question file cannot be turned into a PromptSet."""

    def __init__(self, message: str, row: int | None = None) -> None:
        self.row = row
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)


class BadColumnsError(ProblemSetError):
    pass


class AnswerFormatError(ProblemSetError):
    pass


def parse_problems(rows: Iterable[Sequence[str]], header: bool = False) -> PromptSet:
    """Validate raw CSV rows and build a PromptSet.

    Args:
        rows: Iterable of CSV records (lists of strings).
        header: Skip the first row when True.

    Raises:
        BadColumnsError: A row does not have exactly two columns.
        AnswerFormatError: An answer is not an integer.
    """
    records: List[ProblemRecord] = []
    for idx, row in enumerate(rows, start=1):
        if header and idx == 1:
            continue
        if not row:
            continue
        if len(row) != 2:
            raise BadColumnsError(f"expected 2 columns, got {len(row)}", row=idx)
        question, answer = row
        try:
            records.append(ProblemRecord(question=question, answer=answer))
        except ValidationError as e:
            raise AnswerFormatError(f"answer {answer!r} is not an integer", row=idx) from e
    xtrace("problems_parsed", {"count": len(records)})
    return PromptSet.from_records(records)


def load_problems(path: str | Path, header: bool = False) -> PromptSet:
    """Read a question/answer CSV file from disk."""
    p = Path(path)
    with p.open("r", encoding="utf-8", newline="") as f:
        try:
            return parse_problems(csv.reader(f), header=header)
        except UnicodeDecodeError as e:
            raise ProblemSetError(f"not valid UTF-8 text ({e.reason})") from e
        except csv.Error as e:
            raise ProblemSetError(f"unreadable CSV: {e}") from e
