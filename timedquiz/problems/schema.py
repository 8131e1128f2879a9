from __future__ import annotations

"""Pydantic record model and the immutable PromptSet handed to the session engine."""

import random
import re
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel, field_validator

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> Optional[int]:
    """Parse a whitespace-trimmed decimal integer, or return None."""
    s = text.strip()
    if not _INT_RE.fullmatch(s):
        return None
    try:
        return int(s)
    except ValueError:
        # past the interpreter's int digit limit
        return None


class ProblemRecord(BaseModel):
    question: str
    answer: int

    @field_validator("answer", mode="before")
    @classmethod
    def _strict_int(cls, v):
        if isinstance(v, bool):
            raise ValueError("answer must be an integer")
        if isinstance(v, int):
            return v
        parsed = parse_int(str(v))
        if parsed is None:
            raise ValueError(f"answer {v!r} is not an integer")
        return parsed


@dataclass(frozen=True)
class PromptSet:
    """Ordered, immutable prompt -> expected answer pairs with unique prompts."""

    pairs: Tuple[Tuple[str, int], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> "PromptSet":
        return cls(tuple((str(q), int(a)) for q, a in mapping.items()))

    @classmethod
    def from_records(cls, records: list[ProblemRecord]) -> "PromptSet":
        # dict keeps first-seen position and last-seen answer
        merged: Dict[str, int] = {}
        for r in records:
            merged[r.question] = r.answer
        return cls.from_mapping(merged)

    def __post_init__(self) -> None:
        prompts = [q for q, _ in self.pairs]
        if len(set(prompts)) != len(prompts):
            raise ValueError("PromptSet prompts must be unique")

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.pairs)

    def as_dict(self) -> Dict[str, int]:
        return dict(self.pairs)

    def shuffled(self, rng: Optional[random.Random] = None) -> "PromptSet":
        items = list(self.pairs)
        (rng or random).shuffle(items)
        return PromptSet(tuple(items))
