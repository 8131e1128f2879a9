from __future__ import annotations

"""Terminal session outcome and the user-facing message texts."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class OutcomeKind(str, Enum):
    COMPLETED = "completed"
    TIMEOUT = "timeout"
    QUIT_EARLY = "quit_early"


@dataclass(frozen=True)
class Outcome:
    """How a session ended, with the final score out of ``total`` prompts."""

    kind: OutcomeKind
    score: int
    total: int

    def __post_init__(self) -> None:
        if not 0 <= self.score <= self.total:
            raise ValueError(f"score {self.score} outside 0..{self.total}")


@dataclass(frozen=True)
class SessionMessages:
    greeting: str = "Welcome to the maths quiz! Press enter to start, or enter 'q' at any time to exit"
    goodbye: str = "Thank you for playing. Your final score is"
    timeout: str = "You ran out of time. Thank you for playing. Your final score is"
    out_of: str = "out of"

    @classmethod
    def from_config(cls, messages: Dict[str, Any]) -> "SessionMessages":
        known = {k: str(v) for k, v in messages.items() if k in cls.__dataclass_fields__}
        return cls(**known)
