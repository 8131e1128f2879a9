from __future__ import annotations

"""Session summary formatting."""

from typing import Dict

from ..app.outcome import Outcome, OutcomeKind, SessionMessages


def outcome_stats(outcome: Outcome) -> Dict:
    """Plain-dict view of an outcome, used for tracing."""
    return {"outcome": outcome.kind.value, "correct": outcome.score, "total": outcome.total}


def format_summary(outcome: Outcome, messages: SessionMessages | None = None) -> str:
    """Return the single summary line shown when a session ends.

    The total is omitted for a quit, which can happen before any prompt is shown.
    """
    m = messages or SessionMessages()
    if outcome.kind is OutcomeKind.QUIT_EARLY:
        return f"{m.goodbye} {outcome.score}"
    lead = m.timeout if outcome.kind is OutcomeKind.TIMEOUT else m.goodbye
    return f"{lead} {outcome.score} {m.out_of} {outcome.total}"
