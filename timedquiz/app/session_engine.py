from __future__ import annotations

"""Session engine: a question loop raced against a deadline timer.

The loop runs on a daemon thread and the deadline on a ``threading.Timer``.
Both settle a single-fire ``_Race`` slot; the score lives in that slot and is
only changed while the race is undecided, so whatever the caller receives is
final even if the losing thread keeps running.
"""

import threading
from typing import Any, Callable, Iterable, Iterator, Optional

from ..problems.schema import PromptSet, parse_int
from ..stats.stats import format_summary, outcome_stats
from .explain import trace as xtrace
from .outcome import Outcome, OutcomeKind, SessionMessages

QUIT_TOKEN = "q"

TimerFactory = Callable[[float, Callable[[], Any]], Any]

_EOF = object()


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


class _Race:
    """Single-fire result slot shared by the question loop and the deadline."""

    def __init__(self, total: int) -> None:
        self.total = total
        self._lock = threading.RLock()
        self._done = threading.Event()
        self._score = 0
        self._outcome: Optional[Outcome] = None

    def score_point(self) -> bool:
        with self._lock:
            if self._outcome is not None:
                return False
            self._score += 1
            return True

    def settle(self, kind: OutcomeKind) -> bool:
        with self._lock:
            if self._outcome is not None:
                return False
            self._outcome = Outcome(kind, self._score, self.total)
        self._done.set()
        xtrace("race_settled", {"winner": kind.value, "score": self._outcome.score})
        return True

    def settled(self) -> bool:
        return self._done.is_set()

    def emit_if_open(self, inform: Callable[[str], None], msg: str) -> bool:
        # holding the lock keeps a prompt from landing after the summary
        with self._lock:
            if self._outcome is not None:
                return False
            inform(msg)
            return True

    def wait(self) -> Outcome:
        self._done.wait()
        return self._outcome


class QuizSession:
    """One timed run over a PromptSet.

    Args:
        prompts: Validated prompt/answer pairs, visited in order.
        messages: Greeting and summary texts.
        quit_token: Input line that ends the session early.
        timer_factory: Builds the deadline timer; called as
            ``timer_factory(seconds, callback)`` and must return an object
            with ``start()`` and ``cancel()``. Defaults to ``threading.Timer``.
    """

    def __init__(
        self,
        prompts: PromptSet,
        messages: SessionMessages | None = None,
        quit_token: str = QUIT_TOKEN,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.prompts = prompts
        self.messages = messages or SessionMessages()
        self.quit_token = quit_token
        self.timer_factory = timer_factory or threading.Timer

    def run(self, lines: Iterable[str], inform: Callable[[str], None], time_budget: float) -> Outcome:
        if time_budget < 0:
            raise ValueError(f"time_budget must be non-negative, got {time_budget}")
        source = iter(lines)
        total = len(self.prompts)
        xtrace("session_start", {"total": total, "time_budget_s": time_budget})

        inform(self.messages.greeting)
        if total == 0:
            return self._finish(Outcome(OutcomeKind.COMPLETED, 0, 0), inform)

        first = next(source, _EOF)
        if first is not _EOF and _strip_eol(first) == self.quit_token:
            return self._finish(Outcome(OutcomeKind.QUIT_EARLY, 0, total), inform)

        race = _Race(total)
        loop = threading.Thread(
            target=self._question_loop,
            args=(source, inform, race),
            name="quiz-loop",
            daemon=True,
        )
        deadline = self.timer_factory(time_budget, lambda: race.settle(OutcomeKind.TIMEOUT))
        deadline.daemon = True
        deadline.start()
        loop.start()

        outcome = race.wait()
        deadline.cancel()
        return self._finish(outcome, inform)

    def _question_loop(self, source: Iterator[str], inform: Callable[[str], None], race: _Race) -> None:
        kind = OutcomeKind.COMPLETED
        try:
            for index, (prompt, answer) in enumerate(self.prompts, start=1):
                if not race.emit_if_open(inform, prompt):
                    return
                xtrace("prompt_shown", {"index": index})
                line = next(source, _EOF)
                if race.settled():
                    return
                if line is _EOF:
                    xtrace("input_closed", {"index": index})
                    break
                text = _strip_eol(line)
                if text == self.quit_token:
                    kind = OutcomeKind.QUIT_EARLY
                    break
                correct = parse_int(text) == answer
                if correct:
                    race.score_point()
                xtrace("graded", {"index": index, "correct": correct})
        finally:
            # no-op when the deadline already won
            race.settle(kind)

    def _finish(self, outcome: Outcome, inform: Callable[[str], None]) -> Outcome:
        xtrace("session_end", outcome_stats(outcome))
        inform(format_summary(outcome, self.messages))
        return outcome


def run_session(
    prompts: PromptSet,
    lines: Iterable[str],
    inform: Callable[[str], None],
    time_budget: float,
    *,
    messages: SessionMessages | None = None,
    quit_token: str = QUIT_TOKEN,
    timer_factory: TimerFactory | None = None,
) -> Outcome:
    """Run one timed session and return how it ended.

    Greets, reads a start line (the quit token here ends the session before any
    question), then races the question loop against ``time_budget`` seconds.
    Malformed answers count as wrong; this never raises for respondent input.
    """
    session = QuizSession(prompts, messages=messages, quit_token=quit_token, timer_factory=timer_factory)
    return session.run(lines, inform, time_budget)
