from __future__ import annotations

"""Explain Mode tracing for quiz sessions.

Events may fire from the question loop thread or the deadline timer thread,
so each line carries the emitting thread's name.
"""

import json
import sys
import threading
from typing import Any, Dict, TextIO

_ENABLED = False
_STREAM: TextIO | None = None


def enable(flag: bool = True, stream: TextIO | None = None) -> None:
    global _ENABLED, _STREAM
    _ENABLED = bool(flag)
    _STREAM = stream


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    out = _STREAM or sys.stderr
    thread = threading.current_thread().name
    try:
        data = json.dumps(payload or {}, separators=(",", ":"))
    except (TypeError, ValueError):
        data = "{}"
    print(f"[EXPLAIN] {thread} {event} :: {data}", file=out, flush=True)
