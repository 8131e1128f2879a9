from __future__ import annotations

"""CLI entry point for timedquiz."""

import argparse
import sys
from typing import Callable, Iterable

from . import __version__
from .app.console import make_inform, stdin_lines
from .app.outcome import SessionMessages
from .app.session_engine import run_session
from .config.config import load_config, validate_config
from .problems.loader import ProblemSetError, load_problems
from .util.randomness import seed_if_needed


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="timedquiz", description="Timed maths quiz")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--questions", type=str, default=None, help="Path to CSV with question/answer pairs")
    p.add_argument("--timer", type=float, default=None, help="Time limit in seconds")
    p.add_argument("--header", dest="header", action="store_true", help="The questions CSV has a header row")
    p.add_argument("--no-header", dest="header", action="store_false")
    p.set_defaults(header=None)
    p.add_argument("--shuffle", dest="shuffle", action="store_true", help="Ask questions in random order")
    p.add_argument("--no-shuffle", dest="shuffle", action="store_false")
    p.set_defaults(shuffle=None)
    p.add_argument("--explain", action="store_true", help="Print trace events to stderr")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def main(
    argv: list[str] | None = None,
    lines: Iterable[str] | None = None,
    inform: Callable[[str], None] | None = None,
) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"timedquiz {__version__}")
        return 0

    if args.explain:
        from .app.explain import enable as explain_enable
        explain_enable(True)

    seed_if_needed()
    cfg = validate_config(load_config(args.config))
    quiz = cfg["quiz"]

    # CLI flags override config values
    if args.questions is not None:
        quiz["problems_path"] = args.questions
    if args.timer is not None:
        if args.timer < 0:
            print(f"ERROR: --timer must be non-negative, got {args.timer}", file=sys.stderr)
            return 2
        quiz["time_limit_s"] = args.timer
    if args.header is not None:
        quiz["header"] = args.header
    if args.shuffle is not None:
        quiz["shuffle"] = args.shuffle

    try:
        prompts = load_problems(quiz["problems_path"], header=quiz["header"])
    except OSError as e:
        print(f"ERROR: Cannot read questions file '{quiz['problems_path']}': {e}", file=sys.stderr)
        return 1
    except ProblemSetError as e:
        print(f"ERROR: Invalid questions file '{quiz['problems_path']}': {e}", file=sys.stderr)
        return 1

    if quiz["shuffle"]:
        prompts = prompts.shuffled()

    run_session(
        prompts,
        lines if lines is not None else stdin_lines(),
        inform or make_inform(),
        float(quiz["time_limit_s"]),
        messages=SessionMessages.from_config(cfg["messages"]),
        quit_token=quiz["quit_token"],
    )
    return 0


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
