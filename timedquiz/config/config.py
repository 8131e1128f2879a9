from __future__ import annotations

"""Configuration loading and validation for timedquiz.

This module loads YAML configuration, applies defaults, and repairs values
that would make a session ill-defined (negative time limits, empty quit token).
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_TIME_LIMIT_S = 30
DEFAULT_QUIT_TOKEN = "q"


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or package defaults.

    Args:
        path: Optional path to a YAML config. If None, use defaults.yml.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    cfg.setdefault("quiz", {})
    cfg.setdefault("messages", {})
    quiz = cfg["quiz"]
    messages = cfg["messages"]

    quiz.setdefault("problems_path", "problems.csv")
    quiz.setdefault("header", False)
    quiz.setdefault("time_limit_s", DEFAULT_TIME_LIMIT_S)
    quiz.setdefault("shuffle", False)
    quiz.setdefault("quit_token", DEFAULT_QUIT_TOKEN)

    messages.setdefault(
        "greeting",
        "Welcome to the maths quiz! Press enter to start, or enter 'q' at any time to exit",
    )
    messages.setdefault("goodbye", "Thank you for playing. Your final score is")
    messages.setdefault("timeout", "You ran out of time. Thank you for playing. Your final score is")
    messages.setdefault("out_of", "out of")

    limit = quiz.get("time_limit_s")
    if isinstance(limit, bool) or not isinstance(limit, (int, float)) or limit < 0:
        print(f"WARNING: Invalid time_limit_s '{limit}', using {DEFAULT_TIME_LIMIT_S}.")
        quiz["time_limit_s"] = DEFAULT_TIME_LIMIT_S

    token = quiz.get("quit_token")
    if not isinstance(token, str) or not token:
        print(f"WARNING: Invalid quit_token '{token}', using '{DEFAULT_QUIT_TOKEN}'.")
        quiz["quit_token"] = DEFAULT_QUIT_TOKEN

    quiz["header"] = bool(quiz["header"])
    quiz["shuffle"] = bool(quiz["shuffle"])
    quiz["problems_path"] = str(quiz["problems_path"])
    for name in ("greeting", "goodbye", "timeout", "out_of"):
        messages[name] = str(messages[name])

    return cfg
