from __future__ import annotations

"""Randomness helpers for question order."""

import os
import random


def seed_if_needed() -> None:
    """Seed the RNG if the SEED env var holds an integer."""
    seed = os.environ.get("SEED")
    if seed is not None:
        try:
            s = int(seed)
        except ValueError:
            return
        random.seed(s)
