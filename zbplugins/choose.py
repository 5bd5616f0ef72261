"""Pick one of several options for the undecided."""

from __future__ import annotations

import random
from typing import Any

SEPARATOR = "还是"


def choose(args: str, nickname: str, rng: Any = None) -> str:
    """Split ``args`` on the separator, pick one option and return the reply text."""
    rng = rng if rng is not None else random
    raw_options = args.split(SEPARATOR)
    numbered = [f"{count}, {option}" for count, option in enumerate(raw_options, start=1)]
    result = raw_options[rng.randrange(len(raw_options))]
    return "".join(
        (
            "> ", nickname, "\n",
            "你的选项有:", "\n",
            "\n".join(numbered), "\n",
            "你最终会选: ", result,
        )
    )