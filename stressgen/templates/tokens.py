"""``:name`` token substitution for query templates."""

from __future__ import annotations

import random
import re
from typing import List, Mapping, Optional, Sequence

# ``:`` followed by ASCII letters, digits or underscores
TOKEN_PATTERN = re.compile(r":(\w+)", re.ASCII)


def pick_param(options: Sequence[object], rng: random.Random) -> object:
    """Pick one candidate value uniformly at random."""

    return options[rng.randrange(len(options))]


def format_value(value: object) -> str:
    """Default text representation used when a value is spliced into SQL."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def token_map(
    query: str,
    replacements: Mapping[str, Sequence[object]],
    rng: Optional[random.Random] = None,
) -> str:
    """
    Replace every ``:name`` token that has candidate values in ``replacements``.

    Each occurrence gets its own draw, so ``:a + :a`` can render as ``1 + 2``.
    Tokens without a matching key are left untouched.
    """

    if not replacements:
        return query
    rng = rng or random.Random()

    def _replace(match: re.Match) -> str:
        options = replacements.get(match.group(1))
        if not options:
            return match.group(0)
        return format_value(pick_param(options, rng))

    return TOKEN_PATTERN.sub(_replace, query)


def find_tokens(query: str) -> List[str]:
    """Token names in order of first appearance."""

    seen: List[str] = []
    for name in TOKEN_PATTERN.findall(query):
        if name not in seen:
            seen.append(name)
    return seen
