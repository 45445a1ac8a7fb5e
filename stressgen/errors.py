"""Exception types raised while building and sampling query distributions."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class StressConfigError(ValueError):
    """The stress configuration cannot be turned into a query distribution."""

    def __init__(
        self,
        message: str,
        group: Optional[str] = None,
        index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.group = group
        self.index = index


class RangeLookupError(RuntimeError):
    """A picked number fell outside every configured frequency range."""

    def __init__(self, pick: int, ranges: Sequence[Tuple[int, int]]) -> None:
        self.pick = pick
        self.ranges = list(ranges)
        formatted = ", ".join(
            f"{{start: {start}, end: {end}}}" for start, end in self.ranges
        )
        super().__init__(
            f"the number {pick} did not find a list of ranges that matched out of: {formatted}"
        )
