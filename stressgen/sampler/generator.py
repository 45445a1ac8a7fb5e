"""Draw query lists from a built distribution."""

from __future__ import annotations

import random
import threading
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Union

from stressgen.conf.model import StressConf
from stressgen.templates.tokens import token_map

from .distribution import DistributionIndex, QueryMatcher, build_distribution


class QueryGenerator(ABC):
    """Source of query lists for each iteration of a stress run."""

    @abstractmethod
    def queries(self) -> List[str]:
        """Return the rendered queries to execute together for one iteration."""


class StressConfQueryGenerator(QueryGenerator):
    """
    Sample a ``DistributionIndex`` and render the chosen entry's templates.

    The index is read-only, so one generator can serve many worker threads;
    draws from the shared ``random.Random`` are serialised by a lock so that
    a seeded generator stays reproducible for a single caller.
    """

    def __init__(
        self,
        source: Union[StressConf, DistributionIndex],
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if isinstance(source, DistributionIndex):
            self.index = source
        else:
            self.index = build_distribution(source)
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self._lock = threading.Lock()

    @property
    def total_frequency(self) -> int:
        return self.index.total_frequency

    def pick(self) -> int:
        with self._lock:
            return self.rng.randrange(self.index.total_frequency)

    def render(self, matcher: QueryMatcher) -> List[str]:
        """Render every template of ``matcher`` with fresh parameter draws."""

        rendered: List[str] = []
        with self._lock:
            for query in matcher.query_list:
                rendered.append(token_map(query.query_text, query.parameters, self.rng))
        return rendered

    def queries_for_pick(self, pick: int) -> List[str]:
        return self.render(self.index.lookup(pick))

    def draw(self) -> Tuple[QueryMatcher, List[str]]:
        """Pick a matcher and render it, returning both."""

        matcher = self.index.lookup(self.pick())
        return matcher, self.render(matcher)

    def queries(self) -> List[str]:
        return self.draw()[1]

    def sample(self) -> List[str]:
        return self.queries()
