"""Frequency-weighted index built once from a stress configuration."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from stressgen.conf.model import QueryConf, StressConf
from stressgen.errors import RangeLookupError, StressConfigError
from stressgen.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidRange:
    """Half-open ``[min, next_number)`` interval owned by one query entry."""

    min: int
    next_number: int

    def contains(self, pick: int) -> bool:
        return self.min <= pick < self.next_number

    @property
    def width(self) -> int:
        return self.next_number - self.min


@dataclass(frozen=True)
class QueryWithParams:
    """A query template paired with the parameter pool used to render it."""

    query_text: str
    parameters: Mapping[str, Tuple[object, ...]]


@dataclass(frozen=True)
class QueryMatcher:
    """A resolved query entry: its range and the templates rendered together."""

    range: ValidRange
    query_list: Tuple[QueryWithParams, ...]


@dataclass(frozen=True)
class DistributionIndex:
    """Ordered matchers covering ``[0, total_frequency)`` without gaps."""

    matchers: Tuple[QueryMatcher, ...]
    total_frequency: int

    def lookup(self, pick: int) -> QueryMatcher:
        """Return the matcher whose range contains ``pick``."""

        for matcher in self.matchers:
            if matcher.range.contains(pick):
                return matcher
        raise RangeLookupError(pick, self.describe_ranges())

    def describe_ranges(self) -> List[Tuple[int, int]]:
        return [(m.range.min, m.range.next_number) for m in self.matchers]

    def __len__(self) -> int:
        return len(self.matchers)


def _freeze_parameters(
    parameters: Mapping[str, Sequence[object]],
    index: int,
) -> Mapping[str, Tuple[object, ...]]:
    frozen = {}
    for name, values in parameters.items():
        if len(values) == 0:
            raise StressConfigError(
                f"query entry {index} parameter \"{name}\" has no candidate values",
                index=index,
            )
        frozen[name] = tuple(values)
    return MappingProxyType(frozen)


def _resolve_queries(
    entry: QueryConf,
    conf: StressConf,
    index: int,
) -> Tuple[QueryWithParams, ...]:
    """Expand an entry into the templates it renders, using the entry's pool."""

    has_query = entry.query is not None
    has_group = entry.query_group is not None
    if has_query and has_group:
        raise StressConfigError(
            f"query entry {index} sets both \"query\" and \"queryGroup\" ({entry.query_group}); "
            "only one may be provided",
            group=entry.query_group,
            index=index,
        )
    if not has_query and not has_group:
        raise StressConfigError(
            f"query entry {index}: neither \"queryGroup\" nor \"query\" is set, "
            "cannot build a stress distribution from this configuration",
            index=index,
        )

    params = _freeze_parameters(entry.parameters, index)
    if has_query:
        return (QueryWithParams(query_text=entry.query, parameters=params),)

    name = entry.query_group
    matches = [group for group in conf.query_groups if group.name == name]
    if not matches:
        raise StressConfigError(
            f"query entry {index} references unknown query group {name}",
            group=name,
            index=index,
        )
    resolved: List[QueryWithParams] = []
    # every group sharing the name contributes its templates
    for group in matches:
        if not group.queries:
            raise StressConfigError(
                f"invalid configuration: cannot have zero queries for query group {name}",
                group=name,
                index=index,
            )
        resolved.extend(
            QueryWithParams(query_text=text, parameters=params) for text in group.queries
        )
    if len(matches) > 1:
        logger.warning(
            "query group %s is defined %d times; using templates from all definitions",
            name, len(matches),
        )
    return tuple(resolved)


def build_distribution(conf: StressConf) -> DistributionIndex:
    """
    Build the weighted index for ``conf``.

    Entries are laid out in configured order as contiguous half-open ranges,
    each ``frequency`` wide. Any malformed entry raises ``StressConfigError``
    and nothing is returned, so a caller never sees a partial distribution.
    """

    running = 0
    matchers: List[QueryMatcher] = []
    for index, entry in enumerate(conf.queries):
        if entry.frequency < 0:
            raise StressConfigError(
                f"query entry {index} has negative frequency {entry.frequency}",
                index=index,
            )
        valid_range = ValidRange(min=running, next_number=running + entry.frequency)
        running = valid_range.next_number
        query_list = _resolve_queries(entry, conf, index)
        matchers.append(QueryMatcher(range=valid_range, query_list=query_list))
        logger.debug(
            "entry %d -> [%d, %d) with %d queries",
            index, valid_range.min, valid_range.next_number, len(query_list),
        )

    if running <= 0:
        raise StressConfigError(
            "total frequency of all queries is 0, nothing can be sampled"
        )
    logger.info("built distribution: %d entries, total frequency %d", len(matchers), running)
    return DistributionIndex(matchers=tuple(matchers), total_frequency=running)
