"""Weighted query distribution and sampling."""

from .distribution import (
    DistributionIndex,
    QueryMatcher,
    QueryWithParams,
    ValidRange,
    build_distribution,
)
from .generator import QueryGenerator, StressConfQueryGenerator

__all__ = [
    "DistributionIndex",
    "QueryMatcher",
    "QueryWithParams",
    "ValidRange",
    "build_distribution",
    "QueryGenerator",
    "StressConfQueryGenerator",
]
