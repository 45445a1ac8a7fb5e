"""Dataclasses mirroring the stress.json document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from stressgen.errors import StressConfigError


@dataclass
class QueryGroup:
    """A named sequence of queries that run in order together."""

    name: str
    queries: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "QueryGroup":
        if not isinstance(payload, Mapping):
            raise StressConfigError(f"query group must be an object, got {type(payload).__name__}")
        name = payload.get("name")
        if not isinstance(name, str):
            raise StressConfigError("query group requires a string \"name\"")
        queries = payload.get("queries") or []
        if not isinstance(queries, list) or not all(isinstance(q, str) for q in queries):
            raise StressConfigError(
                f"query group {name} must list its \"queries\" as strings", group=name
            )
        return cls(name=name, queries=list(queries))

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "queries": list(self.queries)}


@dataclass
class QueryConf:
    """
    One weighted unit of work.

    Exactly one of ``query`` and ``query_group`` is expected to be set; that
    rule is enforced when the distribution is built, not here, so a loaded
    configuration can still be inspected before it is rejected.
    """

    frequency: int = 0
    query: Optional[str] = None
    query_group: Optional[str] = None
    parameters: Dict[str, List[object]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Mapping[str, object], index: int = 0) -> "QueryConf":
        if not isinstance(payload, Mapping):
            raise StressConfigError(
                f"query entry {index} must be an object, got {type(payload).__name__}",
                index=index,
            )
        frequency = payload.get("frequency", 0)
        # bool is an int subclass; a "frequency": true is a typo, not a weight
        if isinstance(frequency, bool) or not isinstance(frequency, int):
            raise StressConfigError(
                f"query entry {index} has a non-integer frequency: {frequency!r}",
                index=index,
            )
        query = payload.get("query")
        group = payload.get("queryGroup")
        for key, value in (("query", query), ("queryGroup", group)):
            if value is not None and not isinstance(value, str):
                raise StressConfigError(
                    f"query entry {index} field \"{key}\" must be a string", index=index
                )
        raw_params = payload.get("parameters") or {}
        if not isinstance(raw_params, Mapping):
            raise StressConfigError(
                f"query entry {index} \"parameters\" must be an object", index=index
            )
        parameters: Dict[str, List[object]] = {}
        for name, values in raw_params.items():
            if not isinstance(values, list):
                raise StressConfigError(
                    f"query entry {index} parameter \"{name}\" must be a list of values",
                    index=index,
                )
            parameters[str(name)] = list(values)
        return cls(
            frequency=frequency,
            query=query,
            query_group=group,
            parameters=parameters,
        )

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"frequency": self.frequency}
        if self.query is not None:
            payload["query"] = self.query
        if self.query_group is not None:
            payload["queryGroup"] = self.query_group
        if self.parameters:
            payload["parameters"] = {k: list(v) for k, v in self.parameters.items()}
        return payload


@dataclass
class StressConf:
    """Top level object representing a parsed stress.json."""

    queries: List[QueryConf] = field(default_factory=list)
    query_groups: List[QueryGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "StressConf":
        if not isinstance(payload, Mapping):
            raise StressConfigError(
                f"stress configuration must be an object, got {type(payload).__name__}"
            )
        raw_queries = payload.get("queries") or []
        raw_groups = payload.get("queryGroups") or []
        if not isinstance(raw_queries, list):
            raise StressConfigError("\"queries\" must be a list")
        if not isinstance(raw_groups, list):
            raise StressConfigError("\"queryGroups\" must be a list")
        return cls(
            queries=[QueryConf.from_dict(item, idx) for idx, item in enumerate(raw_queries)],
            query_groups=[QueryGroup.from_dict(item) for item in raw_groups],
        )

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"queries": [q.to_dict() for q in self.queries]}
        if self.query_groups:
            payload["queryGroups"] = [g.to_dict() for g in self.query_groups]
        return payload
