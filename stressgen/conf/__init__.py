"""Stress configuration model and loaders."""

from .model import QueryConf, QueryGroup, StressConf
from .loader import (
    DEFAULT_STRESS_JSON,
    default_stress_conf,
    load_stress_conf,
    parse_stress_json,
    parse_stress_yaml,
)

__all__ = [
    "QueryConf",
    "QueryGroup",
    "StressConf",
    "DEFAULT_STRESS_JSON",
    "default_stress_conf",
    "load_stress_conf",
    "parse_stress_json",
    "parse_stress_yaml",
]
