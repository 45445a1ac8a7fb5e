"""Emit sampled stress iterations to external representations."""

from .yaml_emit import write_workload
from .sql_emit import write_sql_dir

__all__ = ["write_workload", "write_sql_dir"]
