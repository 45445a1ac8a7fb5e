"""YAML emission of sampled stress iterations."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import yaml


def write_workload(path: str | Path, iterations: List[Dict[str, object]]) -> None:
    """Persist sampled iterations to YAML under a ``workload`` key."""

    payload = {"workload": iterations}
    with Path(path).open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, sort_keys=False)
