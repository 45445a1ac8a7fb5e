"""Read stress configurations from JSON or YAML."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from stressgen.errors import StressConfigError
from stressgen.log import get_logger

from .model import StressConf

logger = get_logger(__name__)

DEFAULT_STRESS_JSON = """{
  "queryGroups": [
    {
      "name": "schema",
      "queries": [
        "drop table if exists samples.\\"samples.dremio.com\\".\\"A\\"",
        "create table samples.\\"samples.dremio.com\\".\\"A\\" STORE AS (type => 'iceberg') AS SELECT \\"a\\",\\"b\\" FROM (values('a', 'b')) as t(\\"a\\",\\"b\\")",
        "select * from  samples.\\"samples.dremio.com\\".\\"A\\""
      ]
    }
  ],
  "queries": [
    {
      "queryGroup": "schema",
      "frequency": 1
    },
    {
      "query": "select * FROM Samples.\\"samples.dremio.com\\".\\"SF weather 2018-2019.csv\\" where \\"DATE\\" between ':start' and ':end'",
      "frequency": 9,
      "parameters": {
        "start": ["2018-02-04", "2018-02-05"],
        "end": ["2018-02-14", "2018-02-15"]
      }
    }
  ]
}
"""


def parse_stress_json(json_text: str) -> StressConf:
    """Convert stress.json text into a ``StressConf``."""

    try:
        payload = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise StressConfigError(f"unable to create configuration object: {exc}") from exc
    return StressConf.from_dict(payload)


def parse_stress_yaml(yaml_text: str) -> StressConf:
    """Convert a YAML rendition of stress.json into a ``StressConf``."""

    try:
        payload = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError as exc:
        raise StressConfigError(f"unable to create configuration object: {exc}") from exc
    return StressConf.from_dict(payload)


def load_stress_conf(path: str | Path) -> StressConf:
    """Load a stress configuration, choosing the parser from the file suffix."""

    conf_path = Path(path)
    try:
        text = conf_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StressConfigError(f"unable to read {conf_path}: {exc}") from exc
    if conf_path.suffix.lower() in (".yaml", ".yml"):
        conf = parse_stress_yaml(text)
    else:
        conf = parse_stress_json(text)
    logger.debug(
        "loaded %s: %d queries, %d query groups",
        conf_path, len(conf.queries), len(conf.query_groups),
    )
    return conf


def default_stress_conf() -> StressConf:
    """Return the bundled example stress job."""

    return parse_stress_json(DEFAULT_STRESS_JSON)
