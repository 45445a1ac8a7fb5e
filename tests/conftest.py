"""
Shared test fixtures for stressgen.

Provides:
- weather_conf: stress configuration with a query group and a parameterised query
- stress_json_path: the same configuration written to a temporary stress.json
"""

import json

import pytest

from stressgen.conf.model import StressConf

WEATHER_PAYLOAD = {
    "queryGroups": [
        {
            "name": "schema",
            "queries": [
                "drop table if exists t",
                "create table t as select :id as id",
                "select * from t",
            ],
        }
    ],
    "queries": [
        {"queryGroup": "schema", "frequency": 1, "parameters": {"id": [7]}},
        {
            "query": "select * from weather where d between ':start' and ':end'",
            "frequency": 9,
            "parameters": {
                "start": ["2018-02-04", "2018-02-05"],
                "end": ["2018-02-14", "2018-02-15"],
            },
        },
    ],
}


@pytest.fixture
def weather_payload():
    return json.loads(json.dumps(WEATHER_PAYLOAD))


@pytest.fixture
def weather_conf(weather_payload):
    return StressConf.from_dict(weather_payload)


@pytest.fixture
def stress_json_path(tmp_path, weather_payload):
    path = tmp_path / "stress.json"
    path.write_text(json.dumps(weather_payload), encoding="utf-8")
    return path
