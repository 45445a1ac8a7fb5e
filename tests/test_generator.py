"""Tests for stressgen/sampler/generator.py — sampling and rendering."""

import random
import threading
from collections import Counter

import pytest

from stressgen.conf.model import QueryConf, QueryGroup, StressConf
from stressgen.errors import StressConfigError
from stressgen.sampler import QueryGenerator, StressConfQueryGenerator, build_distribution


class TestQueries:

    def test_single_query_without_params(self):
        conf = StressConf(queries=[QueryConf(frequency=1, query="SELECT * FROM TEST")])
        assert StressConfQueryGenerator(conf).queries() == ["SELECT * FROM TEST"]

    def test_query_group_keeps_order(self):
        conf = StressConf(
            queries=[QueryConf(frequency=1, query_group="queryGroup1")],
            query_groups=[QueryGroup(name="queryGroup1", queries=[
                "SELECT * FROM TEST1", "SELECT * FROM TEST2", "SELECT * FROM TEST3",
            ])],
        )
        assert StressConfQueryGenerator(conf).queries() == [
            "SELECT * FROM TEST1", "SELECT * FROM TEST2", "SELECT * FROM TEST3",
        ]

    def test_group_rendered_with_entry_pool(self, weather_conf):
        generator = StressConfQueryGenerator(weather_conf, seed=1)
        assert generator.queries_for_pick(0)[1] == "create table t as select 7 as id"

    def test_parameterised_query(self, weather_conf):
        generator = StressConfQueryGenerator(weather_conf, seed=3)
        sql = generator.queries_for_pick(5)[0]
        assert sql.startswith("select * from weather where d between '2018-02-0")
        assert ":start" not in sql and ":end" not in sql

    def test_pick_example(self):
        conf = StressConf(queries=[
            QueryConf(frequency=1, query="A"),
            QueryConf(frequency=3, query="B"),
        ])
        generator = StressConfQueryGenerator(conf)
        assert generator.queries_for_pick(0) == ["A"]
        assert generator.queries_for_pick(2) == ["B"]

    def test_sample_alias(self):
        conf = StressConf(queries=[QueryConf(frequency=1, query="A")])
        assert StressConfQueryGenerator(conf).sample() == ["A"]

    def test_is_query_generator(self, weather_conf):
        assert isinstance(StressConfQueryGenerator(weather_conf), QueryGenerator)

    def test_invalid_conf_raises_on_construction(self):
        with pytest.raises(StressConfigError):
            StressConfQueryGenerator(StressConf(queries=[QueryConf(frequency=1)]))


class TestRandomness:

    def test_same_seed_same_sequence(self, weather_conf):
        first = StressConfQueryGenerator(weather_conf, seed=11)
        second = StressConfQueryGenerator(weather_conf, seed=11)
        assert [first.queries() for _ in range(50)] == [second.queries() for _ in range(50)]

    def test_injected_rng(self, weather_conf):
        index = build_distribution(weather_conf)
        a = StressConfQueryGenerator(index, rng=random.Random(5))
        b = StressConfQueryGenerator(index, rng=random.Random(5))
        assert [a.pick() for _ in range(20)] == [b.pick() for _ in range(20)]

    def test_selection_follows_frequency(self):
        conf = StressConf(queries=[
            QueryConf(frequency=1, query="A"),
            QueryConf(frequency=3, query="B"),
        ])
        generator = StressConfQueryGenerator(conf, seed=2024)
        counts = Counter(generator.queries()[0] for _ in range(4000))
        assert counts["A"] + counts["B"] == 4000
        assert 0.2 < counts["A"] / 4000 < 0.3

    def test_picks_within_total(self, weather_conf):
        generator = StressConfQueryGenerator(weather_conf, seed=0)
        picks = {generator.pick() for _ in range(500)}
        assert picks == set(range(10))

    def test_draw_returns_matcher(self, weather_conf):
        generator = StressConfQueryGenerator(weather_conf, seed=9)
        matcher, queries = generator.draw()
        assert matcher in generator.index.matchers
        assert len(queries) == len(matcher.query_list)

    def test_concurrent_sampling(self, weather_conf):
        generator = StressConfQueryGenerator(weather_conf, seed=4)
        results = []
        lock = threading.Lock()

        def worker():
            local = [generator.queries() for _ in range(200)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 800
        assert all(len(r) in (1, 3) for r in results)
