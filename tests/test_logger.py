"""
Unit tests for the structured loggers.
"""

import io
import json

import pytest

from travgraph import Graph, StdLogger


def test_level_threshold():
    out = io.StringIO()
    log = StdLogger(level="info", stream=out)
    log.debug("hidden", a=1)
    log.info("shown", a=1, b="x")
    assert out.getvalue() == "info shown a=1 b=x\n"


def test_json_format():
    out = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=out).warning("evt", n=3)
    assert json.loads(out.getvalue()) == {"level": "warning", "event": "evt", "n": 3}


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        StdLogger(level="trace")


def test_negative_weight_warns():
    out = io.StringIO()
    g = Graph(2, logger=StdLogger(stream=out))
    g.add_edge(0, 1, -2)
    assert g.weight(0, 1) == -2
    assert out.getvalue().startswith("warning negative_weight")


def test_traversals_emit_debug_events(demo_graph):
    out = io.StringIO()
    demo_graph.logger = StdLogger(level="debug", json_fmt=True, stream=out)
    demo_graph.bfs(0)
    demo_graph.dfs(0)
    demo_graph.dijkstra(0, 5)
    events = [json.loads(line) for line in out.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["bfs", "dfs", "dijkstra"]
    assert events[0]["reached"] == 6
    assert events[2]["target"] == 5


def test_bound_fields_come_first():
    out = io.StringIO()
    log = StdLogger(level="info", stream=out).bind(algo="bfs")
    log.info("graph", n=3)
    assert out.getvalue() == "info graph algo=bfs n=3\n"


def test_bind_does_not_touch_parent():
    out = io.StringIO()
    parent = StdLogger(level="info", json_fmt=True, stream=out)
    parent.bind(run=1)
    parent.info("evt")
    assert json.loads(out.getvalue()) == {"level": "info", "event": "evt"}


def test_event_fields_override_bound_fields():
    out = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=out).bind(source=0).debug("bfs", source=4)
    assert json.loads(out.getvalue())["source"] == 4
