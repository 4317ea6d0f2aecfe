"""Tests for rendering a namespace mapping."""

import json

import pytest
import yaml

from nsparse.utils.yaml_utils import dump_json, dump_yaml, render, summarize

NS = {"pull": ["k2=v2", "kp2=vp2"], "global": ["key1=value2"]}


def test_dump_json_sorted():
    out = dump_json(NS)
    assert list(json.loads(out)) == ["global", "pull"]
    assert out.startswith('{\n  "global"')


def test_dump_json_unsorted_keeps_order():
    assert list(json.loads(dump_json(NS, sort_keys=False))) == ["pull", "global"]


def test_dump_yaml_block_style():
    out = dump_yaml(NS)
    assert yaml.safe_load(out) == NS
    assert "- kp2=vp2" in out
    assert out.index("global") < out.index("pull")


def test_render_dispatch():
    assert json.loads(render(NS, "JSON")) == NS
    assert yaml.safe_load(render(NS, "yml")) == NS
    with pytest.raises(ValueError):
        render(NS, "toml")


def test_summarize():
    assert summarize(NS) == ["pull: 2 clauses", "global: 1 clause"]
    assert summarize({}) == []
