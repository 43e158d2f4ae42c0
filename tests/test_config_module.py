"""Tests for :mod:`kingraph.config`."""

from __future__ import annotations

import pytest

from kingraph import config


def test_get_env_reads_from_project_dotenv(monkeypatch):
    """The helper should pull values from the project ``.env`` file."""

    config._load_environment.cache_clear()
    monkeypatch.delenv("KINGRAPH_DESCENDANT_LIMIT", raising=False)

    assert config.get_env("KINGRAPH_DESCENDANT_LIMIT") == "1000"


def test_get_env_prefers_process_environment(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.setenv("KINGRAPH_DESCENDANT_LIMIT", "25")

    assert config.get_env("KINGRAPH_DESCENDANT_LIMIT") == "25"


def test_get_env_returns_default_when_missing(monkeypatch):
    monkeypatch.delenv("KINGRAPH_DOES_NOT_EXIST", raising=False)
    assert config.get_env("KINGRAPH_DOES_NOT_EXIST", default="fallback") == "fallback"


def test_query_limits_from_env(monkeypatch):
    monkeypatch.setenv("KINGRAPH_DESCENDANT_LIMIT", " 250 ")
    monkeypatch.setenv("KINGRAPH_ANCESTOR_LIMIT", "none")

    limits = config.QueryLimits.from_env()
    assert limits.descendant_limit == 250
    assert limits.ancestor_limit is None


def test_query_limits_defaults():
    limits = config.QueryLimits()
    assert limits.descendant_limit == config.DEFAULT_DESCENDANT_LIMIT == 1000
    assert limits.ancestor_limit == config.DEFAULT_ANCESTOR_LIMIT


@pytest.mark.parametrize("raw", ["many", "-5", "1.5"])
def test_query_limits_reject_bad_values(monkeypatch, raw):
    monkeypatch.setenv("KINGRAPH_DESCENDANT_LIMIT", raw)
    with pytest.raises(ValueError):
        config.QueryLimits.from_env()


def test_query_limits_zero_is_a_real_limit(monkeypatch):
    monkeypatch.setenv("KINGRAPH_DESCENDANT_LIMIT", "0")
    monkeypatch.setenv("KINGRAPH_ANCESTOR_LIMIT", "0")

    limits = config.QueryLimits.from_env()
    assert limits.descendant_limit == 0
    assert limits.ancestor_limit == 0


def test_query_limits_from_env_match_explicit_limits(monkeypatch):
    from kingraph.graph.query import QueryService
    from kingraph.graph.store import GraphStore

    monkeypatch.setenv("KINGRAPH_DESCENDANT_LIMIT", "0")
    store = GraphStore.build({1: "A", 2: "B"}, [(1, 2)])

    from_env = QueryService(store, config.QueryLimits.from_env()).ancestry(1)
    explicit = QueryService(store, config.QueryLimits(descendant_limit=0)).ancestry(1)
    assert from_env.parents_only is explicit.parents_only is True
