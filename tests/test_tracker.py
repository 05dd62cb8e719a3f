"""Tests for missing-state sentinels."""

from env_vars_config import tracker


def test_sentinel_name_default():
    assert tracker.sentinel_name("WORKERS_COUNT") == "_WORKERS_COUNT_WAS_MISSING"


def test_sentinel_name_follows_settings(monkeypatch):
    monkeypatch.setenv("ENV_VARS_CONFIG_SENTINEL_PREFIX", "__")
    monkeypatch.setenv("ENV_VARS_CONFIG_SENTINEL_SUFFIX", "_DEFAULTED")
    assert tracker.sentinel_name("PORT") == "__PORT_DEFAULTED"


def test_absent_sentinel_means_present(env):
    assert tracker.is_missing("WORKERS_COUNT") is False


def test_mark_then_read(env):
    tracker.mark_missing("WORKERS_COUNT")
    assert env.get("_WORKERS_COUNT_WAS_MISSING") == "true"
    assert tracker.is_missing("WORKERS_COUNT") is True


def test_only_true_counts_as_missing(env):
    env.set("_WORKERS_COUNT_WAS_MISSING", "false")
    assert tracker.is_missing("WORKERS_COUNT") is False


def test_warn_if_missing_repeats(env, logged_warnings):
    tracker.mark_missing("WORKERS_COUNT")
    assert tracker.warn_if_missing("WORKERS_COUNT", 32) is False
    assert tracker.warn_if_missing("WORKERS_COUNT", 32) is False
    assert [w["variable"] for w in logged_warnings()] == ["WORKERS_COUNT", "WORKERS_COUNT"]


def test_warn_if_missing_silent_when_present(env, logged_warnings):
    assert tracker.warn_if_missing("WORKERS_COUNT", 32) is True
    assert logged_warnings() == []
