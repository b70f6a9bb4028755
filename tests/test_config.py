from __future__ import annotations

import logging
from pathlib import Path

import pytest

from measurement_stats import MeasurementSeries
from measurement_stats.config import (
    StatsConfig,
    SummaryConfig,
    configure_logging,
    load_config,
    summarize_series,
)
from measurement_stats.core.methods import STATISTIC_KEYS
from measurement_stats.utils.logging import JsonFormatter


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    cfg = load_config()
    assert cfg.env.LOG_LEVEL == "INFO"
    assert cfg.summary.statistics == list(STATISTIC_KEYS)
    assert cfg.summary.log_summaries is False


def test_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert load_config().env.LOG_LEVEL == "DEBUG"


def test_yaml_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "stats.yaml"
    path.write_text("summary:\n  statistics: [median, sigma]\n  log_summaries: true\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.summary.statistics == ["median", "sigma"]
    assert cfg.summary.log_summaries is True


def test_default_yaml_file_is_picked_up(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "measurement_stats.yaml").write_text("summary:\n  statistics: [count]\n", encoding="utf-8")
    assert load_config().summary.statistics == ["count"]


def test_invalid_yaml_statistics(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "stats.yaml"
    path.write_text("summary:\n  statistics: [average, mode]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid stats.yaml"):
        load_config(path)


def test_summarize_series_uses_config() -> None:
    series = MeasurementSeries()
    for v in (1.0, 2.0, 6.0):
        series.add(v)
    cfg = StatsConfig(env={"LOG_LEVEL": "INFO"}, summary=SummaryConfig(statistics=["average", "median"]))
    assert summarize_series(series, cfg) == {"average": 3.0, "median": 2.0}


def test_configure_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "warning")
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        cfg = configure_logging()
        assert cfg.env.LOG_LEVEL == "warning"
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

        configure_logging(StatsConfig(env={"LOG_LEVEL": "DEBUG"}))
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
