from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.methods import STATISTIC_KEYS, SupportsStatistics, summarize
from .utils.logging import setup_logging


DEFAULT_CONFIG_FILE = "measurement_stats.yaml"


class SummaryConfig(BaseModel):
    """Which statistics a summary reports, and whether it is logged."""

    statistics: List[str] = Field(
        default_factory=lambda: list(STATISTIC_KEYS),
        description="Statistic keys, in report order (see core.methods.build_registry)",
    )
    log_summaries: bool = Field(False, description="Log each summary at INFO level")

    @field_validator("statistics")
    @classmethod
    def _known_statistics(cls, v: List[str]) -> List[str]:
        unknown = [key for key in v if key not in STATISTIC_KEYS]
        if unknown:
            raise ValueError(f"unknown statistics: {', '.join(unknown)}")
        return v


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"


class StatsConfig(BaseModel):
    env: EnvSettings
    summary: SummaryConfig = Field(default_factory=SummaryConfig)

    @field_validator("env", mode="before")
    @classmethod
    def _coerce_env(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, dict):
            return EnvSettings(**v)
        return v

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "StatsConfig":
        env = EnvSettings()  # loads from environment and .env

        summary = SummaryConfig()
        if config_path is None:
            default_path = Path(DEFAULT_CONFIG_FILE)
            config_path = default_path if default_path.exists() else None

        if config_path and Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            try:
                summary = SummaryConfig(**raw.get("summary", {}))
            except ValidationError as ve:
                raise ValueError(f"Invalid {Path(config_path).name}: {ve}") from ve

        return StatsConfig(env=env, summary=summary)


def load_config(config_path: Optional[Path] = None) -> StatsConfig:
    """Load merged configuration from environment and optional YAML."""

    return StatsConfig.load(config_path)


def summarize_series(
    series: SupportsStatistics, config: Optional[StatsConfig] = None
) -> Dict[str, float]:
    """Summarize ``series`` with the statistics selected in the configuration."""
    cfg = config if config is not None else load_config()
    return summarize(series, cfg.summary.statistics, log=cfg.summary.log_summaries)


def configure_logging(config: Optional[StatsConfig] = None) -> StatsConfig:
    """Install JSON logging at the configured ``LOG_LEVEL``."""
    cfg = config if config is not None else load_config()
    setup_logging(cfg.env.LOG_LEVEL)
    return cfg
