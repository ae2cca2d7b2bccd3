"""Application settings loaded from YAML with environment variable overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Settings sections
# ---------------------------------------------------------------------------


class ResponderSettings(BaseModel):
    provider: str = "knowledge_base"
    model: str = "emilia-knowledge-base"
    reply_delay: float = 0.5


class DeepSeekSettings(BaseModel):
    base_url: str = "https://api.deepseek.com/v1"
    model: str = "deepseek-chat"
    temperature: float = 0.3
    max_tokens: int = 1000
    timeout: float = 60.0


class BenchmarkSettings(BaseModel):
    data_source: str = "Industry Association Data"
    confidence_score: int = 85
    seed: int | None = None


class FeedSettings(BaseModel):
    transport: str = "mock"
    host: str = "localhost:5000"
    secure: bool = False
    path: str = "/ws"
    poll_interval: float = 15.0
    update_frequency: str = "15s"
    handshake_timeout: float = 5.0
    max_reconnect_attempts: int = 5
    backoff_base: float = 1.0
    backoff_cap: float = 30.0


class LoggingSettings(BaseModel):
    level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    datefmt: str = "%H:%M:%S"


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    responder: ResponderSettings = Field(default_factory=ResponderSettings)
    deepseek: DeepSeekSettings = Field(default_factory=DeepSeekSettings)
    benchmarks: BenchmarkSettings = Field(default_factory=BenchmarkSettings)
    feed: FeedSettings = Field(default_factory=FeedSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _find_settings_file() -> Path | None:
    """Walk up from cwd looking for settings.yaml."""
    profile = os.getenv("MANDA_PROFILE", "")
    names = [f"settings-{profile}.yaml", "settings.yaml"] if profile else ["settings.yaml"]

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in names:
            candidate = parent / name
            if candidate.exists():
                return candidate
    return None


def load_settings() -> Settings:
    """Load settings from YAML file, falling back to defaults."""
    path = _find_settings_file()
    if path is None:
        return Settings()

    with open(path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}

    return Settings(**raw)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Apply the configured level and format to the root logger.

    Called once at start-up by the CLI.
    """
    cfg = settings or LoggingSettings()
    logging.basicConfig(
        level=getattr(logging, cfg.level.upper(), logging.INFO),
        format=cfg.format,
        datefmt=cfg.datefmt,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("websockets").setLevel(logging.WARNING)
