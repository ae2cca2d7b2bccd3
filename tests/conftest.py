"""Shared fixtures for tests — deterministic services, no network calls."""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import date, datetime, timezone

import pytest

from manda.benchmarks.service import BenchmarkService
from manda.config import FeedSettings
from manda.knowledge.factory import clear_cache
from manda.knowledge.knowledge_base import KnowledgeBaseResponder
from manda.knowledge.site_faq import SiteFAQResponder

FIXED_TODAY = date(2025, 6, 15)
FIXED_NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Knowledge fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clear_responder_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def responder() -> KnowledgeBaseResponder:
    return KnowledgeBaseResponder()


@pytest.fixture
def site_responder() -> SiteFAQResponder:
    return SiteFAQResponder()


# ---------------------------------------------------------------------------
# Benchmark fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def service() -> BenchmarkService:
    return BenchmarkService(rng=random.Random(42), today=lambda: FIXED_TODAY)


@pytest.fixture
def fast_feed_settings() -> FeedSettings:
    """Feed timings shrunk so reconnect and poll paths finish in milliseconds."""
    return FeedSettings(
        poll_interval=0.01,
        handshake_timeout=0.05,
        max_reconnect_attempts=5,
        backoff_base=0.001,
        backoff_cap=0.002,
    )


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW

