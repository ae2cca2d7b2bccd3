"""Industry benchmarks — static comparison and a simulated live feed."""

from manda.benchmarks.factory import available_transports, transport_factory
from manda.benchmarks.feed import FeedError, LiveBenchmarkFeed
from manda.benchmarks.schemas import (
    BenchmarkMetadata,
    BenchmarkResult,
    ConnectionState,
    FeedCallbacks,
    FeedMode,
    Trend,
)
from manda.benchmarks.service import BenchmarkService
from manda.benchmarks.transport import MockTransport, Transport, TransportError

__all__ = [
    "BenchmarkMetadata",
    "BenchmarkResult",
    "BenchmarkService",
    "ConnectionState",
    "FeedCallbacks",
    "FeedError",
    "FeedMode",
    "LiveBenchmarkFeed",
    "MockTransport",
    "Transport",
    "TransportError",
    "Trend",
    "available_transports",
    "transport_factory",
]
