"""Data models for industry benchmarks and the live feed."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any


class Trend(StrEnum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class MetricUnit(StrEnum):
    PERCENT = "%"
    CURRENCY = "$"
    RATIO = "ratio"
    SCORE = "score"
    EMISSIONS = "tons/$M"


class ConnectionState(StrEnum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


class FeedMode(StrEnum):
    """Which update strategy the live feed is running."""

    IDLE = "idle"
    PUSH = "push"
    POLL = "poll"


# ---------------------------------------------------------------------------
# Catalog types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Subcategory:
    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class Industry:
    id: str
    name: str
    description: str
    subcategories: tuple[Subcategory, ...] = ()


@dataclass(frozen=True)
class BenchmarkMetric:
    id: str
    name: str
    description: str
    unit: MetricUnit
    higher_is_better: bool = True


@dataclass(frozen=True)
class BenchmarkRange:
    min: float
    avg: float
    max: float


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class BenchmarkMetadata:
    """Provenance of a benchmark value."""

    data_source: str
    last_updated: str
    sample_size: int
    is_real_time: bool = False
    update_frequency: str | None = None
    european_index: bool | None = None
    confidence_score: int | None = None

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "dataSource": self.data_source,
            "lastUpdated": self.last_updated,
            "sampleSize": self.sample_size,
            "isRealTime": self.is_real_time,
        }
        if self.update_frequency is not None:
            data["updateFrequency"] = self.update_frequency
        if self.european_index is not None:
            data["europeanIndex"] = self.european_index
        if self.confidence_score is not None:
            data["confidenceScore"] = self.confidence_score
        return data

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> BenchmarkMetadata:
        return cls(
            data_source=data.get("dataSource", "European Market Index"),
            last_updated=data.get("lastUpdated", ""),
            sample_size=int(data.get("sampleSize", 250)),
            is_real_time=bool(data.get("isRealTime", False)),
            update_frequency=data.get("updateFrequency"),
            european_index=data.get("europeanIndex"),
            confidence_score=data.get("confidenceScore"),
        )

    def merged(self, partial: dict[str, Any]) -> BenchmarkMetadata:
        """Return a copy with the wire fields present in ``partial`` applied."""
        changes: dict[str, Any] = {}
        for wire_key, attr in _METADATA_FIELDS.items():
            if wire_key in partial:
                changes[attr] = partial[wire_key]
        return replace(self, **changes)


_METADATA_FIELDS = {
    "dataSource": "data_source",
    "lastUpdated": "last_updated",
    "sampleSize": "sample_size",
    "isRealTime": "is_real_time",
    "updateFrequency": "update_frequency",
    "europeanIndex": "european_index",
    "confidenceScore": "confidence_score",
}


@dataclass
class BenchmarkResult:
    """A company value set against the industry distribution for one metric."""

    value: float
    average: float
    max_value: float
    metadata: BenchmarkMetadata
    trend: Trend = Trend.STABLE
    change_percent: float = 0.0
    percentile: float | None = None

    def copy(self) -> BenchmarkResult:
        return replace(self, metadata=replace(self.metadata))

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "value": self.value,
            "average": self.average,
            "maxValue": self.max_value,
            "trend": self.trend.value,
            "changePercent": self.change_percent,
            "metadata": self.metadata.to_wire(),
        }
        if self.percentile is not None:
            data["percentile"] = self.percentile
        return data

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> BenchmarkResult:
        """Build a result from a possibly partial wire payload."""
        return cls(
            value=float(data.get("value", 0)),
            average=float(data.get("average", 0)),
            max_value=float(data.get("maxValue", 0)),
            trend=Trend(data.get("trend", Trend.STABLE)),
            change_percent=float(data.get("changePercent", 0)),
            percentile=data.get("percentile"),
            metadata=BenchmarkMetadata.from_wire(data.get("metadata") or {}),
        )

    def merged(self, partial: dict[str, Any]) -> BenchmarkResult:
        """Apply an inbound partial update. The company ``value`` is kept."""
        return BenchmarkResult(
            value=self.value,
            average=float(partial.get("average", self.average)),
            max_value=float(partial.get("maxValue", self.max_value)),
            trend=Trend(partial.get("trend", self.trend)),
            change_percent=float(partial.get("changePercent", self.change_percent)),
            percentile=partial.get("percentile", self.percentile),
            metadata=self.metadata.merged(partial.get("metadata") or {}),
        )


@dataclass(frozen=True)
class TrendPoint:
    date: str
    value: float


@dataclass
class FeedCallbacks:
    """Optional connection lifecycle hooks for the live feed."""

    on_connecting: Callable[[], None] | None = None
    on_connected: Callable[[], None] | None = None
    on_disconnected: Callable[[], None] | None = None
    on_error: Callable[[Exception], None] | None = None
