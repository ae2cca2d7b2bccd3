"""Simulated push backend for the live benchmark feed.

Speaks the same JSON protocol as the production socket endpoint and keeps
a slowly drifting benchmark state for a single client connection.
"""

from __future__ import annotations

import copy
import json
import logging
import random
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from manda.benchmarks.trends import LIVE_THRESHOLD, classify_trend

logger = logging.getLogger(__name__)

DATA_SOURCE = "European Market Index"
UNKNOWN_VALUE = {"average": 50.0, "maxValue": 90.0}

INITIAL_STATE: dict[str, dict[str, dict[str, float]]] = {
    "tech": {
        "revenue_growth": {"average": 18, "maxValue": 32.4},
        "profit_margin": {"average": 20, "maxValue": 36},
        "digital_transformation": {"average": 80, "maxValue": 95},
        "r_and_d": {"average": 15, "maxValue": 27},
    },
    "retail": {
        "profit_margin": {"average": 8, "maxValue": 14.4},
        "customer_acquisition_cost": {"average": 50, "maxValue": 90},
        "customer_retention": {"average": 75, "maxValue": 90},
    },
    "manufacturing": {
        "revenue_growth": {"average": 5, "maxValue": 9},
        "employee_productivity": {"average": 200000, "maxValue": 360000},
        "digital_transformation": {"average": 42, "maxValue": 75.6},
    },
    "healthcare": {
        "profit_margin": {"average": 15, "maxValue": 27},
        "employee_productivity": {"average": 180000, "maxValue": 324000},
        "r_and_d": {"average": 18, "maxValue": 32.4},
    },
    "finance": {
        "profit_margin": {"average": 25, "maxValue": 45},
        "employee_productivity": {"average": 350000, "maxValue": 630000},
        "debt_to_equity": {"average": 3, "maxValue": 5.4},
        "cash_flow": {"average": 20, "maxValue": 36},
    },
}

INITIAL_DEFAULTS: dict[str, dict[str, float]] = {
    "revenue_growth": {"average": 8, "maxValue": 14.4},
    "profit_margin": {"average": 15, "maxValue": 27},
    "roi": {"average": 15, "maxValue": 27},
    "employee_productivity": {"average": 150000, "maxValue": 270000},
    "customer_acquisition_cost": {"average": 200, "maxValue": 360},
    "customer_retention": {"average": 80, "maxValue": 92},
    "digital_transformation": {"average": 65, "maxValue": 88},
    "r_and_d": {"average": 5, "maxValue": 9},
    "debt_to_equity": {"average": 1.0, "maxValue": 1.8},
    "cash_flow": {"average": 15, "maxValue": 27},
}

INDUSTRY_ALIASES = {
    "fs": "finance",
    "finance": "fs",
    "tech": "tech",
    "technology": "tech",
    "healthcare": "healthcare",
    "health": "healthcare",
    "manufacturing": "manufacturing",
    "retail": "retail",
}

METRIC_ALIASES = {
    "revenue_growth": "revenue_growth",
    "revenuegrowth": "revenue_growth",
    "growth": "revenue_growth",
    "profit_margin": "profit_margin",
    "profitmargin": "profit_margin",
    "margin": "profit_margin",
    "roi": "roi",
    "return_on_investment": "roi",
    "returnoninvestment": "roi",
    "digital_transformation": "digital_transformation",
    "digitaltransformation": "digital_transformation",
    "transformation": "digital_transformation",
}


class SimulatedBenchmarkServer:
    """Protocol handler and drifting state for one connected client."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._rng = rng or random.Random()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.state = copy.deepcopy(INITIAL_STATE)
        self.defaults = copy.deepcopy(INITIAL_DEFAULTS)
        self.subscriptions: list[dict[str, Any]] = []

    def _timestamp(self) -> str:
        return self._clock().isoformat()

    def _error(self, text: str) -> dict[str, Any]:
        return {"type": "error", "error": text, "timestamp": self._timestamp()}

    # ------------------------------------------------------------------
    # Protocol
    # ------------------------------------------------------------------

    def handle(self, message: dict[str, Any] | str) -> list[dict[str, Any]]:
        """Answer one inbound message with zero or more replies."""
        if isinstance(message, str):
            if not message.strip():
                return [self._error("Empty message received")]
            try:
                message = json.loads(message)
            except json.JSONDecodeError:
                if message.strip().lower() == "ping":
                    return [{"type": "pong", "timestamp": self._timestamp()}]
                return [self._error('Message must be valid JSON or "ping" command')]

        if not isinstance(message, dict):
            return [self._error("Invalid message format")]

        kind = message.get("type")
        logger.debug("Received message: %s", kind or "[unknown]")

        if kind == "subscribe":
            return [
                {
                    "type": "subscription_confirmed",
                    "channel": message.get("channel"),
                    "timestamp": self._timestamp(),
                }
            ]
        if kind == "subscribe_metrics":
            return self._subscribe_metrics(message)
        if kind == "ping":
            return [{"type": "pong", "timestamp": self._timestamp()}]
        return []

    def _subscribe_metrics(self, message: dict[str, Any]) -> list[dict[str, Any]]:
        industry = message.get("industry")
        metrics = message.get("metrics")
        if not industry or not isinstance(metrics, list) or not metrics:
            return [
                self._error("Invalid subscription data: industry and metrics array are required")
            ]

        self.subscriptions.append(
            {"industry": industry, "subcategory": message.get("subcategory"), "metrics": metrics}
        )
        logger.info("Client subscribed to %s: %s", industry, ", ".join(metrics))

        timestamp = self._timestamp()
        initial: dict[str, Any] = {}
        for metric_id in metrics:
            value = self.benchmark_value(industry, metric_id)
            initial[metric_id] = {
                "average": value["average"],
                "maxValue": value["maxValue"],
                "trend": "stable",
                "changePercent": 0,
                "metadata": self._metadata(timestamp, confidence=92),
            }

        return [
            {"type": "benchmark_update", "timestamp": timestamp, "data": initial},
            {
                "type": "subscription_confirmed",
                "industry": industry,
                "subcategory": message.get("subcategory"),
                "metrics": metrics,
                "timestamp": timestamp,
            },
        ]

    def _metadata(self, timestamp: str, confidence: int) -> dict[str, Any]:
        return {
            "dataSource": DATA_SOURCE,
            "lastUpdated": timestamp,
            "sampleSize": 200 + self._rng.randrange(100),
            "isRealTime": True,
            "updateFrequency": "15s",
            "europeanIndex": True,
            "confidenceScore": confidence,
        }

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def benchmark_value(self, industry: str, metric_id: str) -> dict[str, float]:
        """Current ``{average, maxValue}`` for a metric, via the alias chain."""
        if not industry or not metric_id:
            return dict(UNKNOWN_VALUE)

        found = self.state.get(industry, {}).get(metric_id)
        if found is not None:
            return dict(found)

        alternate = INDUSTRY_ALIASES.get(industry)
        if alternate:
            found = self.state.get(alternate, {}).get(metric_id)
            if found is not None:
                return dict(found)

        if metric_id in self.defaults:
            return dict(self.defaults[metric_id])

        alias = METRIC_ALIASES.get(metric_id.lower())
        if alias and alias in self.defaults:
            return dict(self.defaults[alias])

        return dict(UNKNOWN_VALUE)

    def perturb(self) -> None:
        """Drift every tracked value with a slight upward bias."""
        for metrics in self.state.values():
            for metric_id, current in metrics.items():
                metrics[metric_id] = self._drift(current["average"], 0.02)
        for metric_id, current in self.defaults.items():
            self.defaults[metric_id] = self._drift(current["average"], 0.015)

    def _drift(self, average: float, spread: float) -> dict[str, float]:
        new = average * (1 + (self._rng.random() - 0.4) * spread)
        return {"average": round(new, 2), "maxValue": round(new * 1.8, 2)}

    def broadcast(self) -> list[dict[str, Any]]:
        """Advance the state and build one update per subscription."""
        if not self.subscriptions:
            logger.debug("No subscriptions, skipping broadcast")
            return []

        previous = {
            (sub["industry"], metric_id): self.benchmark_value(sub["industry"], metric_id)
            for sub in self.subscriptions
            for metric_id in sub["metrics"]
        }
        self.perturb()
        timestamp = self._timestamp()

        messages: list[dict[str, Any]] = []
        for sub in self.subscriptions:
            updates: dict[str, Any] = {}
            for metric_id in sub["metrics"]:
                value = self.benchmark_value(sub["industry"], metric_id)
                before = previous[(sub["industry"], metric_id)]["average"]
                trend, change = classify_trend(value["average"], before, LIVE_THRESHOLD)
                updates[metric_id] = {
                    "average": value["average"],
                    "maxValue": value["maxValue"],
                    "trend": trend.value,
                    "changePercent": change,
                    "metadata": self._metadata(
                        timestamp, confidence=88 + self._rng.randrange(10)
                    ),
                }
            messages.append({"type": "benchmark_update", "timestamp": timestamp, "data": updates})
        return messages
