"""Benchmark service — simulated industry benchmarks and company comparison."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import date

from manda.benchmarks import catalog
from manda.benchmarks.schemas import (
    BenchmarkMetadata,
    BenchmarkMetric,
    BenchmarkRange,
    BenchmarkResult,
    Industry,
    Subcategory,
    Trend,
    TrendPoint,
)
from manda.benchmarks.trends import COMPARISON_THRESHOLD, classify_trend
from manda.config import BenchmarkSettings

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str, int, int | str]


class BenchmarkService:
    """Generates benchmark snapshots and caches them per query.

    Snapshots returned by ``fetch_benchmarks`` are shared; callers must not
    mutate them. ``compare_to_company`` always works on copies.
    """

    def __init__(
        self,
        settings: BenchmarkSettings | None = None,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.settings = settings or BenchmarkSettings()
        self._rng = rng or random.Random(self.settings.seed)
        self._today = today
        self._cache: dict[CacheKey, dict[str, BenchmarkResult]] = {}

    # ------------------------------------------------------------------
    # Benchmarks
    # ------------------------------------------------------------------

    def fetch_benchmarks(
        self,
        industry_id: str,
        subcategory_id: str | None = None,
        year: int | None = None,
        quarter: int | None = None,
    ) -> dict[str, BenchmarkResult]:
        """Return one result per catalog metric for the given query."""
        today = self._today()
        key: CacheKey = (
            industry_id,
            subcategory_id or "all",
            year or today.year,
            quarter or "all",
        )
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        ranges = self.benchmark_ranges(industry_id, subcategory_id)
        last_updated = today.isoformat()

        results: dict[str, BenchmarkResult] = {}
        for metric in catalog.METRICS:
            bounds = ranges.get(metric.id, catalog.MISSING_RANGE)
            results[metric.id] = BenchmarkResult(
                value=0,
                average=bounds.avg,
                max_value=bounds.max * 1.2,
                trend=Trend.STABLE,
                change_percent=0.0,
                metadata=BenchmarkMetadata(
                    data_source=self.settings.data_source,
                    last_updated=last_updated,
                    sample_size=self._rng.randint(100, 599),
                    is_real_time=False,
                    confidence_score=self.settings.confidence_score,
                ),
            )

        logger.debug("Generated %d benchmarks for %s", len(results), key)
        self._cache[key] = results
        return results

    def compare_to_company(
        self,
        industry_id: str,
        metrics: Mapping[str, float],
        subcategory_id: str | None = None,
    ) -> dict[str, BenchmarkResult]:
        """Overlay company values on the industry benchmarks.

        Args:
            industry_id: Catalog industry id.
            metrics: Company value per metric id. Unknown ids are ignored.
            subcategory_id: Optional subcategory.

        Returns:
            Fresh copies of every benchmark; supplied metrics carry the
            company value and a trend against the industry average.
        """
        benchmarks = self.fetch_benchmarks(industry_id, subcategory_id)

        results: dict[str, BenchmarkResult] = {}
        for metric_id, benchmark in benchmarks.items():
            if metric_id not in metrics:
                results[metric_id] = benchmark.copy()
                continue
            value = metrics[metric_id]
            trend, change = classify_trend(value, benchmark.average, COMPARISON_THRESHOLD)
            results[metric_id] = replace(
                benchmark.copy(),
                value=value,
                trend=trend,
                change_percent=change,
            )
        return results

    def metric_trend_data(
        self,
        industry_id: str,
        metric_id: str,
        subcategory_id: str | None = None,
        years: int = 5,
    ) -> list[TrendPoint]:
        """Synthetic yearly history ending at the current year."""
        current_year = self._today().year
        ranges = self.benchmark_ranges(industry_id, subcategory_id)
        base = ranges[metric_id].avg if metric_id in ranges else 50

        points: list[TrendPoint] = []
        for i in range(years):
            year = current_year - years + i + 1
            noise = (self._rng.random() - 0.5) * base * 0.1
            drift = base * 0.005 * i
            points.append(TrendPoint(date=str(year), value=base + noise + drift))
        return points

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def industries(self) -> tuple[Industry, ...]:
        return catalog.INDUSTRIES

    def subcategories(self, industry_id: str) -> tuple[Subcategory, ...]:
        industry = catalog.get_industry(industry_id)
        return industry.subcategories if industry else ()

    def metrics(self) -> tuple[BenchmarkMetric, ...]:
        return catalog.METRICS

    def metric(self, metric_id: str) -> BenchmarkMetric | None:
        return catalog.get_metric(metric_id)

    def benchmark_ranges(
        self,
        industry_id: str,
        subcategory_id: str | None = None,
    ) -> dict[str, BenchmarkRange]:
        # Subcategories share their industry's ranges.
        return catalog.ranges_for(industry_id)

    def clear_cache(self) -> None:
        self._cache.clear()
