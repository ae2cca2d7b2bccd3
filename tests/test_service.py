"""Tests for the benchmark service and catalog lookups."""

from __future__ import annotations

import random
from datetime import date

import pytest

from manda.benchmarks import catalog
from manda.benchmarks.schemas import Trend
from manda.benchmarks.service import BenchmarkService
from manda.config import BenchmarkSettings

TODAY = date(2025, 6, 15)

# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TestCatalog:
    def test_metric_count(self, service):
        assert len(service.metrics()) == 32

    def test_metric_ids_unique(self):
        ids = [m.id for m in catalog.METRICS]
        assert len(ids) == len(set(ids))

    def test_industries(self, service):
        ids = [i.id for i in service.industries()]
        assert len(ids) == 15
        assert "tech" in ids
        assert "pe-vc" in ids

    def test_subcategories(self, service):
        subs = service.subcategories("tech")
        assert len(subs) == 8
        assert catalog.parent_industry_id(subs[0].id) == "tech"

    def test_unknown_industry_has_no_subcategories(self, service):
        assert service.subcategories("nope") == ()

    def test_metric_lookup(self, service):
        assert service.metric("revenue_growth").name == "Revenue Growth"
        assert service.metric("nope") is None

    def test_ranges_overlay_defaults(self, service):
        ranges = service.benchmark_ranges("tech")
        assert ranges["revenue_growth"].avg == 18
        assert ranges["roi"] == catalog.DEFAULT_RANGES["roi"]

    def test_unknown_industry_uses_defaults(self, service):
        assert service.benchmark_ranges("nope") == catalog.DEFAULT_RANGES


# ---------------------------------------------------------------------------
# fetch_benchmarks
# ---------------------------------------------------------------------------


class TestFetchBenchmarks:
    def test_every_metric_present(self, service):
        results = service.fetch_benchmarks("tech")
        assert set(results) == {m.id for m in catalog.METRICS}

    def test_values_from_ranges(self, service):
        results = service.fetch_benchmarks("tech")
        growth = results["revenue_growth"]
        assert growth.value == 0
        assert growth.average == 18
        assert growth.max_value == pytest.approx(48.0)
        assert growth.trend is Trend.STABLE
        assert growth.change_percent == 0.0

    def test_missing_range(self, service):
        gross = service.fetch_benchmarks("tech")["gross_margin"]
        assert gross.average == 50
        assert gross.max_value == pytest.approx(120.0)

    def test_metadata(self, service):
        meta = service.fetch_benchmarks("tech")["roi"].metadata
        assert meta.data_source == "Industry Association Data"
        assert meta.last_updated == TODAY.isoformat()
        assert 100 <= meta.sample_size <= 599
        assert meta.is_real_time is False
        assert meta.confidence_score == 85

    def test_settings_applied(self):
        service = BenchmarkService(
            BenchmarkSettings(data_source="Eurostat", confidence_score=70),
            rng=random.Random(1),
        )
        meta = service.fetch_benchmarks("tech")["roi"].metadata
        assert meta.data_source == "Eurostat"
        assert meta.confidence_score == 70

    def test_cached_per_query(self, service):
        first = service.fetch_benchmarks("tech")
        assert service.fetch_benchmarks("tech", year=TODAY.year) is first
        assert service.fetch_benchmarks("tech", quarter=2) is not first
        assert service.fetch_benchmarks("tech", "tech-ai") is not first

    def test_clear_cache(self, service):
        first = service.fetch_benchmarks("tech")
        service.clear_cache()
        assert service.fetch_benchmarks("tech") is not first

    def test_seed_is_reproducible(self):
        a = BenchmarkService(BenchmarkSettings(seed=3)).fetch_benchmarks("fs")
        b = BenchmarkService(BenchmarkSettings(seed=3)).fetch_benchmarks("fs")
        assert [r.metadata.sample_size for r in a.values()] == [
            r.metadata.sample_size for r in b.values()
        ]


# ---------------------------------------------------------------------------
# compare_to_company
# ---------------------------------------------------------------------------


class TestCompareToCompany:
    def test_above_average(self, service):
        results = service.compare_to_company("tech", {"revenue_growth": 25})
        growth = results["revenue_growth"]
        assert growth.value == 25
        assert growth.trend is Trend.UP
        assert growth.change_percent == 38.9

    def test_below_average(self, service):
        results = service.compare_to_company("tech", {"profit_margin": 10})
        assert results["profit_margin"].trend is Trend.DOWN
        assert results["profit_margin"].change_percent == -50.0

    def test_within_band(self, service):
        results = service.compare_to_company("tech", {"revenue_growth": 18.5})
        assert results["revenue_growth"].trend is Trend.STABLE

    def test_unsupplied_metrics_untouched(self, service):
        results = service.compare_to_company("tech", {"revenue_growth": 25})
        assert results["roi"].value == 0
        assert results["roi"].trend is Trend.STABLE

    def test_unknown_metric_ignored(self, service):
        results = service.compare_to_company("tech", {"not_a_metric": 1})
        assert "not_a_metric" not in results

    def test_cached_snapshot_not_mutated(self, service):
        cached = service.fetch_benchmarks("tech")
        results = service.compare_to_company("tech", {"revenue_growth": 25})

        assert cached["revenue_growth"].value == 0
        assert cached["revenue_growth"].trend is Trend.STABLE
        assert results["roi"] is not cached["roi"]
        assert results["roi"].metadata is not cached["roi"].metadata


# ---------------------------------------------------------------------------
# metric_trend_data
# ---------------------------------------------------------------------------


class TestTrendData:
    def test_years_end_at_current_year(self, service):
        points = service.metric_trend_data("tech", "revenue_growth")
        assert [p.date for p in points] == ["2021", "2022", "2023", "2024", "2025"]

    def test_values_near_base(self, service):
        points = service.metric_trend_data("tech", "revenue_growth", years=3)
        for i, point in enumerate(points):
            drift = 18 * 0.005 * i
            assert 18 * 0.95 + drift <= point.value <= 18 * 1.05 + drift

    def test_unknown_metric_uses_fifty(self, service):
        points = service.metric_trend_data("tech", "not_a_metric", years=1)
        assert 47.5 <= points[0].value <= 52.5
