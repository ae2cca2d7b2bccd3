"""Lambda handler for industry benchmarks — triggered by API Gateway.

Without ``metrics`` the handler returns the industry benchmarks; with a
``metrics`` object it returns the company comparison.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from manda.benchmarks.service import BenchmarkService
from manda.config import load_settings

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))

# Initialize outside handler for Lambda warm-start reuse
_service: BenchmarkService | None = None


def _get_service() -> BenchmarkService:
    global _service
    if _service is None:
        _service = BenchmarkService(load_settings().benchmarks)
    return _service


def _response(status: int, payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request — fetch or compare, return camelCase JSON."""
    try:
        body = json.loads(event.get("body") or "{}")
    except (json.JSONDecodeError, TypeError):
        body = {}

    industry = body.get("industry", "")
    if not industry:
        return _response(400, {"error": "Missing 'industry' field"})

    subcategory = body.get("subcategory")
    metrics = body.get("metrics")
    service = _get_service()

    if metrics:
        if not isinstance(metrics, dict):
            return _response(400, {"error": "'metrics' must map metric ids to numbers"})
        try:
            company = {k: float(v) for k, v in metrics.items()}
        except (TypeError, ValueError):
            return _response(400, {"error": "'metrics' must map metric ids to numbers"})
        results = service.compare_to_company(industry, company, subcategory)
    else:
        results = service.fetch_benchmarks(
            industry, subcategory, body.get("year"), body.get("quarter")
        )

    logger.info("Served %d benchmarks for %s", len(results), industry)
    return _response(
        200,
        {
            "industry": industry,
            "subcategory": subcategory,
            "benchmarks": {k: r.to_wire() for k, r in results.items()},
        },
    )
