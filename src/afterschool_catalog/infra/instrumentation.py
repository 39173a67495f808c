"""
Timing of search + filter evaluation.

Observability only: never alters the result, and a failure to log never
fails the request.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from afterschool_catalog.infra.config import DEFAULT_LATENCY_BUDGET_MS

logger = logging.getLogger(__name__)


@dataclass
class FilterMeasurement:
    """Filled in by the timed block (result_count) and by the timer (the rest)."""

    result_count: int | None = None
    duration_ms: float = 0.0
    exceeded_budget: bool = False


@contextmanager
def filter_timer(
    operation: str,
    search_text: str,
    session_id: str | None = None,
    budget_ms: int = DEFAULT_LATENCY_BUDGET_MS,
    clock: Callable[[], float] = time.perf_counter,
) -> Iterator[FilterMeasurement]:
    """
    Time the enclosed search + filter evaluation.

    Usage:
        with filter_timer("load_initial", state.search_text, session_id) as measurement:
            records = evaluate(...)
            measurement.result_count = len(records)

    On completion logs one info entry; logs an extra warning naming the
    target when the elapsed time exceeds budget_ms.
    """
    measurement = FilterMeasurement()
    started = clock()

    yield measurement

    measurement.duration_ms = (clock() - started) * 1000
    measurement.exceeded_budget = measurement.duration_ms > budget_ms
    _emit(operation, search_text, session_id, budget_ms, measurement)


def _emit(
    operation: str,
    search_text: str,
    session_id: str | None,
    budget_ms: int,
    measurement: FilterMeasurement,
) -> None:
    context: dict[str, Any] = {
        "operation": operation,
        "search_text": search_text,
        "result_count": measurement.result_count,
        "duration_ms": round(measurement.duration_ms, 3),
        "session_id": session_id,
    }

    try:
        logger.info("Filter operation completed", extra=context)

        if measurement.exceeded_budget:
            logger.warning(
                "Filter operation exceeded performance target",
                extra={**context, "target_ms": budget_ms},
            )
    except Exception:  # noqa: BLE001
        return
