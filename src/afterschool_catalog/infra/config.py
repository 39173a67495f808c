from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DEFAULT_LATENCY_BUDGET_MS = 150
DEFAULT_CURRENCY_SYMBOL = "€"

CATALOG_BACKEND_POSTGRES = "postgres"
CATALOG_BACKEND_MEMORY = "memory"


@dataclass(frozen=True, slots=True)
class DiscoverySettings:
    page_size: int = DEFAULT_PAGE_SIZE
    latency_budget_ms: int = DEFAULT_LATENCY_BUDGET_MS
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    catalog_backend: str = CATALOG_BACKEND_POSTGRES
    log_level: str = "INFO"


def clamp_page_size(value: int) -> int:
    """Keep page size within 1..MAX_PAGE_SIZE."""
    return max(1, min(value, MAX_PAGE_SIZE))


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_settings() -> DiscoverySettings:
    """Read discovery settings from the environment (invalid values fall back to defaults)."""
    backend = os.getenv("CATALOG_BACKEND", CATALOG_BACKEND_POSTGRES).strip().lower()
    if backend not in (CATALOG_BACKEND_POSTGRES, CATALOG_BACKEND_MEMORY):
        backend = CATALOG_BACKEND_POSTGRES

    latency_budget_ms = _int_env("DISCOVERY_LATENCY_BUDGET_MS", DEFAULT_LATENCY_BUDGET_MS)
    if latency_budget_ms <= 0:
        latency_budget_ms = DEFAULT_LATENCY_BUDGET_MS

    return DiscoverySettings(
        page_size=clamp_page_size(_int_env("DISCOVERY_PAGE_SIZE", DEFAULT_PAGE_SIZE)),
        latency_budget_ms=latency_budget_ms,
        currency_symbol=os.getenv("CURRENCY_SYMBOL") or DEFAULT_CURRENCY_SYMBOL,
        catalog_backend=backend,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
