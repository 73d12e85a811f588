from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Iterable, Protocol

import httpx
import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Candidate, candidate_from_row

logger = logging.getLogger(__name__)


class CatalogProvider(Protocol):
    async def fetch_candidates(self) -> list[Candidate]:
        """Return the current catalog; ``[]`` when the backend is unavailable."""
        ...


def _is_excluded(name: str, markers: Iterable[str]) -> bool:
    lower = name.lower()
    return any(marker in lower for marker in markers)


def prepare_candidates(
    rows: Iterable[dict[str, Any] | Candidate],
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[Candidate]:
    """Parse rows, drop non-healing cues and duplicate keys, keep store order."""
    candidates: list[Candidate] = []
    seen: set[tuple] = set()
    for row in rows:
        candidate = row if isinstance(row, Candidate) else candidate_from_row(row)
        if candidate is None:
            continue
        if _is_excluded(candidate.name, config.excluded_name_markers):
            continue
        if candidate.key in seen:
            logger.warning(
                "Dropping catalog row %r: duplicate range %s-%s",
                candidate.name, *candidate.key,
            )
            continue
        seen.add(candidate.key)
        candidates.append(candidate)
    return candidates


class InMemoryCatalogProvider:
    """Fixed catalog held in memory; used by tests and local tooling."""

    def __init__(
        self,
        rows: Iterable[dict[str, Any] | Candidate] = (),
        config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
    ) -> None:
        self._candidates = prepare_candidates(list(rows), config)

    async def fetch_candidates(self) -> list[Candidate]:
        return list(self._candidates)


class CsvCatalogProvider:
    """Catalog backed by the canonical CSV written by ``catalog.ingest``."""

    def __init__(self, path: Path | None = None, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> None:
        self._path = Path(path) if path is not None else config.csv_path
        self._config = config

    def _read(self) -> list[Candidate]:
        try:
            df = pd.read_csv(self._path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError):
            logger.warning("Could not read catalog CSV %s", self._path, exc_info=True)
            return []

        if "frequency_min" in df.columns:
            df = df.sort_values("frequency_min", kind="stable")

        # NaN -> None so missing cells read as absent
        df = df.astype(object).where(pd.notna(df), None)
        return prepare_candidates(df.to_dict(orient="records"), self._config)

    async def fetch_candidates(self) -> list[Candidate]:
        return await asyncio.to_thread(self._read)


class SupabaseCatalogProvider:
    """Catalog read from the hosted store's REST endpoint, ordered by ``frequency_min``."""

    def __init__(
        self,
        config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    async def fetch_candidates(self) -> list[Candidate]:
        config = self._config
        url = f"{config.supabase_url.rstrip('/')}/rest/v1/{config.table}"
        params = {"select": "*", "order": "frequency_min.asc"}
        headers = {
            "apikey": config.supabase_key,
            "Authorization": f"Bearer {config.supabase_key}",
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=config.timeout, transport=self._transport) as client:
                resp = await client.get(url, params=params, headers=headers)
            if resp.status_code >= 400:
                logger.warning(
                    "Catalog query failed with status %s: %s",
                    resp.status_code, resp.text[:200],
                )
                return []
            rows = resp.json()
        except (httpx.HTTPError, ValueError):
            logger.warning("Catalog query failed, treating catalog as empty", exc_info=True)
            return []

        if not isinstance(rows, list):
            logger.warning("Catalog query returned %s instead of a list", type(rows).__name__)
            return []

        candidates = prepare_candidates(
            [row for row in rows if isinstance(row, dict)], config,
        )
        logger.info("Fetched %d catalog candidates", len(candidates))
        return candidates


def build_catalog_provider(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> CatalogProvider:
    """Hosted store when credentials are configured, otherwise the CSV catalog."""
    if config.remote_enabled:
        return SupabaseCatalogProvider(config)
    return CsvCatalogProvider(config=config)
