"""
Offline script to rebuild the catalog CSV from a store export.

Usage:
    python -m resonance.catalog.ingest
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

import pandas as pd

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .models import candidate_from_row

CANONICAL_COLUMNS: List[str] = [
    "file_name",
    "file_url",
    "frequency_min",
    "frequency_max",
    "frequency_family",
    "primary_intentions",
    "healing_properties",
    "harmonic_connections",
]


def _canonical_row(raw: dict[str, Any]) -> dict[str, Any] | None:
    candidate = candidate_from_row(raw)
    if candidate is None:
        return None
    return {
        "file_name": candidate.name,
        "file_url": candidate.file_url or "",
        "frequency_min": candidate.frequency_range_min,
        "frequency_max": candidate.frequency_range_max,
        "frequency_family": candidate.family or "",
        "primary_intentions": json.dumps(candidate.primary_intentions),
        "healing_properties": json.dumps(candidate.healing_properties),
        "harmonic_connections": json.dumps(candidate.harmonic_connections),
    }


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Convert the raw export into the canonical catalog CSV.

    Steps:
    - Read the JSON array exported from the ``audio_files`` table.
    - Normalize each row through the same parser the providers use.
    - Store list columns as JSON arrays so commas inside values survive.
    - Persist rows sorted by ``frequency_min`` for the CSV provider.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    raw_rows = json.loads(config.raw_export_path.read_text(encoding="utf-8"))
    if not isinstance(raw_rows, list):
        raise ValueError(f"{config.raw_export_path} must contain a JSON array of rows")

    rows = [r for r in (_canonical_row(raw) for raw in raw_rows if isinstance(raw, dict)) if r]
    df = pd.DataFrame(rows, columns=CANONICAL_COLUMNS)
    df = df.sort_values("frequency_min", kind="stable")

    output_path = config.processed_path
    df.to_csv(output_path, index=False)
    return output_path


if __name__ == "__main__":
    path = run_ingestion()
    print(f"Ingestion complete. Catalog saved to: {path}")
