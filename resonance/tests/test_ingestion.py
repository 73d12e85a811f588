import asyncio
import json
from pathlib import Path

import pandas as pd

from resonance.catalog.config import IngestionConfig
from resonance.catalog.ingest import CANONICAL_COLUMNS, run_ingestion
from resonance.catalog.providers import CsvCatalogProvider


def test_run_ingestion_writes_canonical_catalog(tmp_path: Path):
    """
    Export -> CSV -> provider, using a temporary directory so the bundled
    catalog is left alone.
    """
    export = tmp_path / "audio_files.json"
    export.write_text(json.dumps([
        {
            "id": "b",
            "file_name": "Miracle Tone - 528Hz.mp3",
            "frequency_min": 528,
            "frequency_max": 528,
            "primary_intentions": ["emotional", "energy"],
            "healing_properties": ["love", "calm, restful sleep"],
            "harmonic_connections": [417, 639],
            "frequency_family": "Solfeggio",
        },
        {"id": "c", "file_name": "no range.mp3"},
        {
            "id": "a",
            "file_name": "Grounding - 174Hz.mp3",
            "frequency_min": 174,
            "frequency_max": 174,
            "primary_intentions": ["pain"],
        },
    ]))
    cfg = IngestionConfig(raw_export_path=export, processed_data_dir=tmp_path / "catalog")

    output_path = run_ingestion(config=cfg)

    assert output_path.is_file(), "Catalog CSV should be created"
    df = pd.read_csv(output_path)
    assert list(df.columns) == CANONICAL_COLUMNS
    assert df["frequency_min"].tolist() == [174, 528]

    candidates = asyncio.run(CsvCatalogProvider(output_path).fetch_candidates())
    assert candidates[1].primary_intentions == ["emotional", "energy"]
    assert candidates[1].healing_properties == ["love", "calm, restful sleep"]
    assert candidates[1].harmonic_connections == [417, 639]
    assert candidates[0].family is None
