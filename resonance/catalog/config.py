from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_SEED_CSV = Path(__file__).resolve().parent.parent / "data" / "catalog" / "audio_files.csv"


@dataclass(frozen=True)
class CatalogConfig:
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_ANON_KEY", "")
    table: str = "audio_files"
    timeout: float = 8.0
    csv_path: Path = Path(os.getenv("RESONANCE_CATALOG_CSV", str(_SEED_CSV)))
    excluded_name_markers: tuple[str, ...] = ("sessionend", "session_end")

    @property
    def remote_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


DEFAULT_CATALOG_CONFIG = CatalogConfig()


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for converting a raw ``audio_files`` export into the catalog CSV.
    """

    raw_export_path: Path = Path("resonance/data/raw/audio_files.json")
    processed_data_dir: Path = Path("resonance/data/catalog")
    processed_filename: str = "audio_files.csv"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
