from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class AnalyticsConfig:
    # Oldest recommendation events are dropped once the log holds this many.
    max_events: int = int(os.getenv("RESONANCE_ANALYTICS_MAX_EVENTS", "10000"))


DEFAULT_ANALYTICS_CONFIG = AnalyticsConfig()
