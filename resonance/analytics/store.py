"""
In-process log of recommendation events feeding ``/analytics``.

The log is a ring buffer: it keeps the most recent
``AnalyticsConfig.max_events`` entries and is lost on restart.
"""
from __future__ import annotations

import time
from collections import deque
from typing import Any

from .config import DEFAULT_ANALYTICS_CONFIG, AnalyticsConfig

_events: deque[dict[str, Any]] = deque(maxlen=DEFAULT_ANALYTICS_CONFIG.max_events)


def configure(config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG) -> None:
    """Resize the log, keeping the newest events that still fit."""
    global _events
    _events = deque(_events, maxlen=config.max_events)


def record_event(event_type: str, data: dict[str, Any]) -> None:
    _events.append({
        "type": event_type,
        "timestamp": time.time(),
        **data,
    })


def get_events() -> list[dict[str, Any]]:
    """Snapshot of the retained events, oldest first."""
    return list(_events)


def clear_events() -> None:
    _events.clear()
