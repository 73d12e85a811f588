from __future__ import annotations

import pytest

from resonance.analytics.store import clear_events


@pytest.fixture(autouse=True)
def _fresh_events():
    clear_events()
    yield
    clear_events()
