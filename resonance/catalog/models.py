from __future__ import annotations

import json
import logging
import math
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

Hz = Union[int, float]
CandidateKey = tuple[Hz, Hz]


class Candidate(BaseModel):
    """One catalog entry: a frequency band, its audio asset and therapeutic tags."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    file_url: str | None = None
    frequency_range_min: Hz
    frequency_range_max: Hz
    primary_intentions: list[str] = Field(default_factory=list)
    healing_properties: list[str] = Field(default_factory=list)
    harmonic_connections: list[Hz] = Field(default_factory=list)
    family: str | None = None

    @property
    def key(self) -> CandidateKey:
        return (self.frequency_range_min, self.frequency_range_max)

    @property
    def frequency(self) -> Hz:
        """Representative frequency returned to callers."""
        return self.frequency_range_min

    def contains(self, hz: Hz) -> bool:
        return self.frequency_range_min <= hz <= self.frequency_range_max


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _as_list(value: Any) -> list[Any]:
    """Accept a list, a JSON array string, or a comma separated string."""
    if _is_missing(value):
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    if isinstance(value, str):
        raw = value.strip()
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return parsed
            raw = raw.strip("[]")
        return [part.strip().strip('"') for part in raw.split(",")]
    return [value]


def _as_str_list(value: Any) -> list[str]:
    return [str(v).strip() for v in _as_list(value) if not _is_missing(v) and str(v).strip()]


def _as_number(value: Any) -> Hz | None:
    if _is_missing(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number) if number.is_integer() else number


def _as_hz_list(value: Any) -> list[Hz]:
    numbers = (_as_number(v) for v in _as_list(value))
    return [n for n in numbers if n is not None]


def _first_present(row: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in row and not _is_missing(row[key]):
            return row[key]
    return None


def candidate_from_row(row: dict[str, Any]) -> Candidate | None:
    """
    Build a ``Candidate`` from a raw store row.

    Column names follow the ``audio_files`` table, with the older
    ``frequency_range_*`` spelling accepted as well. A row without a usable
    frequency range cannot be keyed and is dropped (``None``). Missing or
    malformed tag columns become empty lists.
    """
    low = _as_number(_first_present(row, ("frequency_min", "frequency_range_min")))
    high = _as_number(_first_present(row, ("frequency_max", "frequency_range_max")))
    name = str(_first_present(row, ("file_name", "name")) or "").strip()

    if low is None and high is None:
        logger.warning("Dropping catalog row %r: no frequency range", name or row)
        return None
    if low is None:
        low = high
    if high is None:
        high = low
    if low > high:
        logger.warning("Dropping catalog row %r: frequency_min %s > frequency_max %s", name, low, high)
        return None

    family = _first_present(row, ("frequency_family", "family"))
    file_url = _first_present(row, ("file_url",))

    return Candidate(
        name=name,
        file_url=str(file_url) if file_url is not None else None,
        frequency_range_min=low,
        frequency_range_max=high,
        primary_intentions=_as_str_list(row.get("primary_intentions")),
        healing_properties=_as_str_list(row.get("healing_properties")),
        harmonic_connections=_as_hz_list(row.get("harmonic_connections")),
        family=str(family).strip() if family is not None else None,
    )
