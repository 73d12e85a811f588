from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..catalog.models import Candidate, Hz
from ..intake.contraindications import ContraindicationOut

ENERGY_AXES = ("physical", "emotional", "mental", "spiritual")


def _listify(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


class IntakeSignal(BaseModel):
    """
    Normalized intake questionnaire.

    Every field is optional. The intake form has used several field names over
    time, so the old spellings are accepted as aliases and normalized here;
    nothing downstream checks whether a field was submitted.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    intentions: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("intentions", "primaryGoals", "primary_goals", "intention"),
    )
    selected_frequencies: list[Hz] = Field(
        default_factory=list,
        max_length=3,
        validation_alias=AliasChoices("selected_frequencies", "selectedFrequencies"),
    )
    emotional_indicators: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("emotional_indicators", "emotionalIndicators"),
    )
    physical_energy: int | None = Field(
        default=None, ge=1, le=10,
        validation_alias=AliasChoices("physical_energy", "physicalEnergy"),
    )
    emotional_balance: int | None = Field(
        default=None, ge=1, le=10,
        validation_alias=AliasChoices("emotional_balance", "emotionalBalance"),
    )
    mental_clarity: int | None = Field(
        default=None, ge=1, le=10,
        validation_alias=AliasChoices("mental_clarity", "mentalClarity"),
    )
    spiritual_connection: int | None = Field(
        default=None, ge=1, le=10,
        validation_alias=AliasChoices("spiritual_connection", "spiritualConnection"),
    )
    health_concerns: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("health_concerns", "healthConcerns"),
    )
    vibration_intensity: Literal["gentle", "moderate", "deep"] | None = Field(
        default=None,
        validation_alias=AliasChoices("vibration_intensity", "vibrationIntensity"),
    )

    @field_validator("intentions", "emotional_indicators", "health_concerns", mode="before")
    @classmethod
    def _clean_strings(cls, value: Any) -> list[str]:
        items = (str(v).strip() for v in _listify(value) if v is not None)
        return [item for item in items if item]

    @field_validator("health_concerns")
    @classmethod
    def _drop_none_sentinel(cls, value: list[str]) -> list[str]:
        return [concern for concern in value if concern.lower() != "none"]

    @field_validator("selected_frequencies", mode="before")
    @classmethod
    def _clean_frequencies(cls, value: Any) -> list[Any]:
        return [v for v in _listify(value) if v not in (None, "")]

    @field_validator(
        "physical_energy", "emotional_balance", "mental_clarity", "spiritual_connection",
        "vibration_intensity",
        mode="before",
    )
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @property
    def energy_levels(self) -> dict[str, int | None]:
        return {
            "physical": self.physical_energy,
            "emotional": self.emotional_balance,
            "mental": self.mental_clarity,
            "spiritual": self.spiritual_connection,
        }


class RuleHit(BaseModel):
    """One scoring rule that fired for a candidate."""

    rule: str
    weight: int
    detail: str


@dataclass
class ScoreEntry:
    candidate: Candidate
    score: int = 0
    hits: list[RuleHit] = field(default_factory=list)

    def add(self, rule: str, weight: int, detail: str) -> None:
        self.score += weight
        self.hits.append(RuleHit(rule=rule, weight=weight, detail=detail))


class RecommendationStrategy(str, Enum):
    scored = "scored"
    default_frequency = "default_frequency"
    first_available = "first_available"
    last_resort = "last_resort"


class RecommendationResult(BaseModel):
    frequency: Hz
    source_candidate: Candidate | None = None
    strategy: RecommendationStrategy
    score: int = 0
    tie_count: int = 0
    matched_rules: list[RuleHit] = Field(default_factory=list)


class DisplayMetadata(BaseModel):
    hz: Hz
    name: str
    related_frequencies: list[Hz] = Field(default_factory=list)
    primary_intentions: list[str] = Field(default_factory=list)
    healing_properties: list[str] = Field(default_factory=list)
    family: str = "Unknown"


class ReferenceFrequency(BaseModel):
    hz: int
    name: str
    description: str
    benefits: list[str]
    chakra: str
    color: str
    solfeggio: bool


class RecommendationResponse(BaseModel):
    frequency: Hz
    strategy: RecommendationStrategy
    score: int
    tie_count: int
    source_candidate: Candidate | None = None
    metadata: DisplayMetadata
    explanation: str
    contraindications: list[ContraindicationOut] = Field(default_factory=list)


class AssetResponse(BaseModel):
    hz: Hz
    available: bool
    asset: Candidate | None = None
