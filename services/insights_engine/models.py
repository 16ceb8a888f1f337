from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional, Tuple

Timing = Literal["immediate", "short-term", "medium-term", "long-term"]


class WireModel(BaseModel):
    """Base for oracle payload models: camelCase on the wire, snake_case in Python, immutable."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Sentiment(WireModel):
    overall: float = Field(..., ge=-1, le=1)
    emotional: float = Field(..., ge=-1, le=1)
    practical: float = Field(..., ge=-1, le=1)


class Scales(WireModel):
    clarity: float = Field(..., ge=0, le=10)
    agency: float = Field(..., ge=0, le=10)
    timing: Timing
    difficulty: float = Field(..., ge=0, le=10)
    opportunity: float = Field(..., ge=0, le=10)


class EnergyBalance(WireModel):
    # active/receptive is its own pair; the four areas are independent of it
    active: float = Field(..., ge=0, le=100)
    receptive: float = Field(..., ge=0, le=100)
    mental: float = Field(..., ge=0, le=100)
    emotional: float = Field(..., ge=0, le=100)
    spiritual: float = Field(..., ge=0, le=100)
    material: float = Field(..., ge=0, le=100)


class DominantElements(WireModel):
    fire: float = Field(..., ge=0, le=100)
    water: float = Field(..., ge=0, le=100)
    air: float = Field(..., ge=0, le=100)
    earth: float = Field(..., ge=0, le=100)


class ArchetypeIntensity(WireModel):
    archetype: str
    intensity: float = Field(..., ge=0, le=10)


class TransformationPotential(WireModel):
    current: Literal["stuck", "transitioning", "flowing", "blocked"]
    potential: Literal["breakthrough", "gradual-shift", "maintenance", "regression"]
    likelihood: float


class CardSynergy(WireModel):
    cards: Tuple[str, ...]
    interpretation: str
    intensity: float


class WarningSignal(WireModel):
    signal: str
    severity: float = Field(..., ge=0, le=10)


class InsightsRecord(WireModel):
    """
    Structured reading insights as returned by the card-interpretation function.
    Field names follow the function's JSON response one for one.
    """
    sentiment: Sentiment
    scales: Scales
    energy_balance: EnergyBalance
    key_themes: Tuple[str, ...]
    dominant_elements: DominantElements
    archetype_intensity: Tuple[ArchetypeIntensity, ...]
    potential_narrative: str
    questions_to_ask: Tuple[str, ...]
    transformation_potential: TransformationPotential
    card_synergies: Optional[Tuple[CardSynergy, ...]] = None
    action_points: Optional[Tuple[str, ...]] = None
    warning_signals: Optional[Tuple[WarningSignal, ...]] = None


# --- Derived values ---

Level = Literal["high", "normal", "low"]
Polarity = Literal["favorable", "unfavorable", "neutral"]
SeverityBucket = Literal["high", "medium", "low"]


class DominantEntry(BaseModel):
    key: str
    value: float
    flagged: bool = Field(..., description="Crown/star marker: dominant and at or above the saturation bar")
    marker: Optional[str] = None


class ScaleHighlight(BaseModel):
    scale: str
    value: float
    label: str
    level: Level
    polarity: Polarity
    glyph: Optional[str] = None


class SentimentHighlight(BaseModel):
    name: str
    value: float
    percent: int
    notable: bool
    tone: str
    label: str


class ArchetypeHighlight(BaseModel):
    archetype: str
    intensity: float
    highlighted: bool


class WarningHighlight(BaseModel):
    signal: str
    severity: float
    bucket: SeverityBucket


class EnergyHighlight(BaseModel):
    active: float
    receptive: float
    skewed: bool
    high_active: bool
    high_receptive: bool
    active_marker: Optional[str] = None
    receptive_marker: Optional[str] = None
    profile: str
    dominant_area: DominantEntry


class InsightsSummary(BaseModel):
    sentiment: List[SentimentHighlight]
    scales: List[ScaleHighlight]
    timing: str
    timing_immediate: bool
    energy: EnergyHighlight
    dominant_element: DominantEntry
    top_archetypes: List[ArchetypeHighlight]
    warnings: List[WarningHighlight]
    action_points: List[str]
    soap_note_items: List[str]
