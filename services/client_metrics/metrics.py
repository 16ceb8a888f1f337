# services/client_metrics/metrics.py
# Attachment-style placement and ability radar points for a client profile.

from pydantic import BaseModel, Field
from typing import List, Optional, Tuple

ABILITY_FULL_MARK = 10
# Radar charts cannot draw a zero-length spoke
ABILITY_FLOOR = 0.1

ABILITY_SUBJECTS = [
    ("intuition", "Intuition"),
    ("empathy", "Empathy"),
    ("ambition", "Ambition"),
    ("intellect", "Intellect"),
    ("creativity", "Creativity"),
    ("self_awareness", "Self Awareness"),
]


class AttachmentScores(BaseModel):
    anxiety: float = Field(0, ge=-5, le=5, description="-5 (low) to 5 (high) attachment anxiety")
    avoidance: float = Field(0, ge=-5, le=5, description="-5 (low) to 5 (high) attachment avoidance")


class AbilityScores(BaseModel):
    intuition: Optional[float] = Field(default=None, ge=0, le=10)
    empathy: Optional[float] = Field(default=None, ge=0, le=10)
    ambition: Optional[float] = Field(default=None, ge=0, le=10)
    intellect: Optional[float] = Field(default=None, ge=0, le=10)
    creativity: Optional[float] = Field(default=None, ge=0, le=10)
    self_awareness: Optional[float] = Field(default=None, ge=0, le=10)


class RadarPoint(BaseModel):
    subject: str
    value: float
    full_mark: int = ABILITY_FULL_MARK


def attachment_matrix_position(scores: AttachmentScores) -> Tuple[float, float]:
    """
    Percent offsets (top, left) of the client's marker on the attachment matrix.
    High anxiety sits at the top, high avoidance at the right.
    """
    top = 100 - ((scores.anxiety + 5) * 10)
    left = (scores.avoidance + 5) * 10
    return top, left


def attachment_quadrant(scores: AttachmentScores) -> str:
    """
    Names the matrix quadrant the scores fall into. A score of exactly 0 sits on
    the low side of its axis, so the neutral default reads as secure.
    """
    anxious = scores.anxiety > 0
    avoidant = scores.avoidance > 0
    if anxious and avoidant:
        return "fearful"
    if anxious:
        return "anxious"
    if avoidant:
        return "avoidant"
    return "secure"


def ability_radar(scores: AbilityScores) -> List[RadarPoint]:
    """Six radar spokes in display order. Unset abilities count as 0 and every spoke is at least 0.1."""
    return [
        RadarPoint(subject=label, value=max(ABILITY_FLOOR, getattr(scores, field) or 0))
        for field, label in ABILITY_SUBJECTS
    ]
