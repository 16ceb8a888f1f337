from pydantic import BaseModel, Field
from typing import Optional

# Pole pairs in axis order. The first letter is the pole at 0, the second at 100,
# except judging/perceiving where 0 is "P" and 100 is "J".
AXIS_ORDER = [
    "introversion_extraversion",
    "sensing_intuition",
    "thinking_feeling",
    "judging_perceiving",
]

AXIS_POLES = {
    "introversion_extraversion": ("I", "E"),
    "sensing_intuition": ("S", "N"),
    "thinking_feeling": ("T", "F"),
    "judging_perceiving": ("P", "J"),
}

CODE_ALPHABET = frozenset("INFJESTP")

AXIS_MIDPOINT = 50.0


class PersonalityAxes(BaseModel):
    """
    Four bipolar personality sliders, each nominally on a 0-100 scale.
    None means the slider was never set and is not the same as 0.
    Ranges are not enforced here; request schemas validate them.
    """
    introversion_extraversion: Optional[float] = Field(default=None, description="0 = I, 100 = E")
    sensing_intuition: Optional[float] = Field(default=None, description="0 = S, 100 = N")
    thinking_feeling: Optional[float] = Field(default=None, description="0 = T, 100 = F")
    judging_perceiving: Optional[float] = Field(default=None, description="0 = P, 100 = J")
