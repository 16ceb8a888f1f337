# Personality type code <-> slider conversion

from .models import PersonalityAxes, AXIS_ORDER, AXIS_POLES
from .codec import code_from_axes, axes_from_typed_code, sanitize_code, clamp_axis, clamp_axes

__all__ = [
    "PersonalityAxes",
    "AXIS_ORDER",
    "AXIS_POLES",
    "code_from_axes",
    "axes_from_typed_code",
    "sanitize_code",
    "clamp_axis",
    "clamp_axes",
]
