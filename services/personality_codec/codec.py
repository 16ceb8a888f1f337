# services/personality_codec/codec.py
# Keeps a four-letter type code and the four personality sliders in step.

import logging
import math
from typing import Dict, Optional, Tuple

from .models import AXIS_MIDPOINT, AXIS_ORDER, AXIS_POLES, CODE_ALPHABET, PersonalityAxes

logger = logging.getLogger(__name__)

# Value a slider collapses to when its letter is typed directly.
# position -> (letter that sets the listed value, value for that letter, value otherwise)
TYPED_LETTER_VALUES = {
    0: ("I", 0.0, 100.0),
    1: ("N", 100.0, 0.0),
    2: ("F", 100.0, 0.0),
    3: ("P", 0.0, 100.0),
}


def _axis_letter(axis_name: str, value: Optional[float]) -> str:
    low_pole, high_pole = AXIS_POLES[axis_name]
    if value is None:
        value = AXIS_MIDPOINT
    # Strictly greater: the midpoint belongs to the low pole.
    return high_pole if value > AXIS_MIDPOINT else low_pole


def code_from_axes(axes: PersonalityAxes) -> str:
    """
    Derives the four-letter type code from the sliders.

    Each axis resolves to its high pole only when strictly above 50, so
    {50, 50, 50, 50} gives "ISTP". Unset sliders read as the midpoint.
    """
    return "".join(_axis_letter(name, getattr(axes, name)) for name in AXIS_ORDER)


def sanitize_code(raw: str) -> str:
    """Uppercases and drops anything outside I/N/F/J/E/S/T/P. No length or grammar check."""
    if not raw:
        return ""
    return "".join(ch for ch in raw.upper() if ch in CODE_ALPHABET)


def axes_from_typed_code(
    raw: str,
    axes: Optional[PersonalityAxes] = None,
) -> Tuple[str, PersonalityAxes]:
    """
    Applies a user-typed code to the sliders.

    Returns the sanitized code and a new PersonalityAxes. Every position present
    in the sanitized code snaps its slider to 0 or 100; sliders past the end of
    the code keep their previous value. The given axes are not modified.
    """
    code = sanitize_code(raw)
    base = axes if axes is not None else PersonalityAxes()

    updates: Dict[str, float] = {}
    for position, letter in enumerate(code[:len(AXIS_ORDER)]):
        match_letter, match_value, other_value = TYPED_LETTER_VALUES[position]
        updates[AXIS_ORDER[position]] = match_value if letter == match_letter else other_value

    logger.debug(f"Typed code {raw!r} sanitized to {code!r}, updating axes {sorted(updates)}")
    return code, base.model_copy(update=updates)


def clamp_axis(value: Optional[float]) -> Optional[float]:
    """Clamps a slider value into [0, 100] for display. NaN is treated as unset."""
    if value is None or math.isnan(value):
        return None
    return min(100.0, max(0.0, value))


def clamp_axes(axes: PersonalityAxes) -> PersonalityAxes:
    return axes.model_copy(update={name: clamp_axis(getattr(axes, name)) for name in AXIS_ORDER})
