# services/insights_engine/aggregator.py
# Derives presentation highlights from a reading's InsightsRecord.

import logging
import math
from typing import Dict, List, Sequence, Tuple

from .models import (
    ArchetypeHighlight,
    DominantEntry,
    EnergyHighlight,
    InsightsRecord,
    InsightsSummary,
    ScaleHighlight,
    SentimentHighlight,
    WarningHighlight,
)

logger = logging.getLogger(__name__)

# --- Thresholds ---

# scale -> (high if >=, low if <=)
SCALE_THRESHOLDS: Dict[str, Tuple[float, float]] = {
    'clarity': (8, 3),
    'agency': (8, 3),
    'difficulty': (8, 2),
    'opportunity': (8, 3),
}

# scale -> (glyph when high, glyph when low)
SCALE_GLYPHS: Dict[str, Tuple[str, str]] = {
    'clarity': ('✨', '⚠️'),
    'agency': ('💪', '⚠️'),
    'difficulty': ('🔥', '✅'),
    'opportunity': ('🚀', '💤'),
}

# Scales where a high reading is bad news
INVERTED_SCALES = frozenset({'difficulty'})

SCALE_ORDER = ['clarity', 'agency', 'difficulty', 'opportunity']
SENTIMENT_ORDER = ['overall', 'emotional', 'practical']
ENERGY_AREA_ORDER = ['mental', 'emotional', 'spiritual', 'material']
ELEMENT_ORDER = ['fire', 'water', 'air', 'earth']

DOMINANT_ENERGY_THRESHOLD = 40
DOMINANT_ELEMENT_THRESHOLD = 40
HIGH_ENERGY_THRESHOLD = 70
ENERGY_SKEW_THRESHOLD = 30
HIGH_ARCHETYPE_THRESHOLD = 8
HIGH_SENTIMENT_THRESHOLD = 0.5
LOW_SENTIMENT_THRESHOLD = -0.5
HIGH_SEVERITY_THRESHOLD = 7
MEDIUM_SEVERITY_THRESHOLD = 4

ACTIVE_GLYPH = '⚡'
RECEPTIVE_GLYPH = '🌙'
CROWN_GLYPH = '👑'
STAR_GLYPH = '★'

DEFAULT_TOP_ARCHETYPES = 3

# --- Labels ---

# (lower bound, label), checked top down
SENTIMENT_LABELS: List[Tuple[float, str]] = [
    (0.6, "Very Positive"),
    (0.2, "Positive"),
    (-0.2, "Neutral"),
    (-0.6, "Challenging"),
]
LOWEST_SENTIMENT_LABEL = "Very Challenging"

# scale -> labels from the bottom of the 0-10 range to the top
SCALE_LABELS: Dict[str, Tuple[str, ...]] = {
    'clarity': ("Very Confusing", "Confusing", "Unclear", "Somewhat Clear", "Clear", "Very Clear"),
    'agency': ("No Control", "Little Control", "Some Control", "Good Control", "Strong Control", "Full Control"),
    'difficulty': ("Very Easy", "Easy", "Manageable", "Moderate", "Challenging", "Very Difficult"),
    'opportunity': ("No Opportunity", "Limited", "Some Potential", "Good Potential", "High Potential", "Excellent"),
}

ENERGY_PROFILE_MARGIN = 20
ACTION_ORIENTED = "Action-Oriented"
RECEPTIVE = "Receptive"
BALANCED = "Balanced"


# --- Dominance ---

def _first_max(entries: Sequence[Tuple[str, float]], threshold: float, glyph: str) -> DominantEntry:
    """Left-fold max; an equal later value never replaces the current winner."""
    best_key, best_value = entries[0]
    for key, value in entries[1:]:
        if value > best_value:
            best_key, best_value = key, value
    flagged = best_value >= threshold
    return DominantEntry(key=best_key, value=best_value, flagged=flagged, marker=glyph if flagged else None)


def dominant_energy_area(record: InsightsRecord) -> DominantEntry:
    """
    Finds the strongest of the mental/emotional/spiritual/material energy areas.
    Ties go to the earlier area in that order. The entry is flagged ("crowned")
    only when it also reaches 40%.
    """
    balance = record.energy_balance
    return _first_max([(key, getattr(balance, key)) for key in ENERGY_AREA_ORDER], DOMINANT_ENERGY_THRESHOLD, CROWN_GLYPH)


def dominant_element(record: InsightsRecord) -> DominantEntry:
    """
    Finds the strongest of fire/water/air/earth with the same first-wins tie
    break. Flagged ("starred") only at 40% or more.
    """
    elements = record.dominant_elements
    return _first_max([(key, getattr(elements, key)) for key in ELEMENT_ORDER], DOMINANT_ELEMENT_THRESHOLD, STAR_GLYPH)


# --- Scales ---

def scale_highlight(scale_name: str, value: float) -> ScaleHighlight:
    """
    Classifies a 0-10 scale reading against that scale's own thresholds.

    High is checked before low. Difficulty reads the other way round from the
    rest: a high difficulty is unfavorable and a low one favorable.

    Raises:
        KeyError: scale_name is not one of clarity, agency, difficulty, opportunity.
    """
    high_at, low_at = SCALE_THRESHOLDS[scale_name]
    high_glyph, low_glyph = SCALE_GLYPHS[scale_name]
    inverted = scale_name in INVERTED_SCALES
    label = scale_label(scale_name, value)

    if value >= high_at:
        return ScaleHighlight(
            scale=scale_name, value=value, label=label, level='high',
            polarity='unfavorable' if inverted else 'favorable', glyph=high_glyph,
        )
    if value <= low_at:
        return ScaleHighlight(
            scale=scale_name, value=value, label=label, level='low',
            polarity='favorable' if inverted else 'unfavorable', glyph=low_glyph,
        )
    return ScaleHighlight(scale=scale_name, value=value, label=label, level='normal', polarity='neutral')


def scale_label(scale_name: str, value: float) -> str:
    """
    Plain-language reading of a 0-10 scale. The range is split into six equal
    bands; a full 10 stays in the top band.

    Raises:
        KeyError: scale_name is not one of clarity, agency, difficulty, opportunity.
    """
    labels = SCALE_LABELS[scale_name]
    index = min(int(math.floor(value / 10 * len(labels))), len(labels) - 1)
    return labels[max(index, 0)]


def timing_label(timing: str) -> str:
    return timing.replace('-', ' ', 1)


# --- Sentiment ---

def sentiment_highlight(value: float) -> bool:
    return abs(value) > HIGH_SENTIMENT_THRESHOLD


def sentiment_tone(value: float) -> str:
    if value >= HIGH_SENTIMENT_THRESHOLD:
        return 'strong-positive'
    if value >= 0:
        return 'positive'
    if value >= LOW_SENTIMENT_THRESHOLD:
        return 'cautious'
    return 'negative'


def sentiment_label(value: float) -> str:
    for lower_bound, label in SENTIMENT_LABELS:
        if value >= lower_bound:
            return label
    return LOWEST_SENTIMENT_LABEL


def format_sentiment_percent(value: float) -> int:
    """
    Maps a [-1, 1] sentiment onto a 0-100 percentage.
    Halves round up (towards positive infinity), so 0.25 -> 63 and -0.75 -> 13.
    """
    return int(math.floor((value + 1) * 50 + 0.5))


# --- Energy ---

def energy_balance_skew(record: InsightsRecord) -> bool:
    """True when active and receptive differ by 30 points or more. An all-zero pair is never skewed."""
    active = record.energy_balance.active
    receptive = record.energy_balance.receptive
    return active + receptive > 0 and abs(active - receptive) >= ENERGY_SKEW_THRESHOLD


def energy_profile(record: InsightsRecord) -> str:
    """Action-Oriented or Receptive when one side leads by more than 20 points, otherwise Balanced."""
    active = record.energy_balance.active
    receptive = record.energy_balance.receptive
    if active > receptive + ENERGY_PROFILE_MARGIN:
        return ACTION_ORIENTED
    if receptive > active + ENERGY_PROFILE_MARGIN:
        return RECEPTIVE
    return BALANCED


def high_energy_flags(record: InsightsRecord) -> Tuple[bool, bool]:
    """(active is high, receptive is high)"""
    balance = record.energy_balance
    return balance.active >= HIGH_ENERGY_THRESHOLD, balance.receptive >= HIGH_ENERGY_THRESHOLD


# --- Warnings & archetypes ---

def severity_bucket(value: float) -> str:
    if value >= HIGH_SEVERITY_THRESHOLD:
        return 'high'
    if value >= MEDIUM_SEVERITY_THRESHOLD:
        return 'medium'
    return 'low'


def top_archetypes(record: InsightsRecord, n: int = DEFAULT_TOP_ARCHETYPES) -> List[ArchetypeHighlight]:
    """Strongest n archetypes, intensity descending. Equal intensities keep their received order."""
    if n <= 0:
        return []
    ranked = sorted(record.archetype_intensity, key=lambda a: a.intensity, reverse=True)
    return [
        ArchetypeHighlight(
            archetype=a.archetype,
            intensity=a.intensity,
            highlighted=a.intensity >= HIGH_ARCHETYPE_THRESHOLD,
        )
        for a in ranked[:n]
    ]


def soap_note_items(record: InsightsRecord) -> List[str]:
    """Everything a reader can send to the session's SOAP notes in one go. Warnings are left out."""
    items: List[str] = []
    items.extend(record.key_themes)
    items.append(record.potential_narrative)
    items.extend(record.questions_to_ask)
    items.extend(record.action_points or [])
    return items


# --- Summary ---

def summarize_insights(record: InsightsRecord, top_n: int = DEFAULT_TOP_ARCHETYPES) -> InsightsSummary:
    """Bundles every derived highlight for one record. The record is left untouched."""
    sentiments = [
        SentimentHighlight(
            name=name,
            value=getattr(record.sentiment, name),
            percent=format_sentiment_percent(getattr(record.sentiment, name)),
            notable=sentiment_highlight(getattr(record.sentiment, name)),
            tone=sentiment_tone(getattr(record.sentiment, name)),
            label=sentiment_label(getattr(record.sentiment, name)),
        )
        for name in SENTIMENT_ORDER
    ]
    scales = [scale_highlight(name, getattr(record.scales, name)) for name in SCALE_ORDER]
    high_active, high_receptive = high_energy_flags(record)

    energy = EnergyHighlight(
        active=record.energy_balance.active,
        receptive=record.energy_balance.receptive,
        skewed=energy_balance_skew(record),
        high_active=high_active,
        high_receptive=high_receptive,
        active_marker=ACTIVE_GLYPH if high_active else None,
        receptive_marker=RECEPTIVE_GLYPH if high_receptive else None,
        profile=energy_profile(record),
        dominant_area=dominant_energy_area(record),
    )
    warnings = [
        WarningHighlight(signal=w.signal, severity=w.severity, bucket=severity_bucket(w.severity))
        for w in (record.warning_signals or [])
    ]

    summary = InsightsSummary(
        sentiment=sentiments,
        scales=scales,
        timing=timing_label(record.scales.timing),
        timing_immediate=record.scales.timing == 'immediate',
        energy=energy,
        dominant_element=dominant_element(record),
        top_archetypes=top_archetypes(record, top_n),
        warnings=warnings,
        action_points=list(record.action_points or []),
        soap_note_items=soap_note_items(record),
    )
    logger.debug(
        f"Summarized insights: dominant area {energy.dominant_area.key}, "
        f"dominant element {summary.dominant_element.key}, {len(warnings)} warnings"
    )
    return summary
