# Reading insights: wire models, highlight derivation and providers

from .models import InsightsRecord, InsightsSummary
from .aggregator import (
    dominant_energy_area,
    dominant_element,
    scale_highlight,
    scale_label,
    sentiment_highlight,
    sentiment_label,
    severity_bucket,
    energy_balance_skew,
    energy_profile,
    format_sentiment_percent,
    top_archetypes,
    soap_note_items,
    summarize_insights,
)
from .provider import InsightsProvider, DemoInsightsProvider
from .fixtures import DEMO_INSIGHTS

__all__ = [
    "InsightsRecord",
    "InsightsSummary",
    "dominant_energy_area",
    "dominant_element",
    "scale_highlight",
    "scale_label",
    "sentiment_highlight",
    "sentiment_label",
    "severity_bucket",
    "energy_balance_skew",
    "energy_profile",
    "format_sentiment_percent",
    "top_archetypes",
    "soap_note_items",
    "summarize_insights",
    "InsightsProvider",
    "DemoInsightsProvider",
    "DEMO_INSIGHTS",
]
