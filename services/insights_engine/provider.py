import asyncio
import logging
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .fixtures import DEMO_INSIGHTS
from .models import InsightsRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class InsightsProvider(Protocol):
    """Anything that can turn a question and a list of drawn card names into an InsightsRecord."""

    async def get_insights(
        self,
        question: str,
        cards: List[str],
        client: Optional[Dict[str, Any]] = None,
    ) -> InsightsRecord:
        ...


class DemoInsightsProvider:
    """
    Returns the fixed demo record whatever the question or cards.
    An optional delay mimics the latency of the real interpretation call.
    """

    def __init__(self, record: InsightsRecord = DEMO_INSIGHTS, delay_seconds: float = 0.0):
        self.record = record
        self.delay_seconds = delay_seconds

    async def get_insights(
        self,
        question: str,
        cards: List[str],
        client: Optional[Dict[str, Any]] = None,
    ) -> InsightsRecord:
        logger.info(f"Serving demo insights for {len(cards)} cards")
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return self.record
