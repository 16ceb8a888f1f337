from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from services.insights_engine.models import InsightsRecord, InsightsSummary
from services.tarot_deck.models import DrawnCard


class DrawRequest(BaseModel):
    question: str = ""
    count: int = Field(3, ge=1, le=78)
    client: Optional[Dict[str, Any]] = None  # client profile forwarded to the interpreter


class DrawResponse(BaseModel):
    question: str
    cards: List[DrawnCard]
    insights: Optional[InsightsRecord] = None
    summary: Optional[InsightsSummary] = None


class SummaryRequest(BaseModel):
    insights: InsightsRecord
    top_n: int = Field(3, ge=0)
