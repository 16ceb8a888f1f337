from fastapi import APIRouter, HTTPException, Depends
import logging

from config.settings import CopilotSettings, get_app_settings, get_copilot_settings
from services.insights_engine.aggregator import summarize_insights
from services.insights_engine.models import InsightsSummary
from services.insights_engine.provider import InsightsProvider
from services.tarot_deck import TarotDeck, draw_cards, get_default_deck, load_deck
from tracker.copilot.client import CopilotServiceError, get_insights_provider
from tracker.schemas.readings import DrawRequest, DrawResponse, SummaryRequest

router = APIRouter()
logger = logging.getLogger(__name__)


def get_deck() -> TarotDeck:
    deck_path = get_app_settings().deck_path
    if deck_path:
        return load_deck(deck_path)
    return get_default_deck()


def get_provider(settings: CopilotSettings = Depends(get_copilot_settings)) -> InsightsProvider:
    return get_insights_provider(settings)


@router.get("/deck", response_model=TarotDeck)
async def read_deck(deck: TarotDeck = Depends(get_deck)):
    return deck


@router.post("/readings/draw", response_model=DrawResponse)
async def draw_reading(
    request: DrawRequest,
    deck: TarotDeck = Depends(get_deck),
    provider: InsightsProvider = Depends(get_provider),
    settings: CopilotSettings = Depends(get_copilot_settings),
):
    """
    Draws a spread and, when the copilot is enabled, asks the insights provider
    to interpret it. Each draw replaces the previous insights wholesale.
    """
    try:
        cards = draw_cards(deck, request.count)
    except ValueError as e:
        logger.error(f"Invalid draw request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    if not settings.enabled:
        logger.info("Copilot disabled; returning cards without insights")
        return DrawResponse(question=request.question, cards=cards)

    try:
        insights = await provider.get_insights(request.question, [c.name for c in cards], request.client)
    except CopilotServiceError as e:
        logger.error(f"Copilot error for question {request.question!r}: {e}")
        raise HTTPException(status_code=502, detail=f"Copilot Error: {e}")
    except Exception as e:
        logger.exception(f"Unexpected error fetching insights: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

    return DrawResponse(
        question=request.question,
        cards=cards,
        insights=insights,
        summary=summarize_insights(insights),
    )


@router.post("/insights/summary", response_model=InsightsSummary)
async def insights_summary(request: SummaryRequest):
    return summarize_insights(request.insights, request.top_n)
