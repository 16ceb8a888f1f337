import logging
import httpx
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from config.settings import CopilotSettings
from services.insights_engine.models import InsightsRecord
from services.insights_engine.provider import DemoInsightsProvider, InsightsProvider

logger = logging.getLogger(__name__)


class CopilotServiceError(Exception):
    """The card-interpretation function could not produce usable insights."""
    pass


class CopilotInsightsProvider:
    """
    Fetches reading insights from the hosted interpret-cards function.

    The function takes the session question, the drawn card names and the
    client profile (or null) and answers with an InsightsRecord as JSON.
    Transport errors are retried; HTTP error statuses and malformed bodies are not.
    """

    def __init__(self, settings: CopilotSettings):
        self.settings = settings

    def _headers(self) -> Dict[str, str]:
        headers = {
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        if self.settings.api_key:
            headers['Authorization'] = f"Bearer {self.settings.api_key}"
            headers['apikey'] = self.settings.api_key
        return headers

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        @retry(
            stop=stop_after_attempt(self.settings.max_attempts),
            wait=wait_exponential(multiplier=self.settings.retry_backoff_seconds, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True
        )
        async def _send() -> httpx.Response:
            logger.info(f"Calling interpret-cards, attempt: {_send.retry.statistics.get('attempt_number', 1)}")
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.settings.function_url,
                    headers=self._headers(),
                    json=payload,
                    timeout=self.settings.timeout_seconds
                )
                response.raise_for_status()
                return response

        return await _send()

    async def get_insights(
        self,
        question: str,
        cards: List[str],
        client: Optional[Dict[str, Any]] = None,
    ) -> InsightsRecord:
        payload = {'question': question, 'cards': cards, 'user': client}
        logger.info(f"Requesting copilot insights for cards: {cards}")

        try:
            response = await self._post(payload)
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from interpret-cards: {e.response.status_code} - {e.response.text}")
            raise CopilotServiceError(f"Interpretation service returned {e.response.status_code}") from e
        except httpx.TransportError as e:
            logger.error(f"Request error calling interpret-cards after {self.settings.max_attempts} attempts: {e}")
            raise CopilotServiceError(f"Interpretation service unreachable: {e}") from e

        try:
            record = InsightsRecord.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed insights payload from interpret-cards: {e}")
            raise CopilotServiceError("Interpretation service returned malformed insights") from e

        logger.info(f"Received copilot insights with {len(record.key_themes)} themes")
        return record


def get_insights_provider(settings: CopilotSettings) -> InsightsProvider:
    """Picks the demo or the live provider from the explicit demo_mode flag."""
    if settings.demo_mode:
        return DemoInsightsProvider(delay_seconds=settings.demo_delay_seconds)
    return CopilotInsightsProvider(settings)
