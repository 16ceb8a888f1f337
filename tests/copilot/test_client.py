# tests/copilot/test_client.py
import pytest
import httpx
from unittest.mock import AsyncMock, MagicMock

from config.settings import CopilotSettings
from services.insights_engine.fixtures import DEMO_INSIGHTS, DEMO_INSIGHTS_PAYLOAD
from services.insights_engine.provider import DemoInsightsProvider
from tracker.copilot.client import CopilotInsightsProvider, CopilotServiceError, get_insights_provider

FUNCTION_URL = "https://example.test/functions/v1/interpret-cards"
QUESTION = "Should I take the new job?"
CARDS = ["Eight of Wands", "Justice", "Three of Cups"]
CLIENT = {"id": "c1", "name": "Sam"}


def live_settings(**overrides) -> CopilotSettings:
    values = dict(
        demo_mode=False,
        function_url=FUNCTION_URL,
        api_key="FAKE_KEY",
        timeout_seconds=5.0,
        max_attempts=3,
        retry_backoff_seconds=0,
    )
    values.update(overrides)
    return CopilotSettings(**values)


def mock_async_client(mocker, post):
    """Patches httpx.AsyncClient so `async with httpx.AsyncClient() as client` yields a mock with `post`."""
    mock_client = MagicMock(spec=httpx.AsyncClient)
    mock_client.post = post
    mock_client.__aenter__.return_value = mock_client
    mocker.patch('httpx.AsyncClient', return_value=mock_client)
    return mock_client


def ok_response(payload):
    response = MagicMock(spec=httpx.Response)
    response.status_code = 200
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


@pytest.mark.asyncio
async def test_get_insights_success(mocker):
    mock_post = AsyncMock(return_value=ok_response(DEMO_INSIGHTS_PAYLOAD))
    mock_async_client(mocker, mock_post)

    provider = CopilotInsightsProvider(live_settings())
    record = await provider.get_insights(QUESTION, CARDS, CLIENT)

    assert record == DEMO_INSIGHTS
    mock_post.assert_awaited_once_with(
        FUNCTION_URL,
        headers={
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'Authorization': 'Bearer FAKE_KEY',
            'apikey': 'FAKE_KEY',
        },
        json={'question': QUESTION, 'cards': CARDS, 'user': CLIENT},
        timeout=5.0
    )


@pytest.mark.asyncio
async def test_get_insights_without_api_key_sends_no_auth(mocker):
    mock_post = AsyncMock(return_value=ok_response(DEMO_INSIGHTS_PAYLOAD))
    mock_async_client(mocker, mock_post)

    await CopilotInsightsProvider(live_settings(api_key=None)).get_insights(QUESTION, CARDS)

    headers = mock_post.await_args.kwargs['headers']
    assert 'Authorization' not in headers
    assert mock_post.await_args.kwargs['json']['user'] is None


@pytest.mark.asyncio
async def test_http_error_status_raises_without_retry(mocker):
    request = httpx.Request("POST", FUNCTION_URL)
    error_response = httpx.Response(500, request=request, text="boom")
    response = MagicMock(spec=httpx.Response)
    response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError("server error", request=request, response=error_response)
    )
    mock_post = AsyncMock(return_value=response)
    mock_async_client(mocker, mock_post)

    with pytest.raises(CopilotServiceError, match="500"):
        await CopilotInsightsProvider(live_settings()).get_insights(QUESTION, CARDS)
    assert mock_post.await_count == 1


@pytest.mark.asyncio
async def test_transport_errors_are_retried_then_succeed(mocker):
    request = httpx.Request("POST", FUNCTION_URL)
    mock_post = AsyncMock(side_effect=[
        httpx.ConnectError("refused", request=request),
        ok_response(DEMO_INSIGHTS_PAYLOAD),
    ])
    mock_async_client(mocker, mock_post)

    record = await CopilotInsightsProvider(live_settings()).get_insights(QUESTION, CARDS)

    assert record == DEMO_INSIGHTS
    assert mock_post.await_count == 2


@pytest.mark.asyncio
async def test_transport_errors_exhaust_attempts(mocker):
    request = httpx.Request("POST", FUNCTION_URL)
    mock_post = AsyncMock(side_effect=httpx.ReadTimeout("slow", request=request))
    mock_async_client(mocker, mock_post)

    with pytest.raises(CopilotServiceError, match="unreachable"):
        await CopilotInsightsProvider(live_settings(max_attempts=2)).get_insights(QUESTION, CARDS)
    assert mock_post.await_count == 2


@pytest.mark.asyncio
async def test_malformed_payload_raises(mocker):
    mock_post = AsyncMock(return_value=ok_response({"sentiment": {"overall": 0.1}}))
    mock_async_client(mocker, mock_post)

    with pytest.raises(CopilotServiceError, match="malformed"):
        await CopilotInsightsProvider(live_settings()).get_insights(QUESTION, CARDS)


@pytest.mark.asyncio
async def test_payload_without_themes_raises(mocker):
    payload = {key: value for key, value in DEMO_INSIGHTS_PAYLOAD.items() if key != "keyThemes"}
    mock_async_client(mocker, AsyncMock(return_value=ok_response(payload)))

    with pytest.raises(CopilotServiceError, match="malformed"):
        await CopilotInsightsProvider(live_settings()).get_insights(QUESTION, CARDS)


def test_provider_selection_follows_demo_flag():
    assert isinstance(get_insights_provider(live_settings(demo_mode=True)), DemoInsightsProvider)
    assert isinstance(get_insights_provider(live_settings(demo_mode=False)), CopilotInsightsProvider)
