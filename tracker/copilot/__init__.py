from .client import CopilotInsightsProvider, CopilotServiceError, get_insights_provider

__all__ = [
    "CopilotInsightsProvider",
    "CopilotServiceError",
    "get_insights_provider",
]
