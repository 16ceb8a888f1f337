import logging
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from config.settings import CopilotSettings, get_app_settings, get_copilot_settings
from tracker.core.logging_config import setup_logging
from tracker.routers import personality as personality_router
from tracker.routers import readings as readings_router

# Configure logging early
setup_logging(get_app_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Tarot Client Tracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(personality_router.router, prefix="/api/v1", tags=["personality"])
app.include_router(readings_router.router, prefix="/api/v1", tags=["readings"])


@app.get("/health", tags=["Health Check"])
async def health(settings: CopilotSettings = Depends(get_copilot_settings)):
    """Basic liveness check, also reporting whether the copilot serves demo insights."""
    return {"status": "ok", "copilot_enabled": settings.enabled, "demo_mode": settings.demo_mode}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
