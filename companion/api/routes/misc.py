from fastapi import APIRouter
from ...core.config import settings

router = APIRouter(tags=["misc"])

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/version")
def version():
    return {"version": settings.API_VERSION}

@router.get("/config/app")
def app_config():
    return {
        "chatEnabled": True,
        "greetingEnabled": settings.GREETING_ENABLED,
        "thinkingDelaySeconds": [settings.THINKING_DELAY_MIN_SECONDS, settings.THINKING_DELAY_MAX_SECONDS],
    }
