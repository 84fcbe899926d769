from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_store, get_alerts, get_session
from ..schemas import (
    MessageIn, SubmitResponse, SessionOut, TurnOut, ClassifyIn, ClassificationOut,
    AlertOut, AlertsPage, QuickPromptsOut,
)
from ...conversation.classifier import classify
from ...conversation.session import ConversationSession, Turn
from ...conversation.store import SessionStore
from ...content.loader import get_content
from ...services.alerts import AlertLog
from ...core.config import settings
from ...utils.dates import iso

router = APIRouter(prefix="/chat", tags=["chat"])

def _turn_out(t: Turn) -> TurnOut:
    return TurnOut(
        id=t.id,
        text=t.text,
        speaker=t.speaker.value,
        createdAt=iso(t.created_at),
        sentiment=t.sentiment.value if t.sentiment else None,
        suggestions=list(t.suggestions) if t.suggestions is not None else None,
    )

def _session_out(s: ConversationSession) -> SessionOut:
    return SessionOut(
        id=s.id,
        createdAt=iso(s.created_at),
        pending=s.pending,
        turns=[_turn_out(t) for t in s.turns],
        quickPrompts=list(get_content().quick_prompts) if s.offers_quick_prompts else [],
    )

@router.post("/sessions", response_model=SessionOut, status_code=201)
def create_session(store: SessionStore = Depends(get_store), alerts: AlertLog = Depends(get_alerts)):
    s = store.create(
        delay=(settings.THINKING_DELAY_MIN_SECONDS, settings.THINKING_DELAY_MAX_SECONDS),
        alerts=alerts,
        greet=settings.GREETING_ENABLED,
    )
    return _session_out(s)

@router.get("/sessions/{session_id}", response_model=SessionOut)
def session_detail(session: ConversationSession = Depends(get_session)):
    return _session_out(session)

@router.post("/sessions/{session_id}/messages", response_model=SubmitResponse)
async def submit_message(payload: MessageIn, session: ConversationSession = Depends(get_session)):
    # a rejected submission (blank text, reply pending) is not an error
    accepted = session.submit(payload.message)
    if accepted and payload.wait:
        await session.wait_idle()
    return SubmitResponse(accepted=accepted, session=_session_out(session))

@router.delete("/sessions/{session_id}")
# async so the reply task is cancelled on the loop thread
async def close_session(session_id: str, store: SessionStore = Depends(get_store)):
    store.close(session_id)
    return {"ok": True}

@router.get("/quick-prompts", response_model=QuickPromptsOut)
def quick_prompts():
    return QuickPromptsOut(items=list(get_content().quick_prompts))

@router.get("/alerts", response_model=AlertsPage)
def recent_alerts(limit: int = Query(20, ge=1, le=200), alerts: AlertLog = Depends(get_alerts)):
    items = [
        AlertOut(
            id=a.id, sessionId=a.session_id, turnId=a.turn_id, severity=a.severity,
            title=a.title, message=a.message, createdAt=iso(a.created_at),
        )
        for a in alerts.recent(limit)
    ]
    return AlertsPage(limit=limit, items=items)

@router.post("/classify", response_model=ClassificationOut)
def classify_message(payload: ClassifyIn):
    if not settings.ALLOW_DEV_DEBUG_META:
        raise HTTPException(status_code=404, detail="Not found")
    r = classify(payload.message)
    return ClassificationOut(category=r.category.value, sentiment=r.sentiment.value, isCrisis=r.is_crisis)
