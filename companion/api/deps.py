from fastapi import Depends, HTTPException

from ..conversation.session import ConversationSession
from ..conversation.store import SessionStore
from ..services.alerts import AlertLog
from ..core.config import settings

_store = SessionStore()
_alerts = AlertLog(limit=settings.ALERT_LOG_LIMIT)


def get_store() -> SessionStore:
    return _store


def get_alerts() -> AlertLog:
    return _alerts


def get_session(session_id: str, store: SessionStore = Depends(get_store)) -> ConversationSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session
