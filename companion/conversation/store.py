"""In-memory registry of live conversation sessions.

Sessions exist only for the lifetime of the process; closing one stands in for
tearing down its conversation view.
"""
from __future__ import annotations
import logging
from typing import Any, Dict

from .session import ConversationSession

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self) -> None:
        self._sessions: Dict[str, ConversationSession] = {}

    def create(self, **kwargs: Any) -> ConversationSession:
        session = ConversationSession(**kwargs)
        self._sessions[session.id] = session
        logger.info("session=%s opened (%d live)", session.id, len(self._sessions))
        return session

    def get(self, sid: str) -> ConversationSession | None:
        return self._sessions.get(sid)

    def close(self, sid: str) -> bool:
        session = self._sessions.pop(sid, None)
        if session is None:
            return False
        session.close()
        return True

    def close_all(self) -> None:
        for sid in list(self._sessions):
            self.close(sid)

    def __len__(self) -> int:
        return len(self._sessions)
