"""Crisis alert sink.

Keeps the newest alerts in a bounded in-memory log and emits a WARNING record
for each one so operators see crisis turns without reading the log endpoint.
Nothing here is persisted.
"""
from __future__ import annotations
import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Deque, List

from ..utils.dates import utc_now

logger = logging.getLogger(__name__)

SEVERITY_CRITICAL = "critical"


@dataclass(frozen=True)
class Alert:
    session_id: str
    turn_id: str
    severity: str
    title: str
    message: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=utc_now)


class AlertLog:
    def __init__(self, limit: int = 200) -> None:
        self._limit = max(1, limit)
        self._alerts: Deque[Alert] = deque(maxlen=self._limit)
        self._lock = Lock()

    def notify(self, session_id: str, turn_id: str, severity: str, title: str, message: str) -> Alert:
        alert = Alert(session_id=session_id, turn_id=turn_id, severity=severity, title=title, message=message)
        with self._lock:
            self._alerts.appendleft(alert)
        logger.warning("%s alert for session=%s turn=%s: %s", severity, session_id, turn_id, title)
        return alert

    def recent(self, limit: int | None = None) -> List[Alert]:
        with self._lock:
            items = list(self._alerts)
        if limit is None:
            return items
        return items[: max(0, min(limit, self._limit))]

    def __len__(self) -> int:
        return len(self._alerts)
