"""Conversation session: the turn log and the simulated reply cycle.

A session is either idle or composing. ``submit`` appends the user turn right
away and schedules one reply task; while that task is outstanding further
submissions are rejected. The task sleeps a random "thinking" delay, then
classifies the submitted text, appends the agent turn and, for crisis turns,
notifies the alert sink once. ``close`` cancels the outstanding task so a torn
down session never receives a late turn.
"""
from __future__ import annotations
import asyncio
import logging
import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from .categories import Sentiment, Speaker
from .classifier import classify
from .responder import respond
from ..content.loader import Content, get_content
from ..services.alerts import AlertLog, SEVERITY_CRITICAL
from ..utils.dates import utc_now

logger = logging.getLogger(__name__)


def _uuid() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Turn:
    text: str
    speaker: Speaker
    sentiment: Optional[Sentiment] = None
    suggestions: Optional[Tuple[str, ...]] = None
    id: str = field(default_factory=_uuid)
    created_at: datetime = field(default_factory=utc_now)


class ConversationSession:
    def __init__(
        self,
        session_id: str | None = None,
        *,
        delay: Tuple[float, float] = (1.0, 3.0),
        rng: random.Random | None = None,
        alerts: AlertLog | None = None,
        content: Content | None = None,
        greet: bool = True,
    ) -> None:
        lo, hi = delay
        if lo < 0 or hi < lo:
            raise ValueError(f"invalid thinking delay range {delay!r}")
        self.id = session_id or _uuid()
        self.created_at = utc_now()
        self._delay = (lo, hi)
        self._rng = rng or random.Random()
        self._alerts = alerts
        self._content = content or get_content()
        self._turns: List[Turn] = []
        self._pending = False
        self._closed = False
        self._task: asyncio.Task | None = None
        if greet:
            self._turns.append(Turn(self._content.greeting, Speaker.AGENT, Sentiment.POSITIVE))

    @property
    def turns(self) -> Tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def offers_quick_prompts(self) -> bool:
        # only until the user has said anything
        return not self._closed and all(t.speaker is Speaker.AGENT for t in self._turns)

    def submit(self, text: str) -> bool:
        """Queue ``text`` as the next user turn. Returns False when rejected.

        Must be called from a running event loop; the reply is scheduled on it.
        """
        if self._closed or self._pending:
            return False
        if not text or not text.strip():
            return False

        # raises RuntimeError outside a running loop, before any state changes
        loop = asyncio.get_running_loop()
        user_turn = Turn(text.strip(), Speaker.USER)
        delay = self._rng.uniform(*self._delay)
        self._turns.append(user_turn)
        self._pending = True
        self._task = loop.create_task(self._reply(user_turn.text, delay))
        logger.info("session=%s user turn %s queued, reply in %.2fs", self.id, user_turn.id, delay)
        return True

    async def _reply(self, text: str, delay: float) -> None:
        try:
            await asyncio.sleep(delay)
        except asyncio.CancelledError:
            logger.info("session=%s pending reply cancelled", self.id)
            raise

        result = classify(text, self._content)
        reply = respond(result, self._rng, self._content)
        agent_turn = Turn(reply.text, Speaker.AGENT, result.sentiment, reply.suggestions)
        self._turns.append(agent_turn)
        self._pending = False
        self._task = None

        if result.is_crisis and self._alerts is not None:
            self._alerts.notify(
                self.id,
                agent_turn.id,
                SEVERITY_CRITICAL,
                self._content.alert_title,
                self._content.alert_message,
            )

    async def wait_idle(self) -> None:
        """Wait for the outstanding reply, if any. Returns early if it is cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._pending = False
        logger.info("session=%s closed after %d turns", self.id, len(self._turns))
