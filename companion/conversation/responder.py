"""Canned replies for a classification.

The crisis path is fixed text and never sampled. Every other category draws one
reply uniformly from its pool and, unless it is ``positive`` or ``default``,
attaches the category's full coping list in configured order.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .categories import Category, ClassificationResult, NO_SUGGESTIONS
from ..content.loader import Content, get_content

_rng = random.Random()


@dataclass(frozen=True)
class Reply:
    text: str
    suggestions: Optional[Tuple[str, ...]] = None


def crisis_reply(content: Content | None = None) -> Reply:
    content = content or get_content()
    return Reply(content.crisis_message, content.crisis_actions)


def respond(result: ClassificationResult, rng: random.Random | None = None, content: Content | None = None) -> Reply:
    content = content or get_content()
    if result.is_crisis or result.category is Category.CRISIS:
        return crisis_reply(content)

    pool = content.replies.get(result.category) or content.replies[Category.DEFAULT]
    text = (rng or _rng).choice(pool)

    suggestions = None
    if result.category not in NO_SUGGESTIONS:
        suggestions = content.coping.get(result.category)
    return Reply(text, suggestions)
