"""Static conversation content shipped as YAML next to this module.

Tables are keyed by :class:`Category` and validated exhaustively on load, so a
category added to the enum without content (or content naming a category that
does not exist) fails at startup rather than at the first matching message.
"""
from __future__ import annotations
import os
import yaml
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, Mapping, Tuple

from ..conversation.categories import Category, CONCERNING_CATEGORIES

CONTENT_DIR = os.path.dirname(__file__)

# Every category except these must have a reply pool.
_POOL_EXEMPT = {Category.POSITIVE, Category.CRISIS}


class ContentError(ValueError):
    pass


@dataclass(frozen=True)
class Content:
    crisis_keywords: Tuple[str, ...]
    keywords: Mapping[Category, Tuple[str, ...]]
    positive_keywords: Tuple[str, ...]
    replies: Mapping[Category, Tuple[str, ...]]
    coping: Mapping[Category, Tuple[str, ...]]
    crisis_message: str
    crisis_actions: Tuple[str, ...]
    alert_title: str
    alert_message: str
    greeting: str
    quick_prompts: Tuple[str, ...]


def _read(content_dir: str, name: str) -> Dict[str, Any]:
    path = os.path.join(content_dir, name)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ContentError(f"{name}: expected a mapping at top level")
    return data


def _strings(value: Any, where: str) -> Tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ContentError(f"{where}: expected a non-empty list of strings")
    out = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ContentError(f"{where}: entries must be non-empty strings")
        out.append(item)
    return tuple(out)


def _keyed(raw: Any, where: str, required: Iterable[Category], allowed: Iterable[Category]) -> Dict[Category, Tuple[str, ...]]:
    if not isinstance(raw, dict):
        raise ContentError(f"{where}: expected a mapping of category -> list")
    allowed = set(allowed)
    table: Dict[Category, Tuple[str, ...]] = {}
    for key, value in raw.items():
        try:
            cat = Category(key)
        except ValueError:
            raise ContentError(f"{where}: unknown category {key!r}") from None
        if cat not in allowed:
            raise ContentError(f"{where}: category {key!r} not allowed here")
        table[cat] = _strings(value, f"{where}.{key}")
    missing = [c.value for c in required if c not in table]
    if missing:
        raise ContentError(f"{where}: missing categories {missing}")
    return table


def load_content(content_dir: str = CONTENT_DIR) -> Content:
    lexicon = _read(content_dir, "lexicon.yaml")
    replies = _read(content_dir, "replies.yaml")
    coping = _read(content_dir, "coping.yaml")

    pool_categories = [c for c in Category if c not in _POOL_EXEMPT]
    crisis = replies.get("crisis") or {}
    alert = crisis.get("alert") or {}

    actions = _strings(crisis.get("actions"), "replies.crisis.actions")
    if len(actions) != 4:
        raise ContentError("replies.crisis.actions: expected exactly four actions")

    message = crisis.get("message")
    greeting = replies.get("greeting")
    if not isinstance(message, str) or not message.strip():
        raise ContentError("replies.crisis.message: required")
    if not isinstance(greeting, str) or not greeting.strip():
        raise ContentError("replies.greeting: required")

    return Content(
        crisis_keywords=_strings(lexicon.get("crisis"), "lexicon.crisis"),
        keywords=_keyed(lexicon.get("categories"), "lexicon.categories", CONCERNING_CATEGORIES, CONCERNING_CATEGORIES),
        positive_keywords=_strings(lexicon.get("positive"), "lexicon.positive"),
        replies=_keyed(replies.get("pools"), "replies.pools", pool_categories, pool_categories),
        coping=_keyed(coping, "coping", CONCERNING_CATEGORIES, CONCERNING_CATEGORIES),
        crisis_message=message,
        crisis_actions=actions,
        alert_title=str(alert.get("title", "Crisis Support Needed")),
        alert_message=str(alert.get("message", "Please seek immediate help. Your safety is the priority.")),
        greeting=greeting,
        quick_prompts=_strings(replies.get("quick_prompts"), "replies.quick_prompts"),
    )


@lru_cache(maxsize=1)
def get_content() -> Content:
    return load_content()
