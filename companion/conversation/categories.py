from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    ANXIETY = "anxiety"
    STRESS = "stress"
    DEPRESSION = "depression"
    OVERWHELMED = "overwhelmed"
    LONELINESS = "loneliness"
    POSITIVE = "positive"
    DEFAULT = "default"
    CRISIS = "crisis"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    CONCERNING = "concerning"


class Speaker(str, Enum):
    USER = "user"
    AGENT = "agent"


# Tie-break order when a message matches several keyword sets.
CONCERNING_CATEGORIES: tuple[Category, ...] = (
    Category.ANXIETY,
    Category.STRESS,
    Category.DEPRESSION,
    Category.OVERWHELMED,
    Category.LONELINESS,
)

# Categories whose replies carry no coping suggestions.
NO_SUGGESTIONS: frozenset[Category] = frozenset({Category.POSITIVE, Category.DEFAULT})


@dataclass(frozen=True)
class ClassificationResult:
    category: Category
    sentiment: Sentiment
    is_crisis: bool = False
