from __future__ import annotations
import logging
from typing import Iterable

from .categories import Category, Sentiment, ClassificationResult, CONCERNING_CATEGORIES
from ..content.loader import Content, get_content

logger = logging.getLogger(__name__)


def _matches(text: str, keywords: Iterable[str]) -> bool:
    # plain containment: "die" also matches inside "studied"
    return any(kw in text for kw in keywords)


def classify(text: str, content: Content | None = None) -> ClassificationResult:
    content = content or get_content()
    t = (text or "").lower()

    # crisis language dominates any other keyword in the message
    if _matches(t, content.crisis_keywords):
        logger.debug("classified as crisis (len=%d)", len(t))
        return ClassificationResult(Category.CRISIS, Sentiment.CONCERNING, True)

    for cat in CONCERNING_CATEGORIES:
        if _matches(t, content.keywords[cat]):
            logger.debug("classified as %s (len=%d)", cat.value, len(t))
            return ClassificationResult(cat, Sentiment.CONCERNING, False)

    if _matches(t, content.positive_keywords):
        logger.debug("classified as positive (len=%d)", len(t))
        return ClassificationResult(Category.POSITIVE, Sentiment.POSITIVE, False)

    logger.debug("classified as default (len=%d)", len(t))
    return ClassificationResult(Category.DEFAULT, Sentiment.NEUTRAL, False)
