import random

from companion.conversation.categories import Category, Sentiment, ClassificationResult
from companion.conversation.responder import respond, Reply
from companion.content.loader import get_content

CRISIS = ClassificationResult(Category.CRISIS, Sentiment.CONCERNING, True)


class FirstChoice:
    def choice(self, seq):
        return seq[0]

class LastChoice:
    def choice(self, seq):
        return seq[-1]


def test_crisis_reply_is_fixed():
    content = get_content()
    replies = {respond(CRISIS, random.Random(seed)) for seed in range(25)}
    assert replies == {Reply(content.crisis_message, content.crisis_actions)}
    assert content.crisis_actions == (
        "Call 988 now",
        "Go to Crisis Support section",
        "Contact campus counseling",
        "Reach out to a trusted friend",
    )
    assert "988" in content.crisis_message

def test_concerning_category_attaches_full_coping_pool_in_order():
    content = get_content()
    for cat in (Category.ANXIETY, Category.STRESS, Category.DEPRESSION, Category.OVERWHELMED, Category.LONELINESS):
        reply = respond(ClassificationResult(cat, Sentiment.CONCERNING), random.Random(1))
        assert reply.suggestions == content.coping[cat]
        assert len(reply.suggestions) == 4
        assert reply.text in content.replies[cat]

def test_positive_uses_default_pool_without_suggestions():
    content = get_content()
    reply = respond(ClassificationResult(Category.POSITIVE, Sentiment.POSITIVE), FirstChoice())
    assert reply.text == content.replies[Category.DEFAULT][0]
    assert reply.suggestions is None

def test_default_has_no_suggestions():
    content = get_content()
    reply = respond(ClassificationResult(Category.DEFAULT, Sentiment.NEUTRAL), LastChoice())
    assert reply.text == content.replies[Category.DEFAULT][-1]
    assert reply.suggestions is None

def test_selection_follows_injected_rng():
    result = ClassificationResult(Category.STRESS, Sentiment.CONCERNING)
    a = [respond(result, random.Random(7)).text for _ in range(3)]
    b = [respond(result, random.Random(7)).text for _ in range(3)]
    assert a == b

def test_every_pool_entry_is_reachable():
    content = get_content()
    rng = random.Random(0)
    seen = {respond(ClassificationResult(Category.LONELINESS, Sentiment.CONCERNING), rng).text for _ in range(200)}
    assert seen == set(content.replies[Category.LONELINESS])

def test_crisis_category_without_flag_still_gets_crisis_reply():
    content = get_content()
    reply = respond(ClassificationResult(Category.CRISIS, Sentiment.CONCERNING), FirstChoice())
    assert reply == Reply(content.crisis_message, content.crisis_actions)
