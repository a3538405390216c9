"""Keyword intent classifier.

Intents come from a fixed, ordered rule table. A message is matched against
the rules top to bottom and the first rule with any keyword contained in the
lower-cased message wins, so the order below is the priority order
("pricing" beats "services", and so on).
"""

from typing import NamedTuple

from chat_engine.models import IntentClassification

MATCHED_CONFIDENCE = 0.8
DEFAULT_CONFIDENCE = 0.5
DEFAULT_INTENT = "general"
DEFAULT_ACTIONS = ("Explore services", "View portfolio", "Contact us")


class IntentRule(NamedTuple):
    keywords: tuple[str, ...]
    intent: str
    actions: tuple[str, ...]


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        ("pricing", "cost", "fee", "price", "budget", "quote"),
        "pricing",
        ("Show pricing tiers", "Schedule consultation", "Compare plans"),
    ),
    IntentRule(
        ("service", "offer", "provide", "do"),
        "services",
        ("View services", "Get portfolio", "Contact for custom solution"),
    ),
    IntentRule(
        ("portfolio", "work", "project", "case study"),
        "portfolio",
        ("Browse portfolio", "View case studies", "See testimonials"),
    ),
    IntentRule(
        ("contact", "reach", "email", "phone", "call"),
        "contact",
        ("View contact info", "Fill contact form", "Schedule meeting"),
    ),
    IntentRule(
        ("about", "company", "team", "who"),
        "about",
        ("Learn about us", "Meet the team", "View testimonials"),
    ),
    IntentRule(
        ("faq", "question", "help", "support"),
        "faq",
        ("Browse FAQ", "Search knowledge base", "Contact support"),
    ),
    IntentRule(
        ("demo", "trial", "test", "try"),
        "demo",
        ("Schedule demo", "Request trial", "View product tour"),
    ),
    IntentRule(
        ("integration", "api", "connect", "sync"),
        "integration",
        ("View integrations", "API documentation", "Setup guide"),
    ),
)


def classify(message: str) -> IntentClassification:
    """Map a free-text message to the first matching intent rule.

    Entities are every keyword of the winning rule found in the message, not
    just the one that triggered the match. Unmatched messages fall back to the
    ``general`` intent.
    """
    lowered = message.lower()
    for rule in INTENT_RULES:
        entities = tuple(k for k in rule.keywords if k in lowered)
        if entities:
            return IntentClassification(
                intent=rule.intent,
                confidence=MATCHED_CONFIDENCE,
                entities=entities,
                suggested_actions=rule.actions,
            )
    return IntentClassification(
        intent=DEFAULT_INTENT,
        confidence=DEFAULT_CONFIDENCE,
        entities=(),
        suggested_actions=DEFAULT_ACTIONS,
    )
