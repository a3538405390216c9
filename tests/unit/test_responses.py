"""Unit tests for canned answers and the knowledge-base fallback."""

import pytest

from chat_engine.intents import classify
from chat_engine.models import IntentClassification, KnowledgeEntry
from chat_engine.responses import (
    FIXED_ANSWERS,
    GENERIC_ANSWER,
    PORTFOLIO_ANSWERS,
    PRICING_ANSWERS,
    SERVICES_ANSWERS,
    build_response,
    search_knowledge,
)

GENERAL = IntentClassification(intent="general", confidence=0.5)


def _generic(answers):
    return answers[-1][1]


@pytest.mark.unit
def test_plain_pricing_question_gets_generic_pricing_answer():
    """
    Story: The visitor says "pricing please" with no tier named. The pricing
    intent has no matching sub-keyword, so the generic pricing paragraph
    listing all three tiers comes back.
    """
    message = "pricing please"
    assert build_response(message, classify(message)) == _generic(PRICING_ANSWERS)


@pytest.mark.unit
@pytest.mark.parametrize(
    "message,expected",
    [
        ("What does the starter price include?", "Starter package"),
        ("price of the advanced tier", "Professional package"),
        ("enterprise pricing", "Enterprise solutions"),
    ],
)
def test_pricing_sub_cases(message, expected):
    reply = build_response(message, classify(message))
    assert classify(message).intent == "pricing"
    assert expected in reply


@pytest.mark.unit
def test_services_sub_cases_and_generic():
    services = IntentClassification(intent="services", confidence=0.8)
    assert "mobile apps for iOS and Android" in build_response("Do you build an app?", services)
    assert "modern web development" in build_response("website service", services)
    assert "AI and automation" in build_response("automation service", services)
    assert build_response("what do you offer", services) == _generic(SERVICES_ANSWERS)


@pytest.mark.unit
def test_portfolio_sub_cases_and_generic():
    portfolio = IntentClassification(intent="portfolio", confidence=0.8)
    assert "education technology" in build_response("school projects", portfolio)
    assert "banking applications" in build_response("bank work", portfolio)
    assert "HIPAA" in build_response("medical project", portfolio)
    assert build_response("your work", portfolio) == _generic(PORTFOLIO_ANSWERS)


@pytest.mark.unit
@pytest.mark.parametrize("intent", ["contact", "about", "faq", "demo", "integration"])
def test_fixed_answer_intents_ignore_message_details(intent):
    classification = IntentClassification(intent=intent, confidence=0.8)
    assert build_response("anything starter web bank", classification) == FIXED_ANSWERS[intent]


@pytest.mark.unit
def test_general_intent_uses_knowledge_category_match():
    """
    Story: The visitor asks about hosting, which no rule covers. A knowledge
    entry tagged "hosting" exists, so its content is returned verbatim.
    """
    knowledge = [
        KnowledgeEntry(content="We offer SEO audits.", category="seo"),
        KnowledgeEntry(content="Hosting is included for one year.", category="Hosting"),
    ]
    assert build_response("Is hosting included?", GENERAL, knowledge) == "Hosting is included for one year."


@pytest.mark.unit
def test_general_intent_uses_knowledge_content_match():
    knowledge = [KnowledgeEntry(content="Our office is in Austin, Texas.", category="location")]
    assert build_response("austin, texas", GENERAL, knowledge) == "Our office is in Austin, Texas."


@pytest.mark.unit
def test_general_intent_without_knowledge_match_gets_generic_answer():
    knowledge = [KnowledgeEntry(content="Hosting is included.", category="hosting")]
    assert build_response("hello there", GENERAL, knowledge) == GENERIC_ANSWER
    assert build_response("hello there", GENERAL) == GENERIC_ANSWER


@pytest.mark.unit
def test_search_knowledge_returns_first_match():
    first = KnowledgeEntry(content="one", category="seo")
    second = KnowledgeEntry(content="two", category="seo")
    assert search_knowledge("seo?", [first, second]) is first
    assert search_knowledge("nothing", [first, second]) is None
