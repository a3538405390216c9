"""Next-step suggestions and page-aware welcome messages."""

from chat_engine.models import IntentClassification
from chat_engine.store import ConversationContext

MAX_SUGGESTIONS = 3

INTENT_SUGGESTIONS = {
    "pricing": ["Compare pricing plans", "Schedule consultation", "View pricing FAQ"],
    "services": ["View our portfolio", "Schedule demo", "Get custom quote"],
    "portfolio": ["View case studies", "Contact for similar project", "See testimonials"],
    "contact": ["Fill contact form", "Call us directly", "Schedule meeting"],
    "about": ["Meet our team", "View company story", "See client testimonials"],
}
DEFAULT_SUGGESTIONS = ["Explore services", "View portfolio", "Contact us"]

# Checked in order; the first path fragment found in the page wins.
PAGE_SUGGESTIONS = (
    ("/services", "Get detailed service info"),
    ("/portfolio", "Explore case studies"),
    ("/contact", "Schedule consultation"),
)

PAGE_WELCOMES = (
    (
        "/pricing",
        "Welcome to our Pricing page! I'm Auralis from Limitless Infotech. Our pricing is customized based on your needs. Most users ask about plan differences—would you like a quick comparison or help choosing the right tier?",
        ["Compare pricing plans", "Get a custom quote", "See pricing FAQ"],
    ),
    (
        "/services",
        "Exploring our Services? Hi, I'm Auralis! We offer web development, mobile apps, custom software, CRM, and AI automation. Which service interests you most?",
        ["Web Development details", "Mobile App services", "Custom Software solutions"],
    ),
    (
        "/portfolio",
        "Checking out our Portfolio? Welcome! I'm Auralis. We've delivered 120+ projects across education, finance, healthcare, and technology. Want to see projects in a specific industry?",
        ["Education projects", "Finance solutions", "Healthcare tech"],
    ),
    (
        "/contact",
        "Ready to get in touch? Hi, I'm Auralis! We love hearing from potential clients. Our team typically responds within 2 hours. How can we help transform your business?",
        ["Schedule a consultation", "Request a quote", "General inquiry"],
    ),
    (
        "/about",
        "Learning about Limitless Infotech? Hello, I'm Auralis! We're where innovation meets execution, serving 28K+ users with 98% client retention. Curious about our team or story?",
        ["Meet our team", "Company story", "Client testimonials"],
    ),
)
DEFAULT_WELCOME = (
    "Hello! I'm Auralis, your AI assistant from Limitless Infotech. I see you're on our website—let me help you find what you need. What brings you here today?",
    ["Explore services", "View portfolio", "Get pricing info"],
)


def suggest(intent: IntentClassification, context: ConversationContext | None) -> list[str]:
    """Up to three follow-ups; a page-specific one displaces the last generic one."""
    suggestions = list(INTENT_SUGGESTIONS.get(intent.intent, DEFAULT_SUGGESTIONS))

    page = (context.current_page if context else "") or ""
    page = page.lower()
    for fragment, extra in PAGE_SUGGESTIONS:
        if fragment in page:
            suggestions.insert(0, extra)
            break

    return suggestions[:MAX_SUGGESTIONS]


def welcome(current_page: str = "/") -> tuple[str, list[str]]:
    page = (current_page or "/").lower()
    for fragment, message, suggestions in PAGE_WELCOMES:
        if fragment in page:
            return message, list(suggestions)
    message, suggestions = DEFAULT_WELCOME
    return message, list(suggestions)
