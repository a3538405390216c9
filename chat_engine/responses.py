"""Canned answers for each intent, plus the knowledge-base fallback."""

from typing import Sequence

from chat_engine.models import IntentClassification, KnowledgeEntry

# (secondary keywords, answer); first match wins, the trailing "" entry is the
# intent's generic answer.
PRICING_ANSWERS = (
    (
        ("starter", "basic"),
        "Our Starter package starts at $2,500 and includes a basic website with responsive design and SEO setup. It's perfect for small businesses getting started online. Would you like me to schedule a consultation to discuss your specific needs?",
    ),
    (
        ("professional", "advanced"),
        "The Professional package at $7,500 includes advanced website development, comprehensive SEO, analytics setup, and 24/7 support. It's ideal for growing businesses that need robust online presence. I can help you compare this with our other packages.",
    ),
    (
        ("enterprise", "custom"),
        "Our Enterprise solutions start at $15,000 and are fully customized to your business requirements. This includes custom software development, advanced integrations, and dedicated support. Let's discuss your project scope for a precise quote.",
    ),
    (
        (),
        "Our pricing is customized based on your project scope and requirements. We offer three main tiers: Starter ($2,500+), Professional ($7,500+), and Enterprise ($15,000+). Each package can be tailored to your needs. What type of project are you interested in?",
    ),
)

SERVICES_ANSWERS = (
    (
        ("web", "website"),
        "We specialize in modern web development using React, Next.js, and other cutting-edge technologies. Our websites are fast, responsive, and SEO-optimized. We can build anything from simple landing pages to complex e-commerce platforms. What kind of website do you need?",
    ),
    (
        ("mobile", "app"),
        "We develop native and cross-platform mobile apps for iOS and Android. Using React Native and Flutter, we create high-performance apps with great user experiences. Our mobile solutions include offline functionality, push notifications, and seamless integrations.",
    ),
    (
        ("ai", "automation"),
        "Our AI and automation solutions help businesses streamline operations and improve efficiency. We implement chatbots, predictive analytics, workflow automation, and intelligent data processing. Auralis, our AI assistant, is a great example of our AI capabilities!",
    ),
    (
        (),
        "We offer comprehensive digital solutions including web development, mobile apps, custom software, CRM systems, AI automation, and digital marketing. Each service is tailored to your business goals. Which area interests you most?",
    ),
)

PORTFOLIO_ANSWERS = (
    (
        ("education", "school"),
        "We've developed several education technology solutions, including learning management systems, student portals, and interactive educational platforms. One notable project was a comprehensive e-learning platform for a university with 10,000+ users. Would you like to see more education projects?",
    ),
    (
        ("finance", "bank"),
        "Our finance projects include secure banking applications, fintech platforms, and financial management systems. We prioritize security and compliance in all our financial solutions. We recently completed a digital banking platform that handles millions in transactions daily.",
    ),
    (
        ("healthcare", "medical"),
        "In healthcare, we've built patient management systems, telemedicine platforms, and health monitoring applications. All our healthcare solutions comply with HIPAA and other regulations. One project involved creating a comprehensive hospital management system.",
    ),
    (
        (),
        "We've successfully delivered 120+ projects across education, finance, healthcare, e-commerce, and technology sectors. Our portfolio showcases our expertise in modern technologies and our commitment to quality. Would you like to explore projects in a specific industry?",
    ),
)

BRANCHED_ANSWERS = {
    "pricing": PRICING_ANSWERS,
    "services": SERVICES_ANSWERS,
    "portfolio": PORTFOLIO_ANSWERS,
}

FIXED_ANSWERS = {
    "contact": "You can reach us through our contact form, email us at info@limitlessinfotech.com, or call us at +1 (555) 123-4567. Our team typically responds within 2 hours during business hours. We offer free initial consultations to discuss your project. How would you like to get in touch?",
    "about": "Limitless Infotech is where innovation meets execution. Founded with a vision to transform businesses through technology, we've grown to serve 28K+ users with a 98% client retention rate. Our team combines technical expertise with business acumen to deliver exceptional results. Learn more about our story and values on our About page.",
    "faq": "You can find answers to common questions in our FAQ section. We cover topics like our development process, pricing, timelines, support, and technical specifications. If you don't find what you're looking for, feel free to ask me directly!",
    "demo": "We offer personalized demos tailored to your business needs. During a demo, we'll showcase relevant technologies, discuss your requirements, and demonstrate how our solutions can benefit your organization. Schedule a demo through our contact form or by calling us directly.",
    "integration": "We provide seamless integrations with popular platforms including payment gateways, CRM systems, marketing tools, and enterprise software. Our API-first approach ensures smooth data flow and scalability. What systems do you need to integrate with?",
}

GENERIC_ANSWER = "I'd be happy to help you learn more about Limitless Infotech and our services. We specialize in web development, mobile apps, AI automation, and digital transformation. What specific information are you looking for?"


def _pick_branch(lowered: str, answers) -> str:
    for keywords, answer in answers:
        if not keywords or any(k in lowered for k in keywords):
            return answer
    return answers[-1][1]


def search_knowledge(message: str, knowledge: Sequence[KnowledgeEntry]) -> KnowledgeEntry | None:
    """First entry whose category is mentioned in the message, or whose content contains it."""
    lowered = message.lower()
    for entry in knowledge:
        if entry.category.lower() in lowered or lowered in entry.content.lower():
            return entry
    return None


def build_response(
    message: str,
    intent: IntentClassification,
    knowledge: Sequence[KnowledgeEntry] = (),
) -> str:
    lowered = message.lower()
    if intent.intent in BRANCHED_ANSWERS:
        return _pick_branch(lowered, BRANCHED_ANSWERS[intent.intent])
    if intent.intent in FIXED_ANSWERS:
        return FIXED_ANSWERS[intent.intent]

    match = search_knowledge(message, knowledge)
    if match is not None:
        return match.content
    return GENERIC_ANSWER
