"""Decides whether a conversation should be handed to a human.

Detection only: sending the signal anywhere is the job of an escalation
channel (see ``escalation/``).
"""

from typing import Sequence

from chat_engine.models import EscalationSignal, IntentClassification

URGENT_KEYWORDS = ("urgent", "emergency", "critical")
TECHNICAL_KEYWORDS = ("error", "bug", "not working")
REPEAT_MESSAGE_THRESHOLD = 5
REPEAT_WINDOW = 3


def detect_escalation(
    message: str,
    message_count: int,
    intent_history: Sequence[IntentClassification],
) -> EscalationSignal | None:
    lowered = message.lower()

    if any(k in lowered for k in URGENT_KEYWORDS):
        return EscalationSignal(
            reason="Urgent request detected",
            priority="high",
            context_summary=f'User reported urgent issue: "{message}". Message count: {message_count}',
        )

    if any(k in lowered for k in TECHNICAL_KEYWORDS):
        return EscalationSignal(
            reason="Technical issue reported",
            priority="medium",
            context_summary=f'Technical problem: "{message}". Session messages: {message_count}',
        )

    if message_count > REPEAT_MESSAGE_THRESHOLD and len(intent_history) >= REPEAT_WINDOW:
        recent = {i.intent for i in intent_history[-REPEAT_WINDOW:]}
        if len(recent) == 1:
            topic = recent.pop()
            return EscalationSignal(
                reason="Repeated questions on same topic",
                priority="medium",
                context_summary=f"User has asked {message_count} messages, mostly about {topic}",
            )

    return None
