"""Value objects passed between the engine stages.

All of them are frozen: a classification or an escalation signal is produced
once per message and never edited afterwards.
"""

from dataclasses import dataclass, field
from typing import Literal

Priority = Literal["high", "medium"]


@dataclass(frozen=True)
class IntentClassification:
    intent: str
    confidence: float
    entities: tuple[str, ...] = ()
    suggested_actions: tuple[str, ...] = ()


@dataclass(frozen=True)
class KnowledgeEntry:
    content: str
    category: str

    @classmethod
    def from_row(cls, row: dict) -> "KnowledgeEntry":
        return cls(content=row.get("content") or "", category=row.get("category") or "")


@dataclass(frozen=True)
class EscalationSignal:
    """Tells a human operator that a conversation needs attention.

    ``user_details`` is left empty by the engine; an escalation channel may
    attach whatever it knows about the visitor.
    """

    reason: str
    priority: Priority
    context_summary: str
    user_details: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ChatTurn:
    """Everything the engine produced for one incoming message."""

    reply: str
    intent: IntentClassification
    suggestions: list[str]
    escalation: EscalationSignal | None = None
