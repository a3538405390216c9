import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Protocol

from chat_engine.models import IntentClassification

DEFAULT_MAX_SESSIONS = 1000
DEFAULT_IDLE_TTL_SECONDS = 30 * 60


@dataclass
class ConversationContext:
    current_page: str = "/"
    message_history: list[str] = field(default_factory=list)
    intent_history: list[IntentClassification] = field(default_factory=list)

    def record(self, message: str, intent: IntentClassification | None = None) -> None:
        # intent_history never grows past message_history
        self.message_history.append(message)
        if intent is not None:
            self.intent_history.append(intent)


class ConversationStore(Protocol):
    def load(self, session_id: str) -> ConversationContext: ...
    def save(self, session_id: str, context: ConversationContext) -> None: ...
    def discard(self, session_id: str) -> None: ...


class InMemoryConversationStore:
    """Per-session contexts, ended after ``idle_ttl_seconds`` without activity.

    At most ``max_sessions`` contexts are held; past that the least recently
    used session ends first.
    """

    def __init__(
        self,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
        idle_ttl_seconds: float = DEFAULT_IDLE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_sessions = max_sessions
        self._idle_ttl = idle_ttl_seconds
        self._clock = clock
        # session_id -> (context, last activity); oldest activity first
        self._data: OrderedDict[str, tuple[ConversationContext, float]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._data)

    def load(self, session_id: str) -> ConversationContext:
        self._expire()
        entry = self._data.get(session_id)
        context = entry[0] if entry else ConversationContext()
        self._touch(session_id, context)
        return context

    def save(self, session_id: str, context: ConversationContext) -> None:
        self._touch(session_id, context)

    def discard(self, session_id: str) -> None:
        self._data.pop(session_id, None)

    def _touch(self, session_id: str, context: ConversationContext) -> None:
        self._data[session_id] = (context, self._clock())
        self._data.move_to_end(session_id)
        while len(self._data) > self._max_sessions:
            self._data.popitem(last=False)

    def _expire(self) -> None:
        cutoff = self._clock() - self._idle_ttl
        while self._data:
            _, (_, last_seen) = next(iter(self._data.items()))
            if last_seen > cutoff:
                break
            self._data.popitem(last=False)
