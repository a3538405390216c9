"""Auralis chat engine: rule-based intent, response and escalation pipeline.

Purpose
-------
The engine is the single place that owns "handle this message." Callers (the
HTTP API, the terminal chatbot, the uagents agent) pass in a message, a
session_id and optionally the page the visitor is on, and get back a
``ChatTurn``: the reply text, the detected intent, up to three suggestions and
an escalation signal when a human should step in.

Interface contract
------------------
- ``classify``, ``respond``, ``detect_escalation`` and ``suggest`` are
  independent; none calls another, and only ``respond`` touches the knowledge
  store.
- ``handle`` runs them in sequence over the session's conversation context and
  is the only method that mutates conversation state (append-only).
- Collaborator failures (knowledge fetch, escalation channel) are logged and
  never raised to the caller. Escalations are delivered in a background task,
  so a slow channel never holds up the reply; ``drain`` waits for them.
"""

import asyncio
import functools
import inspect
import logging
import time
from typing import Sequence

from chat_engine import escalation_rules, intents, responses, suggestions
from chat_engine.knowledge import KnowledgeStore
from chat_engine.models import ChatTurn, EscalationSignal, IntentClassification
from chat_engine.store import (
    ConversationContext,
    ConversationStore,
    InMemoryConversationStore,
)
from escalation.base_escalation import BaseEscalation

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "Unable to answer your question at this time"


def _truncate(s: str, max_len: int = 400) -> str:
    if not isinstance(s, str):
        s = str(s)
    return s[:max_len] + "..." if len(s) > max_len else s


def log_stage(fn):
    """Decorator: log stage name, result and duration for sync or async stages."""
    name = fn.__name__

    def _done(start, result):
        elapsed = time.perf_counter() - start
        logger.debug("Stage %s returned in %.3fs: %s", name, elapsed, _truncate(repr(result), 200))

    def _failed(start, e):
        elapsed = time.perf_counter() - start
        logger.exception("Stage %s failed after %.3fs: %s", name, elapsed, e)

    if inspect.iscoroutinefunction(fn):
        @functools.wraps(fn)
        async def async_wrapper(self, *args, **kwargs):
            start = time.perf_counter()
            try:
                result = await fn(self, *args, **kwargs)
            except Exception as e:
                _failed(start, e)
                raise
            _done(start, result)
            return result
        return async_wrapper

    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs):
        start = time.perf_counter()
        try:
            result = fn(self, *args, **kwargs)
        except Exception as e:
            _failed(start, e)
            raise
        _done(start, result)
        return result
    return wrapper


class AuralisEngine:
    """Handles a visitor message and returns the assistant's turn.

    One instance per process or worker. The knowledge store is injected so
    that its snapshot (and any refresh schedule) is owned by whoever builds
    the engine, not by module-level state.
    """

    def __init__(
        self,
        knowledge: KnowledgeStore,
        store: ConversationStore | None = None,
        escalation: BaseEscalation | None = None,
    ):
        self._knowledge = knowledge
        self._store = store or InMemoryConversationStore()
        self._escalation = escalation
        self._pending: set[asyncio.Task] = set()

    @property
    def knowledge(self) -> KnowledgeStore:
        return self._knowledge

    async def handle(
        self,
        message: str,
        session_id: str = "default",
        current_page: str | None = None,
    ) -> ChatTurn:
        """Process a visitor message and return the assistant's turn.

        History is appended before escalation detection, so the message count
        and intent history include the message being handled. Any escalation
        signal is forwarded in the background; the turn does not wait for it.
        """
        ctx = self._store.load(session_id)
        if current_page:
            ctx.current_page = current_page
        logger.info("Handling message for session %s: %s", session_id, _truncate(message, 120))

        intent = self.classify(message)
        reply = await self.respond(message, intent)
        ctx.record(message, intent)

        signal = self.detect_escalation(message, len(ctx.message_history), ctx.intent_history)
        next_steps = self.suggest(intent, ctx)
        if signal is not None:
            self._dispatch(signal)

        self._store.save(session_id, ctx)
        return ChatTurn(reply=reply, intent=intent, suggestions=next_steps, escalation=signal)

    def end_session(self, session_id: str) -> None:
        self._store.discard(session_id)

    @log_stage
    def classify(self, message: str) -> IntentClassification:
        return intents.classify(message)

    @log_stage
    async def respond(self, message: str, intent: IntentClassification) -> str:
        knowledge = await self._knowledge.load()
        return responses.build_response(message, intent, knowledge)

    @log_stage
    def detect_escalation(
        self,
        message: str,
        message_count: int,
        intent_history: Sequence[IntentClassification],
    ) -> EscalationSignal | None:
        return escalation_rules.detect_escalation(message, message_count, intent_history)

    @log_stage
    def suggest(self, intent: IntentClassification, context: ConversationContext | None) -> list[str]:
        return suggestions.suggest(intent, context)

    def welcome(self, current_page: str = "/") -> tuple[str, list[str]]:
        return suggestions.welcome(current_page)

    async def drain(self) -> None:
        """Wait for escalations still being delivered."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def _dispatch(self, signal: EscalationSignal) -> None:
        task = asyncio.create_task(self._notify(signal))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _notify(self, signal: EscalationSignal) -> None:
        logger.info("Escalation detected (%s): %s", signal.priority, signal.reason)
        if self._escalation is None:
            logger.info("No escalation channel configured; signal not forwarded.")
            return
        try:
            delivered = await asyncio.to_thread(self._escalation.escalate, signal)
        except Exception as e:
            logger.exception("Escalation channel raised: %s", e)
            return
        if not delivered:
            logger.warning("Escalation channel did not deliver signal: %s", signal.reason)
