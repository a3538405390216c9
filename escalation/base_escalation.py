"""Abstract escalation contract."""

from abc import ABC, abstractmethod

from chat_engine.models import EscalationSignal


class BaseEscalation(ABC):
    """Contract for escalation channels.

    The engine only detects that a human should step in; a channel delivers
    the signal somewhere a human will see it (a Discord channel, an inbox).
    Channels run in a worker thread, so blocking I/O is fine here.
    """

    @abstractmethod
    def escalate(self, signal: EscalationSignal) -> bool:
        """Deliver the signal and report whether it got through.

        Delivery failures should be logged and reported as ``False`` rather
        than raised; the visitor's reply never depends on this call.
        """
        ...
