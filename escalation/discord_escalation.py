"""Discord escalation: notifies the sales team via webhook."""

import logging

from clients.discord import DiscordWebhookClient
from chat_engine.models import EscalationSignal
from escalation.base_escalation import BaseEscalation

logger = logging.getLogger(__name__)

PRIORITY_COLORS = {
    "high": "e03e2d",
    "medium": "f5a623",
}


class DiscordEscalation(BaseEscalation):
    """Escalates by posting an embed to a Discord channel via webhook."""

    def __init__(self, client: DiscordWebhookClient, message_prefix: str = ""):
        self._client = client
        self._message_prefix = message_prefix

    def escalate(self, signal: EscalationSignal) -> bool:
        headline = f"[{signal.priority.upper()}] {signal.reason}"
        if self._message_prefix:
            headline = f"{self._message_prefix} {headline}"

        fields = {"Priority": signal.priority}
        fields.update({str(k): str(v) for k, v in signal.user_details.items()})

        try:
            response = self._client.send(
                headline,
                title=signal.reason,
                description=signal.context_summary,
                color=PRIORITY_COLORS.get(signal.priority, "808080"),
                fields=fields,
            )
        except Exception as e:
            logger.exception("Discord escalation failed: %s", e)
            return False

        if response.status_code in (200, 204):
            logger.info("Discord escalation succeeded (status %d)", response.status_code)
            return True
        logger.warning("Discord escalation returned unexpected status %d", response.status_code)
        return False
