import os

import pytest

from chat_engine.models import EscalationSignal
from clients.discord import DiscordWebhookClient
from escalation import DiscordEscalation


@pytest.mark.integration
def test_discord_escalation_send():
    """Integration test: posts a real escalation embed to a Discord webhook.
    Requires DISCORD_WEBHOOK_URL (and optionally DISCORD_ROLE_ID) to be set
    (e.g. in .env). Fails if the webhook URL is missing."""
    webhook_url = os.getenv("DISCORD_WEBHOOK_URL", "")
    assert webhook_url, "DISCORD_WEBHOOK_URL environment variable is required for integration test"

    client = DiscordWebhookClient(webhook_url=webhook_url, role_id=os.getenv("DISCORD_ROLE_ID", ""))
    escalation = DiscordEscalation(client, message_prefix="[integration test]")
    signal = EscalationSignal(
        reason="Integration test",
        priority="medium",
        context_summary="Integration test – safe to ignore",
    )

    assert escalation.escalate(signal) is True
