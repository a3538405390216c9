"""Uagents chat protocol adapter: receives messages, answers them with the Auralis engine."""

from datetime import datetime, timezone
from uuid import uuid4

from uagents import Context, Protocol, Agent
from uagents_core.contrib.protocols.chat import (
    ChatAcknowledgement,
    ChatMessage,
    EndSessionContent,
    TextContent,
    chat_protocol_spec,
)

from chat_engine.engine import AuralisEngine, DEFAULT_FALLBACK


def create_agent(
    agent_seed: str,
    engine: AuralisEngine,
    *,
    name: str = "Auralis",
    port: int = 8001,
):
    """Build and return a uagents Agent that answers chat messages with the given engine."""
    agent = Agent(
        name=name,
        seed=agent_seed,
        port=port,
        mailbox=True,
        publish_agent_details=True,
    )
    protocol = Protocol(spec=chat_protocol_spec)

    @protocol.on_message(ChatMessage)
    async def handle_message(ctx: Context, sender: str, msg: ChatMessage):
        await ctx.send(
            sender,
            ChatAcknowledgement(timestamp=datetime.now(timezone.utc), acknowledged_msg_id=msg.msg_id),
        )

        text = ""
        for item in msg.content:
            if isinstance(item, TextContent):
                text += item.text

        response = DEFAULT_FALLBACK
        if text.strip():
            try:
                turn = await engine.handle(text, session_id=sender)
                response = turn.reply
                if turn.suggestions:
                    response += "\n\nYou could also: " + ", ".join(turn.suggestions)
            except Exception:
                ctx.logger.exception("Error handling message")

        await ctx.send(
            sender,
            ChatMessage(
                timestamp=datetime.now(timezone.utc),
                msg_id=uuid4(),
                content=[
                    TextContent(type="text", text=response),
                    EndSessionContent(type="end-session"),
                ],
            ),
        )

    @protocol.on_message(ChatAcknowledgement)
    async def handle_ack(ctx: Context, sender: str, msg: ChatAcknowledgement):
        pass

    agent.include(protocol, publish_manifest=True)
    return agent
