"""Local terminal chatbot: type in the terminal, get Auralis responses."""

import asyncio
import logging
import os

from adapters.wiring import build_engine
from chat_engine.engine import AuralisEngine, DEFAULT_FALLBACK
from tenant import load_tenant

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = getattr(logging, os.getenv("LOG_LEVEL", "ERROR").upper(), logging.ERROR)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


async def chat_loop(engine: AuralisEngine, assistant_name: str, page: str = "/") -> None:
    message, suggestions = engine.welcome(page)
    print(f"{assistant_name}: {message}")
    print(f"  Try: {' | '.join(suggestions)}")
    print("Type 'quit' or 'exit' to stop.\n")

    while True:
        try:
            user_input = input("You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye.")
            break
        if not user_input:
            continue
        if user_input.lower() in ("quit", "exit", "q"):
            print("Bye.")
            break

        try:
            turn = await engine.handle(user_input, session_id="local", current_page=page)
        except Exception:
            logger.exception("Error handling message")
            print(f"{assistant_name}: {DEFAULT_FALLBACK}\n")
            continue

        print(f"{assistant_name}: {turn.reply}")
        print(f"  Try: {' | '.join(turn.suggestions)}")
        if turn.escalation is not None:
            print(f"  (escalated, {turn.escalation.priority}: {turn.escalation.reason})")
        print()

    engine.end_session("local")
    await engine.drain()


def main() -> None:
    _configure_logging()
    tenant = load_tenant(os.environ.get("TENANT_CONFIG", ""))
    engine, _ = build_engine(tenant)
    asyncio.run(chat_loop(engine, tenant.assistant_name, os.getenv("CHAT_PAGE", "/")))


if __name__ == "__main__":
    main()
