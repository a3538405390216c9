"""FastAPI adapter: the chat endpoint the website widget talks to."""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, ConfigDict, Field

from chat_engine.engine import AuralisEngine
from clients.supabase_db import SupabaseChatRepository

logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    session_id: Optional[str] = Field(None, alias="sessionId")
    current_page: Optional[str] = Field(None, alias="currentPage")


async def word_chunks(text: str) -> AsyncIterator[str]:
    """Yield each space-separated word followed by a single space."""
    for word in text.split(" "):
        yield word + " "
        await asyncio.sleep(0)


def create_app(
    engine: AuralisEngine,
    repository: SupabaseChatRepository | None = None,
    *,
    refresh_seconds: int | None = None,
) -> FastAPI:
    """Build the chat API around an engine and an optional transcript repository."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        scheduler = None
        if refresh_seconds:
            scheduler = AsyncIOScheduler()
            scheduler.add_job(
                engine.knowledge.refresh,
                "interval",
                seconds=refresh_seconds,
                id="knowledge-refresh",
            )
            scheduler.start()
            logger.info("Knowledge refresh scheduled every %ds", refresh_seconds)
        yield
        if scheduler is not None:
            scheduler.shutdown(wait=False)
        await engine.drain()

    app = FastAPI(title="Auralis Chat API", lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        # Unparseable bodies and non-string messages get the same answer as a missing message
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse({"error": "Message is required"}, status_code=400)

    async def _resolve_session(session_id: str | None) -> str:
        if session_id:
            return session_id
        if repository is not None:
            created = await asyncio.to_thread(repository.create_session)
            if created:
                return str(created)
        return f"session-{int(time.time() * 1000)}"

    async def _save(session_id: str, sender: str, content: str) -> None:
        if repository is not None:
            await asyncio.to_thread(repository.save_message, session_id, sender, content)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "knowledge_loaded": engine.knowledge.loaded}

    @app.get("/api/chat/welcome")
    async def chat_welcome(page: str = Query("/", description="Current page path")):
        message, suggestions = engine.welcome(page)
        return {"message": message, "suggestions": suggestions}

    @app.post("/api/chat")
    async def chat(request: ChatRequest):
        if not request.message:
            return JSONResponse({"error": "Message is required"}, status_code=400)

        try:
            session_id = await _resolve_session(request.session_id)
            await _save(session_id, "user", request.message)
            turn = await engine.handle(
                request.message,
                session_id=session_id,
                current_page=request.current_page,
            )
            await _save(session_id, "bot", turn.reply)
        except Exception as e:
            logger.exception("Chat API error: %s", e)
            return JSONResponse(
                {"error": str(e) or "An unexpected error occurred"},
                status_code=500,
            )

        return StreamingResponse(
            word_chunks(turn.reply),
            media_type="text/plain; charset=utf-8",
            headers={"X-Session-ID": session_id},
        )

    return app
