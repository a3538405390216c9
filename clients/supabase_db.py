"""Supabase access for the chat widget: knowledge rows and chat transcripts."""

import logging

from supabase import Client, create_client

logger = logging.getLogger(__name__)


class SupabaseChatRepository:
    def __init__(
        self,
        url: str,
        service_role_key: str,
        knowledge_table: str = "knowledge_base",
        client: Client | None = None,
    ):
        self.client: Client = client or create_client(url, service_role_key)
        self.knowledge_table = knowledge_table

    # Knowledge base
    def fetch_knowledge_entries(self) -> list[dict]:
        """Fetch every knowledge row as ``{content, category}``; raises on failure."""
        response = self.client.table(self.knowledge_table).select("content, category").execute()
        return response.data or []

    # Chat transcripts
    def create_session(self) -> str | None:
        """Create a chat session row and return its id, or None if the database is unavailable"""
        try:
            response = self.client.table("chat_sessions").insert({}).execute()
            return response.data[0]["id"] if response.data else None
        except Exception as e:
            logger.warning("Database not available, using in-memory session: %s", e)
            return None

    def save_message(self, session_id: str, sender: str, content: str) -> bool:
        """Store one chat message; failures are logged and reported as False"""
        try:
            self.client.table("chat_messages").insert(
                {"session_id": session_id, "sender": sender, "content": content}
            ).execute()
            return True
        except Exception as e:
            logger.warning("Failed to save %s message for session %s: %s", sender, session_id, e)
            return False
