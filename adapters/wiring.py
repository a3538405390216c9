"""Build the engine and its collaborators from a site config."""

from chat_engine.engine import AuralisEngine
from chat_engine.knowledge import KnowledgeStore
from chat_engine.store import InMemoryConversationStore
from clients.discord import DiscordWebhookClient
from clients.supabase_db import SupabaseChatRepository
from escalation import DiscordEscalation
from tenant import TenantConfig


def build_engine(tenant: TenantConfig) -> tuple[AuralisEngine, SupabaseChatRepository]:
    repository = SupabaseChatRepository(
        tenant.supabase_url,
        tenant.supabase_key,
        knowledge_table=tenant.knowledge_table,
    )

    escalation = None
    if tenant.escalation is not None:
        discord_client = DiscordWebhookClient(
            tenant.escalation.discord_webhook_url,
            tenant.escalation.discord_role_id,
            timeout=tenant.escalation.timeout_seconds,
        )
        escalation = DiscordEscalation(discord_client, tenant.escalation.message_prefix)

    engine = AuralisEngine(
        knowledge=KnowledgeStore(repository.fetch_knowledge_entries),
        store=InMemoryConversationStore(
            max_sessions=tenant.max_sessions,
            idle_ttl_seconds=tenant.session_idle_ttl_seconds,
        ),
        escalation=escalation,
    )
    return engine, repository
