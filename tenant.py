"""Site config loader.

Each site running the assistant has a YAML file under tenants/ that declares
non-secret config inline and references secret values by env var name. Call
load_tenant() with the path from the TENANT_CONFIG environment variable.

Usage:
    tenant = load_tenant(os.environ.get("TENANT_CONFIG", ""))
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()


@dataclass
class EscalationConfig:
    discord_webhook_url: str
    discord_role_id: str
    message_prefix: str
    timeout_seconds: float = 10.0


@dataclass
class TenantConfig:
    tenant_id: str
    assistant_name: str
    supabase_url: str
    supabase_key: str
    knowledge_table: str
    knowledge_refresh_seconds: int | None
    escalation: EscalationConfig | None
    agent_seed: str
    host: str
    port: int
    max_sessions: int = 1000
    session_idle_ttl_seconds: float = 1800.0


def load_tenant(config_path: str) -> TenantConfig:
    """Load and validate a site config from a YAML file.

    Secrets are never stored in the YAML; the YAML holds the env var *name*
    and this function resolves the actual value from the environment. Exits
    with a clear error message if TENANT_CONFIG is unset, the file is missing,
    or a referenced env var is not set. The escalation section and the agent
    seed are optional.
    """
    if not config_path:
        sys.exit("TENANT_CONFIG environment variable is not set.")

    path = Path(config_path)
    if not path.exists():
        sys.exit(f"Tenant config file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    def _env(key_name: str) -> str:
        val = (os.environ.get(key_name) or "").strip()
        if not val:
            sys.exit(f"Missing required env var '{key_name}' (referenced in {path})")
        return val

    env = raw.get("env", {})
    db = raw.get("supabase", {})
    server = raw.get("server", {})
    sessions = raw.get("sessions", {})

    escalation = None
    discord = raw.get("escalation", {}).get("discord_webhook")
    if discord:
        escalation = EscalationConfig(
            discord_webhook_url=_env(discord["webhook_url_env_key"]),
            discord_role_id=str(discord.get("mention_role_id", "")),
            message_prefix=discord.get("message_prefix", ""),
            timeout_seconds=float(discord.get("timeout_seconds", 10.0)),
        )

    seed_key = env.get("agent_seed_env_key")
    refresh = db.get("knowledge_refresh_seconds")

    return TenantConfig(
        tenant_id=raw["tenant_id"],
        assistant_name=raw.get("assistant", {}).get("name", raw["tenant_id"]),
        supabase_url=_env(env["supabase_url_env_key"]),
        supabase_key=_env(env["supabase_key_env_key"]),
        knowledge_table=db.get("knowledge_table", "knowledge_base"),
        knowledge_refresh_seconds=int(refresh) if refresh else None,
        escalation=escalation,
        agent_seed=_env(seed_key) if seed_key else "",
        host=server.get("host", "127.0.0.1"),
        port=int(server.get("port", 8000)),
        max_sessions=int(sessions.get("max_sessions", 1000)),
        session_idle_ttl_seconds=float(sessions.get("idle_ttl_seconds", 1800)),
    )
