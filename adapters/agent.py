"""Entrypoint: serve the Auralis engine over the uagents chat protocol."""

import logging
import os
import sys

from adapters.uagents_agent import create_agent
from adapters.wiring import build_engine
from tenant import load_tenant


def main() -> None:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    tenant = load_tenant(os.environ.get("TENANT_CONFIG", ""))
    if not tenant.agent_seed:
        sys.exit("The uagents adapter needs env.agent_seed_env_key in the tenant config.")

    engine, _ = build_engine(tenant)
    agent = create_agent(tenant.agent_seed, engine, name=tenant.assistant_name)
    agent.run()


if __name__ == "__main__":
    main()
