"""Entrypoint: load the site config, wire layers, serve the chat HTTP API."""

import logging
import os

import uvicorn

from adapters.http_api import create_app
from adapters.wiring import build_engine
from tenant import load_tenant


def _configure_logging() -> None:
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    _configure_logging()
    tenant = load_tenant(os.environ.get("TENANT_CONFIG", ""))
    engine, repository = build_engine(tenant)
    app = create_app(
        engine,
        repository,
        refresh_seconds=tenant.knowledge_refresh_seconds,
    )
    uvicorn.run(app, host=tenant.host, port=tenant.port)


if __name__ == "__main__":
    main()
