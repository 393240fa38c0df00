"""Entry point for serving the LTRegistrator API.

Intended to be executed from the project root, e.g. under Docker,
where only a single Python file is specified.  Configuration such as
``DATABASE_URL``, ``SECRET_KEY`` and ``LOG_LEVEL`` is read from the
environment by ``ltregistrator_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from ltregistrator_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables ``HOST`` and
    ``PORT``.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
