"""Entry point for the planet API server.

This script starts the FastAPI application under Uvicorn on the fixed
port 3000.  It is intended to be executed from the project root, for
example in Docker where you only specify a single Python file to run.

Connection settings (``MONGO_URI``, ``MONGO_USERNAME``,
``MONGO_PASSWORD``) and the environment label (``APP_ENV``) are read
from the environment; see ``planet_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from planet_api.app.core.config import settings
from planet_api.app.main import app


async def serve() -> None:
    """Run the API until interrupted.

    If the store is unreachable at startup, Uvicorn aborts and this
    coroutine raises ``SystemExit``.
    """
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    logging.getLogger(__name__).info("Starting server on port %s", settings.port)
    await server.serve()
    if not server.started:
        raise SystemExit(1)


def main() -> None:
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
