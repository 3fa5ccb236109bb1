"""Launcher for the Blog GraphQL API.

Starts the FastAPI application under Uvicorn.  Host, port and log level
come from the same environment variables as the application settings
(``HOST``, ``PORT``, ``LOG_LEVEL``); see ``blog_graphql_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from blog_graphql_api.app.core.config import settings
from blog_graphql_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
