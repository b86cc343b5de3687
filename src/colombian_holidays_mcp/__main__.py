"""
Entry point for the Colombian holidays MCP server.
"""

import logging

from . import mcp
from .config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Starts the server for local development."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.transport == "stdio":
        mcp.run(transport="stdio")
        return

    logger.info("Server running at http://%s:%d", settings.host, settings.port)

    # Start the FastMCP server with HTTP transport
    mcp.run(transport=settings.transport, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
