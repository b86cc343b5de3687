"""
Server configuration.
Uses .env and environment variables.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env file (only relevant in production)
load_dotenv()


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime settings for the MCP server."""

    host: str
    port: int
    transport: str
    log_level: str


def get_settings() -> Settings:
    """Reads settings from the environment."""
    port = os.getenv("MCP_PORT", "8000")
    try:
        port_int = int(port)
    except ValueError:
        raise ValueError(f"MCP_PORT must be an integer, got {port!r}") from None

    return Settings(
        host=os.getenv("MCP_HOST", "0.0.0.0"),
        port=port_int,
        transport=os.getenv("MCP_TRANSPORT", "streamable-http"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
