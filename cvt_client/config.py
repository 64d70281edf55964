"""
Environment configuration for the node connection.

Variables:
    CVT_API_PROTOCOL   URL scheme (default "http")
    CVT_API_HOST       node host (default "localhost")
    CVT_API_PORT       node API port (default 14265)

An unset variable falls back to its default and logs a warning.
"""

from __future__ import annotations

import logging
import os

from cvt_client.transport import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_PROTOCOL

logger = logging.getLogger(__name__)

ENV_PROTOCOL = "CVT_API_PROTOCOL"
ENV_HOST = "CVT_API_HOST"
ENV_PORT = "CVT_API_PORT"


def env(name: str, default: str) -> str:
    """Read an environment variable, falling back to ``default``."""
    value = os.environ.get(name)
    if value is None:
        logger.warning(
            "Environment variable '%s' is not defined, and actual value has not "
            "been specified. Rolling back to default value: '%s'",
            name,
            default,
        )
        return default
    return value


def load_transport_settings() -> dict[str, object]:
    """Read protocol, host and port from the environment.

    Raises:
        ValueError: CVT_API_PORT is set but is not an integer.
    """
    raw_port = env(ENV_PORT, str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"{ENV_PORT} must be an integer, got {raw_port!r}") from None
    return {
        "protocol": env(ENV_PROTOCOL, DEFAULT_PROTOCOL),
        "host": env(ENV_HOST, DEFAULT_HOST),
        "port": port,
    }
