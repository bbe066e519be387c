"""Ascend server entry point — ``python -m ascend.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from ascend.core.config.settings import Settings, get_settings
from ascend.core.server.app import create_app

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def is_loopback_host(host: str) -> bool:
    """True for ``localhost`` and loopback IP literals."""
    if host == "localhost":
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def check_bind_host(settings: Settings) -> None:
    """Refuse non-loopback binds unless explicitly allowed (there is no auth layer).

    Raises:
        RuntimeError: If the configured host is not loopback and the
            override is not set.
    """
    if settings.ascend_allow_insecure_bind or is_loopback_host(settings.ascend_host):
        return
    raise RuntimeError(
        f"Refusing to bind the Ascend server to non-loopback host {settings.ascend_host!r}. "
        "Set ASCEND_ALLOW_INSECURE_BIND=true to override (unsafe)."
    )


def run() -> None:
    """Start the Ascend MCP server with Streamable HTTP transport."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.ascend_log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    check_bind_host(settings)

    logger = logging.getLogger(__name__)
    logger.info(
        "Starting Ascend Life Audit server on %s:%d",
        settings.ascend_host,
        settings.ascend_port,
    )

    create_app().run(
        transport="streamable-http",
        host=settings.ascend_host,
        port=settings.ascend_port,
    )


if __name__ == "__main__":
    run()
