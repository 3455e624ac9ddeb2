"""
Server entry point.

Usage:
    python -m taskapi

Binds the listening socket before handing it to uvicorn so a port that cannot
be bound terminates the process with a logged error.
"""
from __future__ import annotations

import logging
import socket

import uvicorn

from .logging_setup import setup_logging
from .main import create_app
from .settings import Settings, get_settings

logger = logging.getLogger("taskapi")


# PUBLIC_INTERFACE
def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind and listen on host:port.

    Raises:
        SystemExit(1) if the address cannot be bound.
    """
    try:
        return socket.create_server((host, port))
    except OSError as e:
        logger.critical("Could not bind %s:%s: %s", host, port, e)
        raise SystemExit(1) from e


# PUBLIC_INTERFACE
def serve(settings: Settings) -> None:
    """Bind the configured address and run the server until interrupted."""
    sock = bind_socket(settings.host, settings.port)
    config = uvicorn.Config(
        app=create_app(),
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    server.run(sockets=[sock])


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    serve(settings)


if __name__ == "__main__":
    main()
