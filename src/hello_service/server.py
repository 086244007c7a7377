"""Server bootstrap – bind the listening socket and run uvicorn.

The service is ``starting`` while the port is being bound and ``serving``
once uvicorn accepts connections on the bound socket. A bind failure is
fatal: it is logged and the process exits with status 1. SIGTERM or
SIGINT shut the server down gracefully with status 0.
"""

from __future__ import annotations

import logging
import signal
import socket
import sys

import uvicorn

from src.hello_service.config import Settings
from src.hello_service.main import configure_logging, create_app

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        super().__init__(f"Cannot bind {host}:{port}: {reason}")
        self.host = host
        self.port = port


def bind_socket(config: Settings) -> socket.socket:
    """Bind and listen on ``config.host:config.port``.

    Raises
    ------
    StartupError
        If the address is already in use or not permitted.
    """
    family = socket.AF_INET6 if ":" in config.host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((config.host, config.port))
        sock.listen(socket.SOMAXCONN)
    except OSError as exc:
        sock.close()
        raise StartupError(config.host, config.port, exc.strerror or str(exc)) from exc
    sock.set_inheritable(True)
    return sock


def serve(config: Settings) -> None:
    """Bind the port, then serve the application until terminated."""
    logger.info("Binding %s:%s …", config.host, config.port)
    sock = bind_socket(config)
    bound = config.model_copy(update={"port": sock.getsockname()[1]})
    server = uvicorn.Server(
        uvicorn.Config(
            create_app(bound),
            log_level=config.log_level.lower(),
        )
    )
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    if not server.started:
        raise StartupError(config.host, config.port, "server did not start")


def _ignore_signal(signum: int, _frame: object) -> None:
    logger.debug("Ignoring re-raised signal %s", signum)


def main() -> int:
    """Run the service; 0 on graceful shutdown, 1 if it could not start."""
    config = Settings()
    configure_logging(config)
    # uvicorn re-raises the shutdown signal once it has stopped
    previous = signal.signal(signal.SIGTERM, _ignore_signal)
    try:
        serve(config)
    except StartupError as exc:
        logger.error("❌ Startup failed: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        signal.signal(signal.SIGTERM, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())
