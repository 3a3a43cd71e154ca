"""Command-line entry point: serve the demo app over HTTP."""

from __future__ import annotations

import argparse
import logging

from kandinsky.config import settings

logger = logging.getLogger(__name__)


def parse_addr(addr: str) -> tuple[str, int]:
    """Split ``host:port``; an empty host listens on every interface."""
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address {addr!r}")
    return host or "0.0.0.0", int(port)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="kandinsky demo server")
    parser.add_argument("--http", default=settings.http_addr, help="HTTP address to listen on (host:port)")
    args = parser.parse_args(argv)

    try:
        host, port = parse_addr(args.http)
    except ValueError as e:
        parser.error(str(e))

    import uvicorn

    from kandinsky.main import app

    logger.info("listening on %s", args.http)
    uvicorn.run(app, host=host, port=port, log_level=settings.kandinsky_log_level.lower())


if __name__ == "__main__":
    main()
