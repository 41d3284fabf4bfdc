"""
Beacon - Server entry point
Parses the port argument, binds the listening socket, prints the startup
banner and runs uvicorn until SIGINT or SIGTERM.

Usage:
    python server.py [port]
"""
import argparse
import signal
import socket
import sys
from typing import List, Optional

import uvicorn

from config import DEFAULT_PORT, HOST, LOG_LEVEL, SERVICE_NAME, SERVICE_VERSION, parse_port
from exceptions import BeaconError, BindError, ConfigurationError
from main import create_app
from models import ServiceState
from routers.info import ENDPOINTS

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


# ── Arguments ─────────────────────────────────────────────────────────────────

class _ArgumentParser(argparse.ArgumentParser):
    """Raises instead of exiting so main() decides the exit status."""

    def error(self, message: str):
        raise ConfigurationError(message)


def parse_args(argv: Optional[List[str]] = None) -> int:
    """Return the port to listen on: the single positional argument, else BEACON_PORT."""
    parser = _ArgumentParser(prog="beacon", description="Beacon web service")
    parser.add_argument(
        "port",
        nargs="?",
        type=parse_port,
        default=None,
        help=f"Port number to listen on, 1024-65535 (default: {DEFAULT_PORT})",
    )
    args = parser.parse_args(argv)
    if args.port is None:
        return parse_port(DEFAULT_PORT)
    return args.port


# ── Listener ──────────────────────────────────────────────────────────────────

class _UvicornServer(uvicorn.Server):
    """uvicorn server that reports caught signals back to its WebService."""

    def __init__(self, config: uvicorn.Config, service: "WebService"):
        super().__init__(config)
        self.service = service

    def handle_exit(self, sig: int, frame) -> None:
        super().handle_exit(sig, frame)
        self.service.stop(sig)


class WebService:
    """Owns the listening socket and the uvicorn server for one process run."""

    def __init__(self, port: int, host: str = HOST):
        self.host = host
        self.port = port
        self.state = ServiceState(service_name=SERVICE_NAME, version=SERVICE_VERSION, port=port)
        self.app = create_app(self.state)
        # No graceful drain: in-flight requests are cancelled on shutdown.
        config = uvicorn.Config(self.app, host=host, port=port, access_log=False,
                                log_level=LOG_LEVEL, timeout_graceful_shutdown=0)
        self.server = _UvicornServer(config, self)
        self.sock: Optional[socket.socket] = None
        self.stopped = False

    def bind(self) -> socket.socket:
        """Bind the listening socket. Raises BindError if the port is unavailable."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
        except OSError as exc:
            sock.close()
            raise BindError(self.host, self.port, exc) from exc
        sock.set_inheritable(True)
        self.sock = sock
        return sock

    def print_banner(self) -> None:
        print(f"🚀 Starting {self.state.service_name} v{self.state.version}", flush=True)
        print(f"📡 Server listening on {self.host}:{self.port}", flush=True)
        print(f"🌐 Access the service at http://localhost:{self.port}", flush=True)
        print("📋 Available endpoints:", flush=True)
        for path, description in ENDPOINTS.items():
            print(f"   {path:<10} {description}", flush=True)
        print("Press Ctrl+C to stop the server.\n", flush=True)

    def serve(self) -> None:
        """Serve until stop() is called. Binds first if bind() was not called."""
        sock = self.sock or self.bind()
        self.print_banner()
        try:
            self.server.run(sockets=[sock])
        finally:
            sock.close()
            self.sock = None
        print("🛑 Server stopped gracefully.", flush=True)

    def stop(self, signum: Optional[int] = None) -> None:
        """Ask uvicorn to stop accepting connections. Safe to call more than once."""
        if self.stopped:
            return
        self.stopped = True
        if signum is not None:
            print(f"\n📡 Received shutdown signal ({signal.Signals(signum).name})", flush=True)
        self.server.should_exit = True


def install_signal_handlers(service: WebService) -> None:
    """Route SIGINT/SIGTERM to ``service.stop``.

    uvicorn installs its own handlers while serving and restores these
    afterwards, re-raising any signal it caught; stop() ignores the repeat.
    """
    def _handler(signum, frame):
        service.stop(signum)

    for sig in SHUTDOWN_SIGNALS:
        signal.signal(sig, _handler)


# ── Entry point ───────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    try:
        port = parse_args(argv)
        service = WebService(port)
        service.bind()
    except BeaconError as exc:
        print(f"❌ {exc}", file=sys.stderr, flush=True)
        return 1

    install_signal_handlers(service)
    try:
        service.serve()
    except Exception as exc:
        print(f"❌ Server error: {exc}", file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
