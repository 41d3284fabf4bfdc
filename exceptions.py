"""
Beacon - Exceptions raised during startup.
server.main is the only place that turns them into an exit status.
"""


class BeaconError(Exception):
    """Base class for all Beacon errors."""


class ConfigurationError(BeaconError):
    """Invalid startup configuration (port argument or environment)."""


class BindError(BeaconError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, cause: OSError):
        self.host = host
        self.port = port
        self.cause = cause
        super().__init__(f"Failed to start server on {host}:{port}: {cause.strerror or cause}")
