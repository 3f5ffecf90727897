"""
Startup configuration for the checkpoint service and the gateway.
"""

import logging
import os

logger = logging.getLogger(__name__)

CHECKPOINT_DEFAULT_PORT = 4567
GATEWAY_DEFAULT_PORT = 9292
DEFAULT_HOST = "0.0.0.0"  # nosec B104 # both services listen on all interfaces


class ServerConfig:
    """
    Bind address for one service, built once at startup and passed to the runner.
    """

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port

    def __repr__(self) -> str:
        return f"ServerConfig(host={self.host!r}, port={self.port})"

    @classmethod
    def from_env(cls, prefix: str, default_port: int) -> "ServerConfig":
        """
        Reads <PREFIX>_HOST and <PREFIX>_PORT, falling back to the defaults.

        Raises:
            ValueError: if the port is not an integer in 1..65535
        """
        host = os.environ.get(f"{prefix}_HOST") or DEFAULT_HOST
        raw_port = os.environ.get(f"{prefix}_PORT")
        if not raw_port:
            return cls(host, default_port)

        try:
            port = int(raw_port)
        except ValueError:
            logger.error(f"{prefix}_PORT is not an integer: {raw_port!r}")
            raise

        if not 0 < port < 65536:
            logger.error(f"{prefix}_PORT out of range: {port}")
            raise ValueError(f"{prefix}_PORT out of range: {port}")

        return cls(host, port)


def checkpoint_config() -> ServerConfig:
    return ServerConfig.from_env("CHECKPOINT", CHECKPOINT_DEFAULT_PORT)


def gateway_config() -> ServerConfig:
    return ServerConfig.from_env("GATEWAY", GATEWAY_DEFAULT_PORT)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
