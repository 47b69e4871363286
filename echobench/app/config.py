"""Echo server settings."""
import os
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SOCKET_ADDRESS = "127.0.0.1:9999"

SOCKET_ADDRESS = os.getenv("ECHO_SOCKET_ADDRESS", DEFAULT_SOCKET_ADDRESS)
SERVICE_VERSION = "0.1.0"


def parse_socket_address(value: str) -> Tuple[str, int]:
    """
    Split "host:port" (or "[v6-host]:port") into its parts.

    Raises:
        ValueError: if the port is missing or out of range
    """
    host, sep, port = value.strip().rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"Invalid socket address {value!r}, expected HOST:PORT")

    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f"Port out of range in socket address {value!r}")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port_number
