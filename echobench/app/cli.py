"""
Start the echo server.

Usage: echobench-echo --socket-address 127.0.0.1:9999
"""
import argparse
import sys
from typing import List, Optional

import uvicorn

from .config import SOCKET_ADDRESS, parse_socket_address


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="HTTP echo server")
    parser.add_argument(
        "-s", "--socket-address",
        default=SOCKET_ADDRESS,
        help="HOST:PORT to listen on (default %(default)s)"
    )
    args = parser.parse_args(argv)

    try:
        host, port = parse_socket_address(args.socket_address)
    except ValueError as e:
        parser.error(str(e))

    # Logging is configured by the app module; keep uvicorn from replacing it
    uvicorn.run("echobench.app.main:app", host=host, port=port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
