"""
One-shot request against the target, printing what comes back.

Usage: echobench-probe [URL]
"""
import argparse
import sys
from typing import List, Optional

import requests

DEFAULT_URL = "http://localhost:9999"


def probe(url: str = DEFAULT_URL, timeout: float = 10.0) -> str:
    """
    GET the URL and return the response body.

    Raises:
        requests.RequestException: on connection errors or non-2xx status
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="GET the target once and print the body")
    parser.add_argument("url", nargs="?", default=DEFAULT_URL)
    args = parser.parse_args(argv)

    sys.stdout.write(probe(args.url))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
