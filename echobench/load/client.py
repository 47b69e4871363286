"""
Request-issuing functions run once per virtual user iteration.

Each call builds a body and sends a single POST. The response is not
inspected and nothing is caught: failures are left to the runner, which
records them in its own statistics.
"""
from typing import Callable

from .config import DEFAULT_PATH
from .payloads import epoch_millis, headers, static_body, timestamp_body


def post_static(client, path: str = DEFAULT_PATH):
    """POST the constant user/resource body."""
    client.post(path, data=static_body(), headers=headers())


def post_timestamp(client, path: str = DEFAULT_PATH, clock: Callable[[], int] = epoch_millis):
    """POST a body stamped with the clock's epoch milliseconds."""
    client.post(path, data=timestamp_body(clock()), headers=headers())
