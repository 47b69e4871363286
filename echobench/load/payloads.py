"""JSON bodies and headers sent by the load test users."""
import time
from typing import Optional

JSON_HEADERS = {"Content-Type": "application/json"}

RESOURCE_TYPE = "organization"
RESOURCE_ID = "1"
USER_ID = "2"

# Sent verbatim, byte for byte
STATIC_BODY = (
    '{ "user_id": "%s", "resource_type": "%s", "resource_id": "%s" }'
    % (USER_ID, RESOURCE_TYPE, RESOURCE_ID)
)

_TIMESTAMP_TEMPLATE = '{ "time": "%d", "resource_type": "%s", "resource_id": "%s" }'


def epoch_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def static_body() -> str:
    return STATIC_BODY


def timestamp_body(now_ms: Optional[int] = None) -> str:
    """Body carrying the current epoch milliseconds as a string field."""
    if now_ms is None:
        now_ms = epoch_millis()
    return _TIMESTAMP_TEMPLATE % (now_ms, RESOURCE_TYPE, RESOURCE_ID)


def headers() -> dict:
    """Fresh copy so callers can't mutate the shared header map."""
    return dict(JSON_HEADERS)
