"""
Prometheus metrics for the echo server.

- Request counts and latency
- Size of echoed requests
- Service info
"""
from prometheus_client import Counter, Histogram, Info

# Paths served by something other than the echo route, matched exactly
NAMED_ENDPOINTS = ("/healthz", "/metrics")

# ============================================
# Request Metrics
# ============================================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency',
    ['method', 'endpoint'],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0)
)

# ============================================
# Echo Metrics
# ============================================

echoed_bytes = Histogram(
    'echoed_bytes',
    'Size of echoed requests in bytes',
    ['method'],
    buckets=(64, 128, 256, 512, 1024, 4096, 16384, 65536)
)

# ============================================
# System Info
# ============================================

service_info = Info(
    'service_info',
    'Service version and metadata'
)


def endpoint_label(path: str) -> str:
    """Collapse echoed paths into one label so any path can't add a series."""
    return path if path in NAMED_ENDPOINTS else "echo"
