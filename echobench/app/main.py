"""FastAPI echo server: answers every request with the request itself."""
from fastapi import FastAPI, HTTPException, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from ..logging_config import get_logger, setup_logging
from .config import SERVICE_VERSION
from .echo import decode_request, read_raw_request
from .metrics import echoed_bytes, service_info
from .middleware import ObservabilityMiddleware

setup_logging(component="echo-server")
logger = get_logger(__name__)

ECHO_METHODS = ["CONNECT", "DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT", "TRACE"]
READ_METHODS = ("GET", "HEAD")

app = FastAPI(
    title="echobench echo server",
    description="Echoes each raw HTTP request back as text/plain",
    version=SERVICE_VERSION
)

app.add_middleware(ObservabilityMiddleware)


def require_read(request: Request):
    if request.method not in READ_METHODS:
        raise HTTPException(
            status_code=405,
            detail="Method Not Allowed",
            headers={"Allow": ", ".join(READ_METHODS)}
        )


@app.on_event("startup")
async def startup_event():
    service_info.info({"version": SERVICE_VERSION})
    logger.info("Echo server started", extra={"version": SERVICE_VERSION})


# Both accept every method so requests to them are never echoed
@app.api_route("/healthz", methods=ECHO_METHODS)
async def health(request: Request):
    """Health check endpoint."""
    require_read(request)
    return {"status": "healthy"}


@app.api_route("/metrics", methods=ECHO_METHODS)
async def metrics(request: Request):
    """Prometheus scrape endpoint."""
    require_read(request)
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.api_route("/{path:path}", methods=ECHO_METHODS)
async def echo(request: Request):
    """
    Echo the raw request.

    Example:
        POST /endpoint HTTP/1.1
        content-length: 4

        BODY

    comes back as a text/plain body holding exactly those bytes.
    """
    raw = await read_raw_request(request)
    try:
        decode_request(raw)
    except UnicodeDecodeError as e:
        logger.warning(
            "Rejected request with invalid UTF-8",
            extra={"method": request.method, "path": request.url.path, "error": str(e)}
        )
        raise HTTPException(status_code=400, detail=f"Invalid UTF-8 sequence: {e}")

    echoed_bytes.labels(method=request.method).observe(len(raw))
    return Response(content=raw, headers={"Content-Type": "text/plain"})
