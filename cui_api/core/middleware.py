import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from .config import Config


logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0
VALIDATE_PREFIX = "/validate/"
REQUEST_ID_HEADER = "X-Request-ID"


def cors_headers(origin: str | None) -> dict[str, str]:
    """CORS headers for responses built outside CORSMiddleware (the 500 handler)."""
    if not origin or origin not in Config.allowed_origins():
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ", ".join(Config.CORS_ALLOW_METHODS),
        "Access-Control-Allow-Headers": "*",
    }


def request_log_level(path: str, status_code: int, process_time: float) -> int:
    """Pick the level a finished request is logged at.

    A 400 from /validate/ is the normal "Invalid CUI" answer, not a failure,
    so it stays at DEBUG like any fast successful request.
    """
    if status_code >= 500:
        return logging.ERROR
    if process_time > SLOW_REQUEST_SECONDS:
        return logging.INFO
    if status_code == 400 and path.startswith(VALIDATE_PREFIX):
        return logging.DEBUG
    if status_code >= 400:
        return logging.INFO
    return logging.DEBUG


async def log_requests(request: Request, call_next: Callable) -> Response:
    start_time = time.time()
    request_id = request.headers.get(REQUEST_ID_HEADER) or f"{int(start_time * 1000)}-{id(request)}"
    request.state.request_id = request_id

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"[{request_id}] {request.method} {request.url.path} - ERROR: {e} ({type(e).__name__}) - {time.time() - start_time:.2f}s")
        raise

    process_time = time.time() - start_time
    level = request_log_level(request.url.path, response.status_code, process_time)
    logger.log(level, f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None) or f"{int(time.time() * 1000)}-{id(request)}"
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {exc}", exc_info=True)

    headers = cors_headers(request.headers.get("origin"))
    headers[REQUEST_ID_HEADER] = request_id
    return JSONResponse(status_code=500, content={"detail": "Internal server error"}, headers=headers)
