import logging
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .core.config import Config
from .core.middleware import log_requests, global_exception_handler
from .core.uptime import ProcessClock
from .core.validation import validate_cui

logger = logging.getLogger(__name__)

VALID_RESPONSE = {"status": "valid", "message": "CUI is valid"}
INVALID_RESPONSE = {"status": "invalid", "message": "Invalid CUI"}

# Initialize FastAPI
app = FastAPI(
    title=Config.API_NAME,
    description=Config.API_DESCRIPTION,
    version=__version__,
    docs_url="/docs" if Config.ENVIRONMENT == "development" else None,
    redoc_url=None,
)
app.state.clock = ProcessClock.start()

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.allowed_origins(),
    allow_credentials=True,
    allow_methods=list(Config.CORS_ALLOW_METHODS),
    allow_headers=["*"],
)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/about")
async def about():
    """Return details about the API."""
    return {
        "name": Config.API_NAME,
        "description": Config.API_DESCRIPTION,
        "author": Config.API_AUTHOR,
    }


@app.get("/uptime")
async def uptime(request: Request):
    """Report that the service is online and how long it has been running."""
    clock: ProcessClock = request.app.state.clock
    return {"status": "online", "uptime_seconds": clock.uptime_seconds()}


@app.get("/validate/{cui}")
async def validate(cui: str):
    """Validate a CUI: 200 when the check digit matches, 400 otherwise."""
    if validate_cui(cui):
        return JSONResponse(status_code=200, content=VALID_RESPONSE)
    return JSONResponse(status_code=400, content=INVALID_RESPONSE)


@app.get("/health")
async def health_check():
    """Liveness probe; the service has no external dependencies to check."""
    return {
        "status": "healthy",
        "service": "cui-validator-api",
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": Config.API_NAME,
        "version": __version__,
        "endpoints": {
            "about": "/about",
            "uptime": "/uptime",
            "validate": "/validate/{cui}",
            "health": "/health"
        },
        "timestamp": datetime.now().isoformat(),
        "description": Config.API_DESCRIPTION
    }
