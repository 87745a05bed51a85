"""FastAPI application for the swap calculator."""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from swapcalc import __version__
from swapcalc.amm import get_default_engine
from swapcalc.api.endpoints import router
from swapcalc.log import configure_logging

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SWAPCALC_HOST", "0.0.0.0")
PORT = int(os.environ.get("SWAPCALC_PORT", "8000"))
DEBUG = os.environ.get("SWAPCALC_DEBUG", "false").lower() in ("true", "1", "yes")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("SWAPCALC_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Swap Calculator",
    description="Constant-product AMM swap quotes",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report schema errors as 400 instead of FastAPI's default 422."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.warning("invalid_request_body", path=request.url.path, error_count=len(errors))
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request body", "errors": errors},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "fee_rate": get_default_engine().fee_rate}


def run() -> None:
    """Run the swap API server.

    Configuration via environment variables:
    - SWAPCALC_HOST: Host to bind to (default: 0.0.0.0)
    - SWAPCALC_PORT: Port to bind to (default: 8000)
    - SWAPCALC_DEBUG: Enable debug logging and reload mode (default: false)
    - SWAPCALC_CORS_ORIGINS: Comma-separated allowed origins (default: *)
    - SWAP_FEE_RATE: Pool fee as a fraction (default: 0.003)
    """
    configure_logging(verbose=DEBUG)
    uvicorn.run(
        "swapcalc.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
