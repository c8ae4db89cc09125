"""
FastAPI application entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pennywise import __version__
from pennywise.config import settings
from pennywise.api.router import api_router
from pennywise.exceptions import IntegrityAmbiguity, TransportError, ValidationError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Spending trends and budget view models over a remote finance API",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(IntegrityAmbiguity)
async def handle_integrity_ambiguity(request: Request, exc: IntegrityAmbiguity):
    logger.warning(f"Ambiguous budgets on {request.url.path}: {exc.record_ids}")
    return JSONResponse(
        status_code=409,
        content={"detail": str(exc), "record_ids": exc.record_ids}
    )


@app.exception_handler(TransportError)
async def handle_transport_error(request: Request, exc: TransportError):
    # Remote rejections (bad credentials, unknown ids) pass through, everything else is a bad gateway
    if exc.status_code is not None and 400 <= exc.status_code < 500:
        status_code = exc.status_code
    else:
        status_code = 502
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "running"
    }


@app.get("/api/v1/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app_name": settings.app_name
    }


def run():
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("pennywise.main:app", host=settings.api_host, port=settings.api_port)
