"""
FastAPI application for the YouTube Transcript Summarizer.
"""

import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.api.routes import router
from app.utils.error_handling import SummarizerError, error_envelope
from app.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for fetching YouTube transcripts and summarizing them with an LLM",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Report provider configuration on application startup."""
    config.initialize()
    logging.info(f"{config.APP_NAME} v{config.APP_VERSION} started")


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(SummarizerError)
async def summarizer_exception_handler(request: Request, exc: SummarizerError):
    """Render proxy errors as the JSON error envelope."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported as missing input."""
    logging.error(f"Request processing error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=error_envelope("Request processing failed", "Request body must be a JSON object"),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_envelope("Request processing failed", str(exc) or "Internal server error"),
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube Transcript Summarizer API",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint reporting which provider keys are configured."""
    return {"status": "healthy", "providers": config.get_providers()}
