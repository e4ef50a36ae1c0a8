"""FastAPI application entry point.

This module wires together the API routers, configures logging and
startup tasks, and exposes the ASGI application object used by the
server (``uvicorn app.main:app``).
"""

import os
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.routes import quizzes, questions, attempts, health
from app.database import create_db_and_tables

# Basic logging configuration.  The log level can be controlled with an
# environment variable so deployments can adjust verbosity without code
# changes.
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL))
logger = logging.getLogger(__name__)

app = FastAPI(title="Quiz Game API")


@app.on_event("startup")
async def on_startup():
    """Create any missing tables before serving requests."""

    await create_db_and_tables()
    logger.info("Database ready")


app.include_router(quizzes.router)
app.include_router(questions.router)
app.include_router(attempts.router)
app.include_router(health.router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler that logs the stack trace once."""
    logger.exception("Unhandled error during request %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "code": "internal_server_error",
            "message": "An unexpected error occurred",
        },
    )
