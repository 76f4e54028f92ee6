"""
LienPilot API

Texas construction lien deadline and eligibility service.
"""

import json
import logging
import os
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import lienpilot
from lienpilot.engine import LienEngine
from lienpilot.exceptions import LienPilotError, ValidationError
from lienpilot.packs import load_rules

from api.routes import deadlines, evaluate, report, rules
from api.schemas.responses import HealthResponse


# =============================================================================
# Configuration
# =============================================================================

LIENPILOT_LOG_LEVEL = os.getenv("LIENPILOT_LOG_LEVEL", "INFO")
LIENPILOT_RULES_PATH = os.getenv("LIENPILOT_RULES_PATH") or None
LIENPILOT_DOCS_ENABLED = os.getenv("LIENPILOT_DOCS_ENABLED", "true").lower() == "true"
LIENPILOT_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "LIENPILOT_CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173",
    ).split(",")
    if origin.strip()
]


# =============================================================================
# Logging
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        for key in ("request_id", "duration_ms", "validity", "days_remaining", "rules_version"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


logger = logging.getLogger("lienpilot")
logger.setLevel(getattr(logging, LIENPILOT_LOG_LEVEL.upper(), logging.INFO))
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

RULES_LOADED = False


# =============================================================================
# Lifespan
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the statute rule pack on startup."""
    global RULES_LOADED

    statute_rules = load_rules(LIENPILOT_RULES_PATH)
    engine = LienEngine(rules=statute_rules)

    # Share engine with routes
    evaluate.set_engine(engine)
    deadlines.set_engine(engine)
    report.set_engine(engine)
    rules.set_rules(statute_rules)
    RULES_LOADED = True

    logger.info(
        "LienPilot starting",
        extra={"request_id": "startup", "rules_version": statute_rules.version},
    )
    logger.info(f"Rule pack: {statute_rules.id} ({LIENPILOT_RULES_PATH or 'bundled'})")
    logger.info(f"Docs enabled: {LIENPILOT_DOCS_ENABLED}")

    yield

    logger.info("LienPilot shutting down")


# Create app
app = FastAPI(
    title="LienPilot API",
    description="""
**Texas construction lien deadline and eligibility engine.**

LienPilot turns questionnaire answers into a filing deadline, a claim
validity rating and an ordered action plan.

## Quick Start

1. `GET /rules` - See the active statute rule pack
2. `POST /evaluate` - Evaluate answers
3. `POST /deadlines` - Full deadline schedule
4. `POST /report` - Assessment report data
    """,
    version=lienpilot.__version__,
    lifespan=lifespan,
    docs_url="/docs" if LIENPILOT_DOCS_ENABLED else None,
    redoc_url="/redoc" if LIENPILOT_DOCS_ENABLED else None,
    openapi_url="/openapi.json" if LIENPILOT_DOCS_ENABLED else None,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=LIENPILOT_CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(evaluate.router)
app.include_router(deadlines.router)
app.include_router(report.router)
app.include_router(rules.router)


# =============================================================================
# Middleware
# =============================================================================

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id
    request.state.start_time = time.time()

    response = await call_next(request)

    # Add request ID to response headers
    response.headers["X-Request-ID"] = request_id

    return response


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Invalid answers: list every offending field."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info(
        f"Rejected answers: {', '.join(exc.fields)}",
        extra={"request_id": request_id},
    )
    return JSONResponse(
        status_code=422,
        content={**exc.to_dict(), "request_id": request_id},
    )


@app.exception_handler(LienPilotError)
async def lienpilot_error_handler(request: Request, exc: LienPilotError):
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(f"Evaluation failed: {exc}", extra={"request_id": request_id})
    return JSONResponse(
        status_code=500,
        content={**exc.to_dict(), "request_id": request_id},
    )


# =============================================================================
# Health Endpoints
# =============================================================================

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Liveness check."""
    return HealthResponse(
        status="ok",
        version=lienpilot.__version__,
        rules_loaded=RULES_LOADED,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
