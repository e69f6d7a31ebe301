"""
calmsense API — Main Application

POST /analyze           — Classify one chat message
POST /analyze/batch     — Classify several messages
POST /screening/next    — Next C-SSRS screening question
POST /screening/assess  — Risk outcome from C-SSRS answers
GET  /patterns          — List the clinical pattern catalog
GET  /health            — Health check

Stateless. No message text is stored or logged.
"""

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from calmsense import __version__
from calmsense.config import settings
from calmsense.detector import scan_message
from calmsense.logging import setup_logging, get_logger
from calmsense.patterns import CONDITION_TABLES, CORE_VERSION
from calmsense.screening import (
    CrisisAssessment,
    ScreeningResponse,
    assess_screening_responses,
    crisis_response_message,
    next_screening_question,
)
from calmsense.schemas.scan import (
    AnalyzeRequest,
    AnalyzeBatchRequest,
    AnalyzeResponse,
    AnalyzeBatchResponse,
    ScreeningRequest,
    NextQuestionResponse,
    ScreeningOutcomeResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("calmsense API starting", extra={"core_version": CORE_VERSION})
    yield
    logger.info("calmsense API shutting down")


app = FastAPI(
    title="calmsense API",
    description="Rule-based anxiety, crisis and psychosis context classifier",
    version=f"{__version__} (core {CORE_VERSION})",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error_type": type(exc).__name__, "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The message could not be analyzed."},
    )


def _to_screening_responses(request: ScreeningRequest) -> list[ScreeningResponse]:
    return [ScreeningResponse(r.question_number, r.answer) for r in request.responses]


# ============================================================
# ROUTES
# ============================================================

@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """Run every detector over one message."""
    return await scan_message(request.text)


@app.post("/analyze/batch", response_model=AnalyzeBatchResponse)
async def analyze_batch(request: AnalyzeBatchRequest):
    """Analyze multiple messages concurrently."""
    results = await asyncio.gather(
        *[scan_message(item.text) for item in request.items],
        return_exceptions=True,
    )

    clean_results = []
    for r in results:
        if isinstance(r, dict):
            clean_results.append(r)
        else:
            logger.warning(
                "Batch item failed",
                extra={"error": str(r), "error_type": type(r).__name__},
            )
            clean_results.append(None)

    scanned = sum(1 for r in clean_results if r is not None)
    logger.info(
        f"Batch complete: {scanned}/{len(request.items)} analyzed",
        extra={"items": len(request.items), "scanned": scanned},
    )

    return {
        "results": clean_results,
        "total": len(request.items),
        "scanned": scanned,
    }


@app.post("/screening/next", response_model=NextQuestionResponse)
async def screening_next(request: ScreeningRequest):
    """Return the next C-SSRS question, or complete=True after the last one."""
    responses = _to_screening_responses(request)
    question = next_screening_question(responses)
    if question is None:
        return {"question": None, "question_number": None, "complete": True}
    return {
        "question": question,
        "question_number": len(responses) + 1,
        "complete": False,
    }


@app.post("/screening/assess", response_model=ScreeningOutcomeResponse)
async def screening_assess(request: ScreeningRequest):
    """Score C-SSRS answers and return the matching resource message."""
    outcome = assess_screening_responses(_to_screening_responses(request))
    triage = CrisisAssessment(
        risk_level=outcome.final_risk_level,
        requires_screening=False,
        reasoning="C-SSRS screening",
    )
    message = crisis_response_message(triage, outcome if outcome.should_alert else None)
    return {**outcome.to_dict(), "message": message}


@app.get("/patterns")
async def get_patterns():
    """Return the clinical pattern catalog, grouped by category."""
    categories = {
        key: {
            "threshold": threshold,
            "patterns": [
                {"description": p.description, "weight": p.weight}
                for p in patterns
            ],
        }
        for key, (patterns, threshold) in CONDITION_TABLES.items()
    }
    return {
        "core_version": CORE_VERSION,
        "total_patterns": sum(len(c["patterns"]) for c in categories.values()),
        "categories": categories,
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "core_version": CORE_VERSION,
        "categories": len(CONDITION_TABLES),
        "patterns": sum(len(patterns) for patterns, _ in CONDITION_TABLES.values()),
    }


# --- Version Headers Middleware ---
@app.middleware("http")
async def add_version_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Calmsense-Version"] = __version__
    response.headers["X-Core-Version"] = CORE_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


# --- Body Size Limit Middleware ---
_MAX_BODY_BYTES = 1_048_576  # 1 MB


@app.middleware("http")
async def enforce_body_size_limit(request: Request, call_next):
    """Reject requests exceeding 1MB."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > _MAX_BODY_BYTES:
                return JSONResponse(
                    status_code=413,
                    content={"detail": "Request body too large."},
                )
        except ValueError:
            pass  # Malformed content-length; let the framework handle it

    return await call_next(request)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)
