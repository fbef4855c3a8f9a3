"""
FastAPI application and API routes for calcyard.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from calcyard import __version__
from calcyard.config import settings
from calcyard.editor import ExpressionEditor
from calcyard.engine import evaluate, trace
from calcyard.errors import EvaluationError
from calcyard.formatting import format_result
from calcyard.log import configure_logging
from calcyard.models import (
    EditorState,
    ErrorResponse,
    EvaluateRequest,
    EvaluateResponse,
    KeysRequest,
    PostfixResponse,
    TokenModel,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging(settings.log_level, settings.log_json)
    logger.info("API started", app_name=settings.app_name, version=__version__)
    yield


app = FastAPI(
    title="calcyard",
    description="Arithmetic expression evaluator",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EvaluationError)
async def evaluation_error_handler(request: Request, exc: EvaluationError):
    body = ErrorResponse(kind=exc.kind, message=exc.message)
    return JSONResponse(status_code=422, content=body.model_dump(mode="json"))


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/api/v1/config")
async def get_config():
    """Get public configuration."""
    return {
        "app_name": settings.app_name,
        "result_precision": settings.result_precision,
        "preview_placeholder": settings.preview_placeholder,
        "error_placeholder": settings.error_placeholder,
    }


# =============================================================================
# Evaluation API
# =============================================================================

@app.post(
    "/api/v1/evaluate",
    response_model=EvaluateResponse,
    responses={422: {"model": ErrorResponse}},
)
async def evaluate_expression(request: EvaluateRequest):
    """Evaluate an infix expression."""
    result = evaluate(request.expression)
    return EvaluateResponse(
        expression=request.expression,
        result=result,
        display=format_result(result),
    )


@app.post(
    "/api/v1/postfix",
    response_model=PostfixResponse,
    responses={422: {"model": ErrorResponse}},
)
async def postfix_expression(request: EvaluateRequest):
    """Show the tokens and postfix order used to evaluate an expression."""
    stages = trace(request.expression)
    return PostfixResponse(
        expression=stages.expression,
        tokens=[TokenModel(kind=t.kind, text=t.text) for t in stages.tokens],
        postfix=[TokenModel(kind=t.kind, text=t.text) for t in stages.postfix],
        result=stages.result,
    )


# =============================================================================
# Editor API
# =============================================================================

@app.post("/api/v1/editor/keys", response_model=EditorState)
async def replay_keys(request: KeysRequest):
    """Apply keyboard keys to an expression and return the editor state."""
    editor = ExpressionEditor(request.expression)
    for key in request.keys:
        editor.handle_key(key)
    return editor.snapshot()
