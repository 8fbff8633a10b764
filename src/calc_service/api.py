"""
FastAPI application and API routes for Calc Service.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calc_service import __version__
from calc_service.config import settings
from calc_service.engine import EvaluationError, evaluate_expression
from calc_service.log import configure_logging
from calc_service.models import CalculateRequest, CalculateResponse, ErrorResponse

logger = structlog.get_logger()

INVALID_BODY = "Invalid request body"
METHOD_NOT_ALLOWED = "method not allowed"
INTERNAL_ERROR = "internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging(settings.log_level)
    logger.info(
        "Calc Service starting",
        tokenization_mode=settings.tokenization_mode.value,
        min_expression_length=settings.min_expression_length,
    )
    yield


app = FastAPI(
    title=settings.app_name,
    description="Arithmetic expression evaluation service",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(EvaluationError)
async def evaluation_error_handler(request: Request, exc: EvaluationError) -> JSONResponse:
    """Convert evaluation errors to 422 Unprocessable Entity."""
    return _error(422, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or a missing expression field is a 400."""
    logger.warning("Rejected request body", path=request.url.path, errors=len(exc.errors()))
    return _error(400, INVALID_BODY)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap routing errors in the same error envelope."""
    if exc.status_code == 405:
        return _error(405, METHOD_NOT_ALLOWED)
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return _error(500, INTERNAL_ERROR)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


# =============================================================================
# Calculate API
# =============================================================================

@app.post(
    "/api/v1/calculate",
    response_model=CalculateResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def calculate(body: CalculateRequest) -> CalculateResponse:
    """Evaluate an arithmetic expression."""
    try:
        result = evaluate_expression(body.expression)
    except EvaluationError as e:
        logger.warning(
            "Evaluation failed",
            expression=body.expression,
            error_kind=e.kind.name,
            detail=e.detail,
        )
        raise

    logger.info("Evaluated expression", expression=body.expression, result=result)
    return CalculateResponse(result=result)
