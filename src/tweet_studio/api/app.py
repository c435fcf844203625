"""FastAPI application exposing tweet generation and stored results."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tweet_studio import __version__
from tweet_studio.exceptions import TweetStudioError, ValidationError
from tweet_studio.service import GenerationService
from tweet_studio.storage import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tweets"])


def get_service(request: Request) -> GenerationService:
    return request.app.state.service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.post("/generate-tweets")
def generate_tweets(
    payload: Any = Body(None),
    service: GenerationService = Depends(get_service),
):
    """Generate three tweet variants and store them."""
    result = service.generate_from_payload(payload)
    return {
        "success": True,
        "tweets": [t.to_dict() for t in result.tweets],
        "requestId": result.request_id,
    }


@router.get("/tweets")
def get_tweets(
    input: str | None = Query(None),
    service: GenerationService = Depends(get_service),
):
    """List stored tweets generated from exactly this input."""
    if not input:
        raise ValidationError("Input parameter is required")

    tweets = service.get_tweets_by_input(input)
    return {"success": True, "tweets": [t.to_dict() for t in tweets]}


@router.get("/generation-requests/{request_id}")
def get_generation_request(
    request_id: str,
    service: GenerationService = Depends(get_service),
):
    """Fetch a stored generation request by id."""
    request = service.get_generation_request(request_id)
    return {"success": True, "request": request.to_dict()}


def create_app(service: GenerationService | None = None) -> FastAPI:
    """Build the application around a generation service.

    Args:
        service: Service to serve requests with; defaults to one backed by
            a fresh MemoryStorage
    """
    app = FastAPI(title="Tweet Studio", version=__version__)
    app.state.service = service or GenerationService(MemoryStorage())
    app.include_router(router)

    @app.exception_handler(TweetStudioError)
    async def handle_app_error(request: Request, exc: TweetStudioError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
        return error_response(exc.status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = "; ".join(e.get("msg", "Invalid request") for e in exc.errors())
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return error_response(400, message or "Invalid request")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} crashed: {exc}")
        return error_response(500, "Internal server error")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests."""
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
        return response

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
