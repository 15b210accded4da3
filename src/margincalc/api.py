"""FastAPI application for the margin calculator service."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from margincalc.cache import ResultCache
from margincalc.config import CalculatorConfig, get_config
from margincalc.dependencies import AppResources, get_app_config, get_pricing_service
from margincalc.exceptions import ContractError
from margincalc.models import PricingRequest, PricingResponse
from margincalc.service import PricingService, build_service
from margincalc.translations import SUPPORTED_LANGUAGES, Translation, get_translation

VERSION = "0.1.0"
logger = logging.getLogger(__name__)


def _rate_limit() -> str:
    return get_config().rate_limit


limiter = Limiter(
    key_func=get_remote_address,
    swallow_errors=True,
)

# Shared across app instances; the lifespan resizes it from config.
result_cache = ResultCache(max_entries=1024)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build app-scoped resources once per process."""
    config = get_config()
    app.state.margincalc_resources = AppResources(
        config=config,
        pricing_service=build_service(config, cache=result_cache),
    )
    logger.info(
        "margincalc API ready: currency=%s language=%s cache=%s",
        config.currency_code,
        config.default_language,
        "on" if config.result_cache_enabled else "off",
    )
    yield


async def health_check(
    config: CalculatorConfig = Depends(get_app_config),
) -> Dict[str, Any]:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "service": "margincalc",
        "version": VERSION,
        "currency": config.currency_code,
    }


@limiter.limit(_rate_limit)
async def calculate_pricing(
    request: Request,
    payload: PricingRequest,
    pricing_service: PricingService = Depends(get_pricing_service),
) -> PricingResponse:
    """Compute pricing metrics for one product."""
    _ = request
    return pricing_service.build_response(payload)


async def list_languages() -> Dict[str, Any]:
    """List languages with label tables."""
    return {"languages": list(SUPPORTED_LANGUAGES)}


async def read_translation(language: str) -> Translation:
    """Return the label table for one language."""
    return get_translation(language)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Rate limit exceeded handler."""
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded. Please try again later."},
    )


async def contract_error_handler(request: Request, exc: ContractError) -> JSONResponse:
    """Map domain contract errors to stable API error payload."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details,
            }
        },
    )


def create_app() -> FastAPI:
    """Create a configured FastAPI application."""
    config = get_config()
    application = FastAPI(
        title="Margin Calculator Service",
        description="Unit pricing, margin, markup and target-margin pricing",
        version=VERSION,
        lifespan=lifespan,
    )
    application.state.limiter = limiter

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_api_route("/health", health_check, methods=["GET"])
    application.add_api_route(
        "/pricing/calculate",
        calculate_pricing,
        methods=["POST"],
        response_model=PricingResponse,
        status_code=status.HTTP_200_OK,
        responses={
            422: {"description": "Invalid payload"},
            404: {"description": "Unsupported language"},
            429: {"description": "Rate limit exceeded"},
        },
    )
    application.add_api_route("/translations", list_languages, methods=["GET"])
    application.add_api_route(
        "/translations/{language}",
        read_translation,
        methods=["GET"],
        response_model=Translation,
        responses={404: {"description": "Unsupported language"}},
    )

    application.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    application.add_exception_handler(ContractError, contract_error_handler)
    return application


app = create_app()


def main() -> None:
    """Run API server."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "margincalc.api:app",
        host=config.api_host,
        port=config.api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
