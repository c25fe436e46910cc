"""guess-the-frame backend - movie frame guessing game API entry point."""

import sentry_sdk
from fastapi import Depends, FastAPI
from fastapi.concurrency import asynccontextmanager
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from loguru import logger
from openai import AsyncOpenAI
from starlette.middleware.cors import CORSMiddleware

from guess_the_frame.core.config import settings
from guess_the_frame.core.domain.exceptions import DomainException
from guess_the_frame.core.infrastructure.ai import check_ai_service_health
from guess_the_frame.core.infrastructure.health import CatalogHealthResult, HealthStatus
from guess_the_frame.core.infrastructure.logging import setup_logging
from guess_the_frame.core.interfaces.http.exceptions import (
    domain_exception_handler,
    global_exception_handler,
    request_validation_exception_handler,
)
from guess_the_frame.core.interfaces.http.routers import api_router
from guess_the_frame.modules.answers.application import dependencies as answers_app_deps
from guess_the_frame.modules.answers.infrastructure import (
    dependencies as answers_infra_deps,
)
from guess_the_frame.modules.catalog.application import dependencies as catalog_app_deps
from guess_the_frame.modules.catalog.domain.index import CatalogIndex
from guess_the_frame.modules.catalog.infrastructure import (
    dependencies as catalog_infra_deps,
)


def custom_generate_unique_id(route: APIRoute) -> str:
    """Generate unique operation IDs for OpenAPI."""
    if route.tags:
        return f"{route.tags[0]}-{route.name}"
    return route.name


# Initialize Sentry if configured
if settings.SENTRY_DSN and settings.ENVIRONMENT != "local":
    sentry_sdk.init(
        dsn=str(settings.SENTRY_DSN),
        enable_tracing=True,
        environment=settings.ENVIRONMENT,
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Application lifespan manager."""
    setup_logging()
    logger.info("Starting guess-the-frame backend...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    index = catalog_infra_deps.get_catalog_index()
    for language in index.languages():
        logger.info(f"Catalog partition '{language}': {index.size(language)} movies")

    yield

    logger.info("Shutting down guess-the-frame backend...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=(
        "Movie frame guessing game: random backdrop rounds from TMDB and "
        "LLM-checked answers"
    ),
    version="0.1.0",
    root_path=settings.ROOTPATH,
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)

# Dependency overrides (application -> infrastructure)
app.dependency_overrides[catalog_app_deps.get_catalog_provider] = (
    catalog_infra_deps.get_catalog_provider
)
app.dependency_overrides[catalog_app_deps.get_catalog_index] = (
    catalog_infra_deps.get_catalog_index
)
app.dependency_overrides[answers_app_deps.get_judge_client] = (
    answers_infra_deps.get_judge_client
)

# Exception handlers
app.add_exception_handler(DomainException, domain_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# CORS middleware
if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.include_router(api_router)


@app.get("/health", tags=["health"])
async def health_check(
    index: CatalogIndex = Depends(catalog_app_deps.get_catalog_index),
    judge_client: AsyncOpenAI | None = Depends(answers_app_deps.get_judge_client),
):
    """Health check endpoint.

    Reports the answer judge endpoint and the catalog partition sizes. The
    service is degraded when the judge is unreachable (guesses then score as
    wrong) or a catalog partition is empty (random frames then 404).
    """
    ai_health_result = await check_ai_service_health(judge_client)

    partitions = {language: index.size(language) for language in index.languages()}
    catalog_ok = bool(partitions) and all(partitions.values())
    catalog_health_result = CatalogHealthResult(
        status=HealthStatus.OK if catalog_ok else HealthStatus.DEGRADED,
        partitions=partitions,
    )

    ai_ok = ai_health_result.status in (HealthStatus.OK, HealthStatus.SKIPPED)
    overall_status = "healthy" if ai_ok and catalog_ok else "degraded"

    return {
        "status": overall_status,
        "environment": settings.ENVIRONMENT,
        "version": "0.1.0",
        "components": {
            "catalog": catalog_health_result.to_dict(),
            "ai_service": ai_health_result.to_dict(),
        },
        "feature_flags": {
            "llm_enabled": settings.LLM_ENABLED,
        },
    }


@app.get("/", tags=["root"])
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the guess-the-frame API",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.SERVER_PORT,
        reload=settings.ENVIRONMENT == "local",
    )
