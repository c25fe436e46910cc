"""Answer judge endpoint health check.

Performs a lightweight models listing against the OpenAI-compatible endpoint
to confirm reachability and that the API key is accepted.
"""

import time

from loguru import logger
from openai import AsyncOpenAI
from pydantic import BaseModel, Field

from guess_the_frame.core.config import settings
from guess_the_frame.core.infrastructure.health import HealthStatus


class AIServiceHealthResult(BaseModel):
    """Judge endpoint health check result."""

    status: HealthStatus = Field(..., description="Health status")
    message: str | None = Field(None, description="Status message")
    base_url: str | None = Field(None, description="API base URL")
    model: str | None = Field(None, description="Configured judge model")
    latency_ms: int | None = Field(None, description="Latency (ms)", ge=0)
    error: str | None = Field(None, description="Error message")

    def to_dict(self) -> dict[str, str | int | None]:
        return self.model_dump(mode="json", exclude_none=False)


async def check_ai_service_health(
    client: AsyncOpenAI | None,
) -> AIServiceHealthResult:
    """Check the health of the answer judge endpoint.

    Checks the shared judge client; a missing client means no API key is set.
    """
    if not settings.LLM_ENABLED:
        return AIServiceHealthResult(
            status=HealthStatus.SKIPPED,
            message="Answer judge is disabled",
        )

    if client is None:
        logger.warning("Judge API key is not configured")
        return AIServiceHealthResult(
            status=HealthStatus.ERROR,
            error="API key not configured",
        )

    try:
        start_time = time.time()
        await client.models.list()
        latency_ms = int((time.time() - start_time) * 1000)

        logger.info(f"Judge API health check passed in {latency_ms}ms")
        return AIServiceHealthResult(
            status=HealthStatus.OK,
            base_url=settings.OPENAI_API_BASE,
            model=settings.OPENAI_JUDGE_MODEL,
            latency_ms=latency_ms,
        )

    except Exception as e:
        error_msg = str(e)
        logger.error(f"Judge API health check failed: {error_msg}")
        return AIServiceHealthResult(
            status=HealthStatus.ERROR,
            error=error_msg,
            base_url=settings.OPENAI_API_BASE,
        )
