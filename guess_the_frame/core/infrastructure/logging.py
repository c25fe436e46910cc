"""Logging configuration with structlog integration.

Two logging channels:
1. loguru: operational and debug logs
2. structlog: structured logs for key game events
"""

import sys
from typing import Any

import structlog
from loguru import logger

from guess_the_frame.core.config import settings


def setup_logging() -> None:
    """Configure application logging with structlog and loguru."""
    _configure_structlog()
    _configure_loguru()

    logger.info(f"Logging configured with level: {settings.LOG_LEVEL}")


def _configure_structlog() -> None:
    if settings.ENVIRONMENT == "local":
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _get_log_level_number(settings.LOG_LEVEL)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _configure_loguru() -> None:
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if settings.ENVIRONMENT != "local":
        logger.add(
            "logs/guess_the_frame_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            level="INFO",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )


def _get_log_level_number(level: str) -> int:
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 20)


# ============================================================================
# Game event logger
# ============================================================================


class BusinessEvents:
    """Structured game event helpers.

    Keeps event names and fields consistent across modules.

    Usage:
        from guess_the_frame.core.infrastructure.logging import BusinessEvents

        BusinessEvents.catalog_refreshed(language="en", entry_count=420, pages=21)
    """

    _log = structlog.get_logger("business.events")

    @classmethod
    def catalog_refreshed(
        cls,
        language: str,
        entry_count: int,
        pages: int,
        **extra: Any,
    ) -> None:
        cls._log.info(
            "catalog_refreshed",
            event_type="catalog",
            language=language,
            entry_count=entry_count,
            pages=pages,
            **extra,
        )

    @classmethod
    def catalog_fetch_failed(
        cls,
        operation: str,
        error: str,
        language: str | None = None,
        **extra: Any,
    ) -> None:
        cls._log.warning(
            "catalog_fetch_failed",
            event_type="catalog_error",
            operation=operation,
            error=error,
            language=language,
            **extra,
        )

    @classmethod
    def rounds_assembled(
        cls,
        language: str,
        requested: int,
        delivered: int,
        pages: int,
        candidates: int,
        **extra: Any,
    ) -> None:
        cls._log.info(
            "rounds_assembled",
            event_type="rounds",
            language=language,
            requested=requested,
            delivered=delivered,
            pages=pages,
            candidates=candidates,
            **extra,
        )

    @classmethod
    def frame_resolved(
        cls,
        language: str,
        attempts: int,
        found: bool,
        **extra: Any,
    ) -> None:
        level = "info" if found else "warning"
        getattr(cls._log, level)(
            "frame_resolved",
            event_type="frame",
            language=language,
            attempts=attempts,
            found=found,
            **extra,
        )

    @classmethod
    def answer_judged(
        cls,
        verdict: bool,
        degraded: bool = False,
        **extra: Any,
    ) -> None:
        cls._log.info(
            "answer_judged",
            event_type="judge",
            verdict=verdict,
            degraded=degraded,
            **extra,
        )

    @classmethod
    def feature_degraded(
        cls,
        feature: str,
        reason: str,
        **extra: Any,
    ) -> None:
        cls._log.warning(
            "feature_degraded",
            event_type="degradation",
            feature=feature,
            reason=reason,
            **extra,
        )
