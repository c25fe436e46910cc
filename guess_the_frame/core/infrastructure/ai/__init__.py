"""AI service infrastructure."""

from .health import AIServiceHealthResult, check_ai_service_health

__all__ = ["check_ai_service_health", "AIServiceHealthResult"]
