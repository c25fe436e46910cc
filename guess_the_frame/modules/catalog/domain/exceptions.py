"""Catalog domain exceptions."""

from fastapi import status

from guess_the_frame.core.domain.exceptions import DomainException, ValidationError


class CatalogUnavailableError(DomainException):
    """The provider failed while refreshing a partition; nothing was changed."""

    http_status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "CATALOG_UNAVAILABLE"

    def __init__(self, language: str, reason: str | None = None):
        message = f"Catalog provider unavailable for language '{language}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedLanguageError(ValidationError):
    """Raised when a language has no catalog partition."""

    error_code = "UNSUPPORTED_LANGUAGE"

    def __init__(self, language: str | None, supported: list[str]):
        super().__init__(
            f"Unsupported language '{language}', expected one of: "
            + ", ".join(supported)
        )
