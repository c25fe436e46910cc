"""Standard API response models."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope returned by every exception handler."""

    error: dict


ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Invalid query parameters"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}
