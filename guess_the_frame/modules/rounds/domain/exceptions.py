"""Round domain exceptions."""

from fastapi import status

from guess_the_frame.core.domain.exceptions import DomainException


class PlanningFailedError(DomainException):
    """The page count could not be determined; no pages were fetched."""

    http_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "PLANNING_FAILED"


class AssemblyFailedError(DomainException):
    """A provider call inside a planned batch failed; no rounds are returned."""

    http_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "ASSEMBLY_FAILED"


class FrameNotFoundError(DomainException):
    """No candidate with a usable backdrop was found."""

    http_status_code = status.HTTP_404_NOT_FOUND
    error_code = "FRAME_NOT_FOUND"

    def __init__(self, language: str):
        super().__init__(f"No movie frame found for language '{language}'")
