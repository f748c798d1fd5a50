from __future__ import annotations

import math

NO_RESUME = "No resume uploaded"
NO_JOB_DESCRIPTION = "No job description provided"
NO_READABLE_TEXT = "No readable text found in resume"
UNREADABLE_PDF = "Unable to extract text from this PDF file"
INTERNAL_ERROR = "Internal server error. Please try again."


def format_size(num_bytes: int) -> str:
    if num_bytes >= 1024 * 1024:
        return f"{num_bytes / (1024 * 1024):g} MB"
    return f"{max(1, math.ceil(num_bytes / 1024))} KB"


class AnalysisError(RuntimeError):
    """Base for failures that map onto a ``{"message": ...}`` response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AnalysisError):
    status_code = 400


class UploadTooLargeError(ValidationError):
    status_code = 413

    def __init__(self, max_bytes: int):
        super().__init__(
            f"Resume file too large. Maximum allowed size is {format_size(max_bytes)}."
        )
        self.max_bytes = max_bytes


class UpstreamError(AnalysisError):
    """Remote model call failed. ``detail`` is for logs, never for the caller."""

    status_code = 500
    public_message = "AI analysis failed. Please try again."

    def __init__(self, detail: str, *, provider: str = "unknown"):
        super().__init__(self.public_message)
        self.detail = detail
        self.provider = provider

    def __str__(self) -> str:
        return f"{self.provider}: {self.detail}"


class InternalError(AnalysisError):
    """Unexpected fault while handling a request, reported with a generic message."""

    status_code = 500

    def __init__(self):
        super().__init__(INTERNAL_ERROR)

