"""Inference error taxonomy, keyed by HTTP status"""
from typing import Optional


class InferenceError(Exception):
    """Base class for Inference Service failures. Never retried automatically."""
    status_code = 500
    default_message = "AI service failed. Please try again."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidInputError(InferenceError):
    status_code = 400
    default_message = "Text or image input is required"


class QuotaExceededError(InferenceError):
    status_code = 402
    default_message = "AI credits exhausted. Please add credits to continue."


class RateLimitedError(InferenceError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class InferenceServiceError(InferenceError):
    status_code = 500
    default_message = "AI service failed. Please try again."


def error_for_status(status_code: int, message: Optional[str] = None) -> InferenceError:
    """Build the typed error for an upstream HTTP status"""
    if status_code == 400:
        return InvalidInputError(message)
    if status_code == 402:
        return QuotaExceededError(message)
    if status_code == 429:
        return RateLimitedError(message)
    return InferenceServiceError(message, status_code=status_code if status_code >= 500 else 500)
