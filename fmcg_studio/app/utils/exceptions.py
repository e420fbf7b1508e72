from typing import Any, Optional

from fastapi import status


class AppException(Exception):
    """Base application exception"""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(AppException):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class ValidationError(AppException):
    def __init__(self, message: str = "Validation failed"):
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY)


class GatewayError(AppException):
    """The model or image provider could not be reached or rejected the call."""
    def __init__(self, message: str = "Model gateway error"):
        super().__init__(message, status.HTTP_502_BAD_GATEWAY)


class GatewayTimeoutError(GatewayError):
    def __init__(self, message: str = "Model gateway timed out"):
        super().__init__(message)
        self.status_code = status.HTTP_504_GATEWAY_TIMEOUT


class DecodeError(AppException):
    """
    Model output that is not JSON, or not the JSON shape the feature expects.

    Keeps the feature label and the raw text so the failure can be logged
    next to what the model actually sent back.
    """
    def __init__(self, feature_label: str, raw_text: str, details: Optional[Any] = None):
        self.feature_label = feature_label
        self.raw_text = raw_text
        self.details = details
        super().__init__(
            f"AI returned an invalid format for {feature_label}",
            status.HTTP_502_BAD_GATEWAY,
        )
