"""Failure categories shared by the API client and the views."""

from enum import Enum


class ErrorType(str, Enum):
    """Types of errors that collapse into the stats "not found" state."""

    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    TIMEOUT_ERROR = "timeout_error"
    INVALID_RESPONSE = "invalid_response"
    INVALID_REQUEST = "invalid_request"
