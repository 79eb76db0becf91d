from typing import Any, Optional


class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class PlatformServiceError(BaseServiceError):
    """Base exception for platform service errors."""
    pass

class ShippoServiceError(PlatformServiceError):
    """Base exception for Shippo-specific errors."""
    pass

class ShippoAPIError(ShippoServiceError):
    """
    Raised when a Shippo API call fails, whether at the transport level or
    with a non-2xx response. This is the only error translation performed by
    the client.
    """

    def __init__(
        self,
        message: str,
        description: Optional[str] = None,
        status_code: Optional[int] = None,
        response_body: Any = None,
    ):
        self.message = message
        self.description = description
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.description:
            return f"{self.message}: {self.description}"
        return self.message

class ValidationError(BaseServiceError):
    """Raised when caller input is malformed. No request is sent."""

    def __init__(self, message: str, item_index: Optional[int] = None):
        self.message = message
        self.item_index = item_index
        super().__init__(message)

class UnknownOperationError(ValidationError):
    """Raised when a resource/operation pair has no handler."""
    pass
