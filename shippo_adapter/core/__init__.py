"""
Core module exports.
"""
from .enums import (
    Resource,
    WebhookEvent,
    MAX_PAGE_SIZE,
    SHIPPO_API_BASE_URL,
)

from .exceptions import (
    BaseServiceError,
    PlatformServiceError,
    ShippoServiceError,
    ShippoAPIError,
    ValidationError,
    UnknownOperationError,
)

from .logging_config import (
    configure_logging,
    LicenseNotice,
)
