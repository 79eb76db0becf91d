"""
Shared enums and constants used across the adapter.
"""

from enum import Enum

SHIPPO_API_BASE_URL = "https://api.goshippo.com"

# Hard cap on `results` per page enforced by the Shippo listing endpoints
MAX_PAGE_SIZE = 100


class Resource(str, Enum):
    """Resources exposed by the adapter. Values are the names the host passes in."""
    ADDRESS = "address"
    BATCH = "batch"
    CARRIER_ACCOUNT = "carrierAccount"
    CUSTOMS = "customs"
    MANIFEST = "manifest"
    PARCEL = "parcel"
    PICKUP = "pickup"
    RATE = "rate"
    REFUND = "refund"
    SHIPMENT = "shipment"
    TRACKING = "tracking"
    TRANSACTION = "transaction"
    WEBHOOK = "webhook"


class CodPaymentMethod(str, Enum):
    SECURED_FUNDS = "SECURED_FUNDS"
    CASH = "CASH"
    ANY = "ANY"


class WebhookEvent(str, Enum):
    TRACK_UPDATED = "track_updated"
    TRANSACTION_CREATED = "transaction_created"
    TRANSACTION_UPDATED = "transaction_updated"
    BATCH_CREATED = "batch_created"
    BATCH_PURCHASED = "batch_purchased"
    ALL = "all"

