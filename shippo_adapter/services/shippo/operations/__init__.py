"""
Operation registry keyed by (Resource, operation name).
"""
from typing import Dict, Tuple

from shippo_adapter.core.enums import Resource
from shippo_adapter.services.shippo.operations import (
    address,
    batch,
    carrier_account,
    customs,
    manifest,
    parcel,
    pickup,
    rate,
    refund,
    shipment,
    tracking,
    transaction,
    webhook,
)
from shippo_adapter.services.shippo.operations.common import OperationHandler

RESOURCE_OPERATIONS = {
    Resource.ADDRESS: address.OPERATIONS,
    Resource.BATCH: batch.OPERATIONS,
    Resource.CARRIER_ACCOUNT: carrier_account.OPERATIONS,
    Resource.CUSTOMS: customs.OPERATIONS,
    Resource.MANIFEST: manifest.OPERATIONS,
    Resource.PARCEL: parcel.OPERATIONS,
    Resource.PICKUP: pickup.OPERATIONS,
    Resource.RATE: rate.OPERATIONS,
    Resource.REFUND: refund.OPERATIONS,
    Resource.SHIPMENT: shipment.OPERATIONS,
    Resource.TRACKING: tracking.OPERATIONS,
    Resource.TRANSACTION: transaction.OPERATIONS,
    Resource.WEBHOOK: webhook.OPERATIONS,
}

OPERATION_REGISTRY: Dict[Tuple[Resource, str], OperationHandler] = {
    (resource, name): handler
    for resource, operations in RESOURCE_OPERATIONS.items()
    for name, handler in operations.items()
}
