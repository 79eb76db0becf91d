"""
Shippo operation dispatcher.

Routes a (resource, operation) pair to its handler and runs it once per input
item, sequentially and in order.
"""
import logging
from typing import Any, List, Optional, Tuple, Union

from shippo_adapter.core.config import get_settings
from shippo_adapter.core.enums import Resource
from shippo_adapter.core.exceptions import UnknownOperationError
from shippo_adapter.core.logging_config import LicenseNotice
from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.schemas.shippo import OutputItem
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations import OPERATION_REGISTRY
from shippo_adapter.services.shippo.operations.common import OperationHandler

logger = logging.getLogger(__name__)


def resolve(resource: Union[str, Resource], operation: str) -> Tuple[Resource, OperationHandler]:
    """
    Look up the handler for a resource/operation pair

    Raises:
        UnknownOperationError: If the resource or the operation is not supported
    """
    try:
        resource = Resource(resource)
    except ValueError:
        raise UnknownOperationError(f"Unknown resource: {resource}")

    handler = OPERATION_REGISTRY.get((resource, operation))
    if handler is None:
        raise UnknownOperationError(f"Unknown operation: {operation}")
    return resource, handler


class ShippoDispatcher:
    """
    Executes one Shippo operation over a batch of input items.

    List results are flattened into one output item per element. With
    `continue_on_fail` a failing item yields {"error": message} paired with its
    index and the batch carries on; otherwise the first failure is raised and
    later items are not processed.
    """

    def __init__(
        self,
        client: ShippoClient,
        params: ParameterSource,
        continue_on_fail: bool = False,
        notice: Optional[LicenseNotice] = None,
    ):
        self.client = client
        self.params = params
        self.continue_on_fail = continue_on_fail
        self.notice = notice or LicenseNotice(enabled=get_settings().SHIPPO_LICENSE_NOTICE)

    async def execute(self) -> List[OutputItem]:
        self.notice.emit()

        item_count = self.params.item_count()
        if item_count == 0:
            logger.info("No input items, nothing to run")
            return []

        resource_name = self.params.get_parameter('resource', 0)
        operation = self.params.get_parameter('operation', 0)
        resource, handler = resolve(resource_name, operation)

        logger.info(f"Running {resource.value}.{operation} over {item_count} item(s)")

        results: List[OutputItem] = []
        for i in range(item_count):
            try:
                response = await handler(self.client, self.params, i)
            except Exception as e:
                if not self.continue_on_fail:
                    raise
                logger.warning(f"Item {i} of {resource.value}.{operation} failed: {e}")
                results.append(OutputItem(data={'error': str(e)}, paired_item=i))
                continue

            results.extend(self._to_output(response, i))

        return results

    @staticmethod
    def _to_output(response: Any, i: int) -> List[OutputItem]:
        if isinstance(response, list):
            return [OutputItem(data=_as_object(item), paired_item=i) for item in response]
        return [OutputItem(data=_as_object(response), paired_item=i)]


def _as_object(value: Any) -> dict:
    # Listing results are objects; anything else is wrapped so the host still gets a record
    if isinstance(value, dict):
        return value
    return {'value': value}
