"""
Shippo webhook trigger.

Manages the lifecycle of the single Shippo webhook subscription that points at
our inbound receiver. Its id is the only state the adapter keeps, stored in
the host's static data under WEBHOOK_ID_KEY. The lifecycle hooks report
True/False instead of raising, as the host's registration protocol expects.
"""
import logging
from typing import Any, Dict, List, Optional

from shippo_adapter.core.config import get_settings
from shippo_adapter.core.exceptions import ShippoAPIError
from shippo_adapter.core.logging_config import LicenseNotice
from shippo_adapter.integrations.base import StaticDataStore
from shippo_adapter.schemas.shippo import OutputItem
from shippo_adapter.services.shippo.client import ShippoClient

logger = logging.getLogger(__name__)

WEBHOOK_ID_KEY = "webhookId"


class ShippoTrigger:

    def __init__(
        self,
        client: ShippoClient,
        static_data: StaticDataStore,
        webhook_url: str,
        event: str,
        is_test: Optional[bool] = None,
        notice: Optional[LicenseNotice] = None,
    ):
        self.client = client
        self.static_data = static_data
        self.webhook_url = webhook_url
        self.event = event
        self.is_test = is_test
        self.notice = notice or LicenseNotice(enabled=get_settings().SHIPPO_LICENSE_NOTICE)

    @property
    def webhook_id(self) -> Optional[str]:
        return self.static_data.get(WEBHOOK_ID_KEY)

    async def check_exists(self) -> bool:
        """Adopt an existing subscription for our URL and event, if Shippo has one."""
        self.notice.emit()
        try:
            response = await self.client.get('/webhooks')
        except ShippoAPIError as e:
            logger.warning(f"Could not list Shippo webhooks: {e}")
            return False

        for webhook in (response or {}).get('results') or []:
            if webhook.get('url') == self.webhook_url and webhook.get('event') == self.event:
                self.static_data.set(WEBHOOK_ID_KEY, webhook.get('object_id'))
                return True
        return False

    async def create(self) -> bool:
        self.notice.emit()
        body: Dict[str, Any] = {
            'url': self.webhook_url,
            'event': self.event,
        }
        if self.is_test is not None:
            body['is_test'] = self.is_test

        try:
            response = await self.client.post('/webhooks', data=body)
        except ShippoAPIError as e:
            logger.error(f"Failed to create Shippo webhook: {e}")
            return False

        self.static_data.set(WEBHOOK_ID_KEY, response.get('object_id'))
        logger.info(f"Created Shippo webhook {response.get('object_id')} for {self.event}")
        return True

    async def delete(self) -> bool:
        self.notice.emit()
        webhook_id = self.webhook_id
        if not webhook_id:
            return True

        try:
            await self.client.delete(f'/webhooks/{webhook_id}')
        except ShippoAPIError as e:
            logger.error(f"Failed to delete Shippo webhook {webhook_id}: {e}")
            return False

        self.static_data.delete(WEBHOOK_ID_KEY)
        logger.info(f"Deleted Shippo webhook {webhook_id}")
        return True

    def receive(self, body: Any) -> List[OutputItem]:
        """Pass an inbound event through unchanged, one output item per object."""
        self.notice.emit()
        if isinstance(body, list):
            return [OutputItem(data=entry if isinstance(entry, dict) else {'value': entry}) for entry in body]
        if isinstance(body, dict):
            return [OutputItem(data=body)]
        return [OutputItem(data={'value': body})]
