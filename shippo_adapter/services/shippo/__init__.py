from .client import ShippoClient, check_credentials
from .dispatcher import ShippoDispatcher, resolve
from .trigger import ShippoTrigger, WEBHOOK_ID_KEY
