"""
In-process implementations of the host collaborators, used by the CLI and
the FastAPI app when the adapter runs on its own.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from shippo_adapter.core.exceptions import ValidationError
from shippo_adapter.integrations.base import (
    MISSING,
    OutputChannel,
    ParameterSource,
    StaticDataStore,
)
from shippo_adapter.schemas.shippo import OutputItem

logger = logging.getLogger(__name__)


class ItemParameters(ParameterSource):
    """
    Node-level parameters, optionally overridden per input item.

    Args:
        parameters: values shared by every item (resource, operation, ...)
        items: one dict per input item; keys override `parameters` for that item
    """

    def __init__(self, parameters: Optional[Dict[str, Any]] = None,
                 items: Optional[List[Dict[str, Any]]] = None):
        self.parameters = dict(parameters or {})
        self.items = list(items) if items is not None else [{}]

    def get_parameter(self, name: str, item_index: int, default: Any = MISSING) -> Any:
        if item_index < 0 or item_index >= len(self.items):
            raise ValidationError(f"Item index {item_index} is out of range", item_index=item_index)

        item = self.items[item_index] or {}
        if name in item:
            return item[name]
        if name in self.parameters:
            return self.parameters[name]
        if default is not MISSING:
            return default
        raise ValidationError(f'Could not get parameter "{name}"', item_index=item_index)

    def item_count(self) -> int:
        return len(self.items)


class InMemoryStaticData(StaticDataStore):
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStaticData(StaticDataStore):
    """Static data persisted to a small JSON file so CLI runs share the webhook id."""

    def __init__(self, path: str):
        self.path = Path(path).expanduser()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as fh:
            return json.load(fh)

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)

    def get(self, key: str) -> Optional[Any]:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class ListOutputChannel(OutputChannel):
    """Collects emitted items in memory."""

    def __init__(self):
        self.items: List[OutputItem] = []

    async def emit(self, items: List[OutputItem]) -> None:
        logger.debug(f"Received {len(items)} webhook item(s)")
        self.items.extend(items)
