"""
Host collaborator interfaces.

The workflow host owns parameter resolution, per-node persistence and the
output channel; the adapter only talks to it through these interfaces.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from shippo_adapter.schemas.shippo import OutputItem


class _Missing:
    def __repr__(self):
        return "MISSING"


MISSING: Any = _Missing()


class ParameterSource(ABC):
    """Resolves named parameters for an input item."""

    @abstractmethod
    def get_parameter(self, name: str, item_index: int, default: Any = MISSING) -> Any:
        """Return the value of `name` for item `item_index`.

        Raises ValidationError when the parameter is absent and no default is given.
        """
        pass

    @abstractmethod
    def item_count(self) -> int:
        """Number of input items in the current run"""
        pass


class StaticDataStore(ABC):
    """Per-node key/value persistence. Only the webhook id is ever stored."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass


class OutputChannel(ABC):
    """Where trigger output goes once a webhook event has been received."""

    @abstractmethod
    async def emit(self, items: List[OutputItem]) -> None:
        pass
