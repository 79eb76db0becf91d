"""
Request/response shapes exchanged with the Shippo API and the host.

RequestSpec and PaginationSpec are built per call and never mutated;
PageEnvelope is the listing response shape ({count, next, previous, results}).
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from shippo_adapter.core.enums import MAX_PAGE_SIZE
from shippo_adapter.schemas.base import BaseSchema


RequestBody = Union[Dict[str, Any], List[Any]]


class RequestSpec(BaseSchema):
    """One HTTP call against the Shippo API."""

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    endpoint: str
    body: Optional[RequestBody] = None
    qs: Optional[Dict[str, Any]] = None

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()

    @field_validator("endpoint")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    def with_query(self, **extra: Any) -> "RequestSpec":
        """Return a copy whose query string is the current one merged with `extra`."""
        qs = dict(self.qs or {})
        qs.update(extra)
        return self.model_copy(update={"qs": qs})


class PaginationSpec(BaseSchema):
    """Fetch-all vs fetch-up-to-N contract for a listing call."""

    return_all: bool = True
    limit: int = Field(default=MAX_PAGE_SIZE, ge=1)

    @property
    def page_size(self) -> int:
        return min(self.limit, MAX_PAGE_SIZE)


class PageEnvelope(BaseSchema):
    """A single page of a Shippo listing endpoint."""

    model_config = ConfigDict(extra="allow")

    count: Optional[int] = None
    next: Optional[Any] = None
    previous: Optional[Any] = None
    results: List[Any] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _missing_results(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_next(self) -> bool:
        return bool(self.next)


class OutputItem(BaseSchema):
    """One record handed back to the host; error records carry {"error": ...}."""

    data: Dict[str, Any] = Field(default_factory=dict)
    paired_item: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return "error" in self.data and len(self.data) == 1

    def to_host(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"json": self.data}
        if self.paired_item is not None:
            record["pairedItem"] = {"item": self.paired_item}
        return record
