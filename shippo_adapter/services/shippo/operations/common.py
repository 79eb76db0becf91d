"""
Helpers shared by the per-resource operation handlers.

Every handler has the signature
    async def handler(client: ShippoClient, params: ParameterSource, i: int)
and returns a dict (single object) or a list of dicts (listing).
"""
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from shippo_adapter.core.exceptions import ValidationError
from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.schemas.shippo import PaginationSpec, RequestSpec
from shippo_adapter.services.shippo.client import ShippoClient

OperationResult = Union[Dict[str, Any], List[Dict[str, Any]]]
OperationHandler = Callable[[ShippoClient, ParameterSource, int], Awaitable[OperationResult]]

# Default `limit` when the caller leaves returnAll off and gives no limit
DEFAULT_LIMIT = 25


def collection(params: ParameterSource, name: str, i: int) -> Dict[str, Any]:
    """Optional collection parameter (additionalFields, options, filters...)."""
    value = params.get_parameter(name, i, {})
    return dict(value or {})


def pagination_for(params: ParameterSource, i: int) -> PaginationSpec:
    """returnAll / limit for item `i`; bad values fail locally, before any request."""
    return_all = params.get_parameter('returnAll', i, False)
    limit = params.get_parameter('limit', i, DEFAULT_LIMIT)
    try:
        return PaginationSpec(return_all=return_all, limit=limit)
    except PydanticValidationError as e:
        field = e.errors()[0]['loc'][0]
        if field == 'limit':
            raise ValidationError(f"Invalid limit: {limit!r} (must be a positive integer)", item_index=i)
        raise ValidationError(f"Invalid returnAll: {return_all!r} (must be true or false)", item_index=i)


async def get_all(
    client: ShippoClient,
    params: ParameterSource,
    i: int,
    endpoint: str,
    qs: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """getAll over a listing endpoint, honouring returnAll / limit."""
    spec = RequestSpec(endpoint=endpoint, qs=qs or None)
    return await client.request_all_items(spec, pagination_for(params, i))


def copy_if_set(source: Dict[str, Any], target: Dict[str, Any], mappings: Dict[str, str]) -> None:
    """Copy truthy optional values (strings, ids, metadata) under their wire names."""
    for input_field, api_field in mappings.items():
        if source.get(input_field):
            target[api_field] = source[input_field]


def copy_flags(source: Dict[str, Any], target: Dict[str, Any], mappings: Dict[str, str]) -> None:
    """Copy boolean options whenever they were given, False included."""
    for input_field, api_field in mappings.items():
        if source.get(input_field) is not None:
            target[api_field] = source[input_field]
