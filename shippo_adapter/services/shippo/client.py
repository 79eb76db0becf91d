import json
import logging
import httpx
from typing import Dict, List, Optional, Any, Tuple

from shippo_adapter.core.config import Settings, get_settings
from shippo_adapter.core.exceptions import ShippoAPIError
from shippo_adapter.schemas.shippo import RequestSpec, PaginationSpec, PageEnvelope

logger = logging.getLogger(__name__)


class ShippoClient:
    """
    Asynchronous client for the Shippo REST API.

    Functionality:
        - _make_request: one authenticated call; every transport failure or non-2xx
          response becomes a ShippoAPIError. No retries, no backoff.
        - request_all_items: walks a cursor-style listing endpoint
          ({count, next, previous, results}) page by page.
        - test_credentials: lightweight connectivity self-test (GET /addresses?results=1).

    Documentation: https://docs.goshippo.com/shippoapi/public-api/
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the Shippo client

        Args:
            api_token: Shippo API token. Defaults to SHIPPO_API_TOKEN from settings.
            settings: Settings instance (base URL, auth scheme, transport timeout)
            http_client: Optional shared httpx.AsyncClient. When omitted a client is
                opened per request.
        """
        self.settings = settings or get_settings()
        self.api_token = api_token if api_token is not None else self.settings.SHIPPO_API_TOKEN
        self.BASE_URL = self.settings.SHIPPO_API_BASE_URL.rstrip("/")
        self.auth_scheme = self.settings.SHIPPO_AUTH_SCHEME
        self.timeout = self.settings.SHIPPO_TIMEOUT
        self._http_client = http_client

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for API requests"""
        return {
            "Authorization": f"{self.auth_scheme} {self.api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @staticmethod
    def _error_description(response: httpx.Response) -> Tuple[Optional[str], Any]:
        """Pull a human readable description out of an error response."""
        try:
            body = response.json()
        except ValueError:
            text = response.text.strip()
            return (text or None), (text or None)

        if isinstance(body, dict):
            for key in ("detail", "message", "error"):
                if body.get(key):
                    return str(body[key]), body
            return json.dumps(body), body
        return json.dumps(body), body

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Any] = None,
        params: Optional[Dict] = None,
    ) -> Any:
        """
        Make a request to the Shippo API

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (without base URL)
            data: JSON body (object, array of objects or array of ids)
            params: Query parameters

        Returns:
            Parsed JSON response ({} when the response has no content)

        Raises:
            ShippoAPIError: If the API request fails
        """
        url = f"{self.BASE_URL}/{endpoint.lstrip('/')}"
        headers = self._get_headers()

        logger.debug(f"Making {method} request to {url}")
        if params:
            logger.debug(f"Params: {params}")
        if data is not None:
            logger.debug(f"Data: {json.dumps(data)[:500]}")  # Log only first 500 chars of data

        request_kwargs: Dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": headers,
        }
        if data is not None:
            request_kwargs["json"] = data
        if params:
            request_kwargs["params"] = params

        try:
            if self._http_client is not None:
                response = await self._http_client.request(**request_kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(**request_kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout error calling Shippo {method} {endpoint}: {str(e)}")
            raise ShippoAPIError(f"Request timed out: {str(e)}") from e
        except httpx.HTTPError as e:
            logger.error(f"Network error calling Shippo {method} {endpoint}: {str(e)}")
            raise ShippoAPIError(f"Network error: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            description, body = self._error_description(response)
            logger.error(f"Shippo API error ({response.status_code}) for {method} {endpoint}: {description}")
            raise ShippoAPIError(
                f"Request failed with status code {response.status_code}",
                description=description,
                status_code=response.status_code,
                response_body=body,
            )

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise ShippoAPIError(
                "Invalid JSON in Shippo response",
                description=response.text[:500],
                status_code=response.status_code,
            ) from e

    async def request(self, spec: RequestSpec) -> Any:
        """Issue the single call described by `spec`."""
        return await self._make_request(spec.method, spec.endpoint, data=spec.body, params=spec.qs)

    async def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        return await self._make_request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self._make_request("POST", endpoint, data=data)

    async def put(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self._make_request("PUT", endpoint, data=data)

    async def delete(self, endpoint: str) -> Any:
        return await self._make_request("DELETE", endpoint)

    async def request_all_items(
        self,
        spec: RequestSpec,
        pagination: Optional[PaginationSpec] = None,
    ) -> List[Dict]:
        """
        Get listing results by paginating through a Shippo listing endpoint

        Every page is requested with the caller's query plus `page` (1-based) and
        `results` (min(limit, 100)). Stops when the caller's limit is reached
        (return_all=False) or when the server reports no `next` page. A server that
        never clears `next` is followed indefinitely.

        Args:
            spec: Listing request (endpoint + optional query)
            pagination: return_all / limit. Defaults to return_all=True, limit=100.

        Returns:
            List[Dict]: Results in server order across pages

        Raises:
            ShippoAPIError: If any page request fails
        """
        pagination = pagination or PaginationSpec()
        page_size = pagination.page_size
        all_results: List[Dict] = []
        page = 1

        while True:
            response = await self.request(spec.with_query(page=page, results=page_size))
            envelope = PageEnvelope.from_response(response or {})
            all_results.extend(envelope.results)
            logger.debug(f"Fetched page {page} of {spec.endpoint}: {len(envelope.results)} results")

            if not pagination.return_all and len(all_results) >= pagination.limit:
                return all_results[:pagination.limit]

            if not envelope.has_next:
                break

            page += 1

        logger.info(f"Retrieved {len(all_results)} results from {spec.endpoint} across {page} page(s)")
        return all_results

    async def test_credentials(self) -> bool:
        """
        Connectivity self-test

        Returns:
            True on any non-error response

        Raises:
            ShippoAPIError: If the token is rejected or Shippo is unreachable
        """
        await self._make_request("GET", "/addresses", params={"results": 1})
        return True


async def check_credentials(client: ShippoClient) -> Tuple[bool, str]:
    """Run the credential self-test and report (ok, message) instead of raising."""
    try:
        await client.test_credentials()
    except ShippoAPIError as e:
        logger.warning(f"Shippo credential test failed: {e}")
        return False, str(e)
    return True, "Connection successful"
