"""HTTP client for the remote and application-local catalog sources."""

import logging
from typing import Any

import backoff
import requests

from wpc.core.constants import CATALOG_BASE_URL, FALLBACK_BASE_URL, APIConstants, CatalogFamily
from wpc.exceptions import APIError, NotFoundError, RateLimitError, TimeoutError


def _retry_after_seconds(value: str | None) -> int | None:
    """Parse a Retry-After header given in seconds; HTTP-dates and junk give None."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class CatalogSourceClient:
    """Client for reading catalog families from their sources."""

    def __init__(
        self,
        catalog_base_url: str = CATALOG_BASE_URL,
        fallback_base_url: str = FALLBACK_BASE_URL,
        request_timeout: float = APIConstants.REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            catalog_base_url: Base location of the primary per-family JSON files
            fallback_base_url: Base location of the application-local endpoints
            request_timeout: Transport timeout in seconds
        """
        self.logger = logging.getLogger(__name__)

        self.catalog_base_url = catalog_base_url.rstrip("/")
        self.fallback_base_url = fallback_base_url.rstrip("/")
        self.request_timeout = request_timeout
        self.session: requests.Session | None = None

    def __enter__(self) -> "CatalogSourceClient":
        """Enter context."""
        self.logger.debug("Opening client session")
        self.session = requests.Session()
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context."""
        if self.session:
            self.session.close()
            self.session = None
            self.logger.debug("Client session closed")

    @property
    def headers(self) -> dict[str, str]:
        """Get request headers."""
        return {"Accept": "application/json"}

    @backoff.on_exception(
        backoff.expo,
        (requests.exceptions.ConnectionError,),
        max_tries=APIConstants.BACKOFF_MAX_TRIES,
        factor=APIConstants.BACKOFF_FACTOR,
        max_value=APIConstants.BACKOFF_MAX_VALUE,
    )
    def _make_request(self, url: str) -> Any:
        """Make a GET request with retry on connection errors.

        Args:
            url: Absolute URL to read

        Returns:
            Parsed JSON body
        """
        if not self.session:
            raise RuntimeError("Client not initialized. Use context manager.")

        self.logger.debug(f"Making request: GET {url}")

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.request_timeout)
        except requests.exceptions.Timeout:
            raise TimeoutError(f"GET {url}", self.request_timeout) from None

        if response.status_code == 200:
            return response.json()

        response_text = response.text

        # Map status codes to exceptions
        error_map = {
            404: lambda: NotFoundError(f"Resource not found: {url}", response_text),
            408: lambda: TimeoutError(f"GET {url}", self.request_timeout),
            429: lambda: RateLimitError(
                f"Rate limit exceeded: {url}",
                response_text,
                _retry_after_seconds(response.headers.get("Retry-After")),
            ),
        }

        if response.status_code in error_map:
            raise error_map[response.status_code]()
        elif 500 <= response.status_code < 600:
            raise APIError(response.status_code, f"Server error: {url}", response_text)
        else:
            raise APIError(
                response.status_code,
                f"Unexpected response status {response.status_code}: {url}",
                response_text,
            )

    def get_primary(self, family: CatalogFamily) -> Any:
        """Read one family's flat JSON array from the primary source."""
        family = CatalogFamily(family)
        return self._make_request(f"{self.catalog_base_url}/{family.file_name}")

    def get_fallback(self, family: CatalogFamily) -> Any:
        """Read one family from the application-local endpoint (raw response shape)."""
        family = CatalogFamily(family)
        return self._make_request(f"{self.fallback_base_url}/{family.value}")
