"""
Base API Client with shared session, timeouts, and error handling.
All upstream clients (games listing, economy details) inherit from this.

Upstream calls are made exactly once: no retries, no caching, no rate
limiting. Failures are translated into the UpstreamError hierarchy so
callers can tell timeouts, HTTP errors, bad payloads and network failures
apart while still catching a single base class.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, Dict, Optional, Tuple, Union

import requests

# Get logger - configuration should be done by application entrypoint, not library modules
logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Roblox/WinInet"


class UpstreamError(Exception):
    """Base class for every failure talking to an upstream service."""
    pass


class UpstreamTimeout(UpstreamError):
    """Raised when an upstream request exceeds its timeout"""
    pass


class UpstreamHTTPError(UpstreamError):
    """Raised when an upstream service answers with a non-2xx status"""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class UpstreamMalformedPayload(UpstreamError):
    """Raised when an upstream body is not JSON or not the expected shape"""
    pass


class NetworkError(UpstreamError):
    """Raised on connection-level failures (DNS, refused, reset...)"""
    pass


TimeoutType = Union[int, float, Tuple[float, float]]


class BaseAPIClient(ABC):
    """
    Abstract base class for upstream API clients.
    Provides a pooled session with fixed headers and error translation.
    """

    def __init__(
            self,
            base_url: str,
            user_agent: Optional[str] = None,
            timeout: TimeoutType = 10,
    ):
        """
        Args:
            base_url: Base URL for the API
            user_agent: Custom User-Agent header
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout: TimeoutType = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'application/json'
        })

        logger.info(f"Initialized {self.__class__.__name__} - {self.base_url}, timeout: {timeout}s")

    def _make_request(
            self,
            method: str,
            endpoint: str,
            params: Optional[Dict] = None,
            timeout_override: Optional[TimeoutType] = None,
    ) -> Any:
        """
        Make a single HTTP request and decode the JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (will be appended to base_url)
            params: Query parameters
            timeout_override: Per-call timeout instead of the client default

        Returns:
            Decoded JSON body (any JSON type)

        Raises:
            UpstreamTimeout: If the request timed out
            UpstreamHTTPError: If the API returned a non-2xx status
            UpstreamMalformedPayload: If the body is not valid JSON
            NetworkError: For other transport failures
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        timeout = timeout_override if timeout_override is not None else self.timeout

        try:
            logger.debug(f"{method} {url} - params: {params}")

            response = self.session.request(
                method=method,
                url=url,
                params=params,
                timeout=timeout,
            )
        except requests.Timeout as e:
            logger.warning(f"Request timed out after {timeout}s: {method} {url}")
            raise UpstreamTimeout(f"timeout of {timeout}s exceeded: {e}") from e
        except requests.RequestException as e:
            logger.warning(f"Request failed: {e}")
            raise NetworkError(f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            error_msg = f"API error {response.status_code}: {response.text[:200]}"
            logger.warning(error_msg)
            raise UpstreamHTTPError(error_msg, status_code=response.status_code)

        try:
            json_data = response.json()
        except ValueError as e:
            raise UpstreamMalformedPayload(
                f"Invalid JSON from {method} {endpoint}: {e}"
            ) from e

        logger.debug(f"Request successful: {method} {endpoint}")
        return json_data

    def get(self, endpoint: str, params: Optional[Dict] = None,
            timeout_override: Optional[TimeoutType] = None) -> Any:
        """GET request wrapper"""
        return self._make_request('GET', endpoint, params=params,
                                  timeout_override=timeout_override)

    def close(self):
        """Clean up resources"""
        self.session.close()
        logger.info(f"Closed {self.__class__.__name__}")

    def __enter__(self):
        """Context manager entry - returns self for use in 'with' blocks."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensures session is closed."""
        self.close()
        return False  # Don't suppress exceptions
