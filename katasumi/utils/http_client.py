"""
Standardized HTTP Client Utilities

Provides a consistent interface for calling AI provider HTTP APIs.
Uses `requests` for synchronous calls and maps transport failures onto the
LLM exception family.

Usage:
    from katasumi.utils.http_client import http_json_post

    data = http_json_post(
        "https://api.example.com/generate",
        json={"prompt": "hello"},
        timeout=5,
    )
"""

from typing import Any

import requests

from katasumi.configs.constants import get_timeout
from katasumi.exceptions import (
    LLMConnectionError,
    LLMHTTPError,
    LLMResponseError,
    LLMTimeoutError,
)

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = get_timeout("ai_request_ms") / 1000.0


def http_get(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    raise_for_status: bool = True,
) -> requests.Response:
    """
    Make a GET request with standardized error handling.

    Args:
        url: Request URL
        headers: Optional headers dict
        timeout: Request timeout in seconds
        raise_for_status: Raise LLMHTTPError on 4xx/5xx responses

    Returns:
        requests.Response object

    Raises:
        LLMConnectionError: Connection failed
        LLMTimeoutError: Request timed out
        LLMHTTPError: Bad status code (if raise_for_status=True)
    """
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        if raise_for_status:
            response.raise_for_status()
        return response
    except requests.exceptions.Timeout as e:
        raise LLMTimeoutError(f"Request timed out: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise LLMConnectionError(f"Connection failed: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise LLMHTTPError(
            f"HTTP {e.response.status_code}: {url}",
            status_code=e.response.status_code,
            response_text=e.response.text[:500] if e.response.text else None,
        ) from e


def http_post(
    url: str,
    json: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    raise_for_status: bool = True,
) -> requests.Response:
    """
    Make a POST request with standardized error handling.

    Args:
        url: Request URL
        json: JSON body (will set Content-Type automatically)
        headers: Optional headers dict
        timeout: Request timeout in seconds
        raise_for_status: Raise LLMHTTPError on 4xx/5xx responses

    Returns:
        requests.Response object

    Raises:
        LLMConnectionError: Connection failed
        LLMTimeoutError: Request timed out
        LLMHTTPError: Bad status code (if raise_for_status=True)
    """
    try:
        response = requests.post(url, json=json, headers=headers, timeout=timeout)
        if raise_for_status:
            response.raise_for_status()
        return response
    except requests.exceptions.Timeout as e:
        raise LLMTimeoutError(f"Request timed out: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise LLMConnectionError(f"Connection failed: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise LLMHTTPError(
            f"HTTP {e.response.status_code}: {url}",
            status_code=e.response.status_code,
            response_text=e.response.text[:500] if e.response.text else None,
        ) from e


def http_json_get(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    GET request that returns parsed JSON.

    Raises:
        LLMConnectionError: Connection failed
        LLMTimeoutError: Request timed out
        LLMHTTPError: Bad status code
        LLMResponseError: Body is not a JSON object
    """
    response = http_get(url, headers=headers, timeout=timeout)
    return _json_body(response, url)


def http_json_post(
    url: str,
    json: dict[str, Any],
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    POST request with JSON body that returns parsed JSON.

    Args:
        url: Request URL
        json: JSON body to send
        headers: Optional headers dict
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON as dict

    Raises:
        LLMConnectionError: Connection failed
        LLMTimeoutError: Request timed out
        LLMHTTPError: Bad status code
        LLMResponseError: Body is not a JSON object
    """
    response = http_post(url, json=json, headers=headers, timeout=timeout)
    return _json_body(response, url)


def _json_body(response: requests.Response, url: str) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise LLMResponseError(f"Invalid JSON response from {url}") from e
    if not isinstance(data, dict):
        raise LLMResponseError(f"Unexpected JSON payload from {url}")
    return data
