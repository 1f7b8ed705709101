"""Network utilities for single-attempt HTTP requests."""

from __future__ import annotations

from typing import cast

import requests

from core.exceptions import NetworkError, ProtocolError


def send_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, str | int] | None = None,
    data: dict[str, str] | None = None,
    proxies: dict[str, str] | None = None,
    timeout: float | None = None,
) -> requests.Response:
    """Make one HTTP request and fail on transport errors or error statuses.

    There is no retry: the first failure is reported to the caller.

    Args:
        method: HTTP method ("GET", "POST").
        url: The URL to request.
        headers: HTTP headers to include.
        params: Query parameters.
        data: Form-encoded body.
        proxies: Proxy mapping passed to requests.
        timeout: Request timeout in seconds, None to wait indefinitely.

    Returns:
        requests.Response object.

    Raises:
        NetworkError: If the request fails or the server answers with an error.
    """
    try:
        resp = requests.request(
            method,
            url,
            headers=headers,
            params=params,
            data=data,
            proxies=proxies,
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise NetworkError(f"Request to {url} failed", reason=str(e), url=url) from e

    try:
        resp.raise_for_status()
    except requests.HTTPError as e:
        raise NetworkError(
            f"Request to {url} failed",
            reason=resp.reason or None,
            status_code=resp.status_code,
            url=url,
        ) from e

    return resp


def read_json_object(resp: requests.Response, what: str) -> dict[str, object]:
    """Parse a response body that must be a JSON object.

    Args:
        resp: Response to parse.
        what: Short description of the payload for error messages.

    Raises:
        ProtocolError: If the body is not JSON or not an object.
    """
    try:
        data: object = resp.json()
    except ValueError as e:
        raise ProtocolError(f"Failed to parse {what}", str(e)) from e

    if not isinstance(data, dict):
        raise ProtocolError(f"Failed to parse {what}", "expected a JSON object")
    return cast(dict[str, object], data)
