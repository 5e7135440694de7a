r"""Helpers to read HTTP response details attached to errors.

HTTP client errors such as ``httpx.HTTPStatusError`` carry the response
that triggered them in a ``response`` attribute. The helpers in this
module read the status code and headers from that response without
assuming it exists, so matchers can safely inspect any error.
"""

from __future__ import annotations

__all__ = ["get_header", "get_response", "get_status_code"]

from typing import Any


def get_response(error: BaseException) -> Any | None:
    """Return the response attached to an error, if any.

    ``httpx.HTTPStatusError`` raises ``RuntimeError`` when its response
    is accessed but was never set, so any failure to read the attribute
    is treated as "no response".

    Args:
        error: The error to inspect.

    Returns:
        The attached response object, or ``None``.

    Example:
        ```pycon
        >>> from stepwise.utils.response import get_response
        >>> get_response(ValueError("boom")) is None
        True

        ```
    """
    try:
        return getattr(error, "response", None)
    except RuntimeError:
        return None


def get_status_code(error: BaseException) -> int | None:
    """Return the HTTP status code of the response attached to an error.

    Both ``status_code`` (httpx, requests) and ``status`` (aiohttp,
    urllib3) attribute names are supported.

    Args:
        error: The error to inspect.

    Returns:
        The status code, or ``None`` if the error has no response or the
        response has no integer status.

    Example:
        ```pycon
        >>> import httpx
        >>> from stepwise.utils.response import get_status_code
        >>> request = httpx.Request("GET", "https://example.com")
        >>> response = httpx.Response(503, request=request)
        >>> error = httpx.HTTPStatusError("unavailable", request=request, response=response)
        >>> get_status_code(error)
        503
        >>> get_status_code(TimeoutError("slow")) is None
        True

        ```
    """
    response = get_response(error)
    if response is None:
        return None
    for attr in ("status_code", "status"):
        status = getattr(response, attr, None)
        if isinstance(status, int) and not isinstance(status, bool):
            return status
    return None


def get_header(error: BaseException, name: str) -> str | None:
    """Return a header value from the response attached to an error.

    The lookup is case-insensitive whether or not the headers object
    itself is.

    Args:
        error: The error to inspect.
        name: The header name.

    Returns:
        The header value, or ``None`` if there is no response, no
        headers, or no such header.
    """
    response = get_response(error)
    if response is None:
        return None
    headers = getattr(response, "headers", None)
    if headers is None:
        return None
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, item in headers.items():
        if isinstance(key, str) and key.lower() == lowered:
            return item
    return None
