"""
Purpose: Single-shot HTTP helpers.
Constraints: No business logic; callers handle response validation. No retries.
"""

from __future__ import annotations

import os
from typing import Optional

import requests

from scrap2md.core.errors import TransportError

DEFAULT_USER_AGENT = "scrap2md/0.1 (+https://zenn.dev)"


def request_once(
    method: str,
    url: str,
    *,
    timeout: Optional[float] = None,
    **kwargs,
) -> requests.Response:
    """Issue one request; network failures become TransportError."""
    timeout = timeout if timeout is not None else float(os.getenv("HTTP_TIMEOUT", "30"))
    headers = dict(kwargs.pop("headers", None) or {})
    headers.setdefault("User-Agent", DEFAULT_USER_AGENT)
    try:
        return requests.request(method, url, headers=headers, timeout=timeout, **kwargs)
    except requests.RequestException as exc:
        raise TransportError(f"{method} {url} failed: {exc}") from exc


def get_once(url: str, **kwargs) -> requests.Response:
    return request_once("GET", url, **kwargs)
