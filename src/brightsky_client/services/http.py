"""
Shared HTTP session with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 429/502/503/504) with exponential
backoff.  ``BrightSkyClient`` builds one of these unless handed its own.

Usage::

    from brightsky_client.services.http import create_session

    session = create_session(timeout=10)
    resp = session.get("https://api.brightsky.dev/current_weather", params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from brightsky_client.config import get_settings


def default_retry(total: int | None = None) -> Retry:
    """
    Retry strategy for the read-only Bright Sky endpoints.

    Args:
        total: Number of retries (defaults to ``Settings.max_retries``).
    """
    return Retry(
        total=get_settings().max_retries if total is None else total,
        backoff_factor=2,  # 0s, 2s, 4s, 8s between retries
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,  # let resp.raise_for_status() handle it
    )


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``default_retry()``).
        timeout: Default timeout applied to every request
            (defaults to ``Settings.timeout``).
    """
    settings = get_settings()
    if timeout is None:
        timeout = settings.timeout

    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or default_retry())
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = settings.user_agent
    s.headers["Accept"] = "application/json"

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
