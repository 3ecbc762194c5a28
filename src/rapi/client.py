"""Factories for the httpx clients rapi sends requests through."""

from typing import Dict, Optional

import httpx

from .config import RapiSettings, settings as default_settings


def _client_options(settings: RapiSettings) -> dict:
    # Create timeout configuration with all parameters explicitly set
    timeout_config = httpx.Timeout(
        connect=settings.connection_timeout,
        read=settings.read_timeout,
        write=settings.connection_timeout,
        pool=settings.connection_timeout
    )

    headers: Dict[str, str] = {}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent

    return {
        "timeout": timeout_config,
        "follow_redirects": settings.follow_redirects,
        "headers": headers,
    }


def create_client(settings: Optional[RapiSettings] = None, **kwargs) -> httpx.Client:
    """Build a synchronous httpx client configured from settings.

    Extra keyword arguments are passed to ``httpx.Client`` and win over the
    values derived from settings.
    """
    options = _client_options(settings or default_settings)
    options.update(kwargs)
    return httpx.Client(**options)


def create_async_client(settings: Optional[RapiSettings] = None, **kwargs) -> httpx.AsyncClient:
    """Build an asynchronous httpx client configured from settings."""
    options = _client_options(settings or default_settings)
    options.update(kwargs)
    return httpx.AsyncClient(**options)
