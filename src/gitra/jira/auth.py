"""Authentication helpers for the Jira API."""

from __future__ import annotations

import httpx

from .. import __version__
from ..config import Config
from ..constants import REQUEST_TIMEOUT_S


def get_jira_client(config: Config) -> httpx.Client:
    """Return an httpx client authenticated with the configured API token."""
    return httpx.Client(
        auth=httpx.BasicAuth(config.email, config.api_token),
        headers={
            "Accept": "application/json",
            "User-Agent": f"gitra/{__version__}",
        },
        timeout=REQUEST_TIMEOUT_S,
    )
