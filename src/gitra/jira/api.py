"""Jira REST API wrapper.

Only the issue search endpoint is used.  A search is one synchronous GET
request; the response is classified by the shape of its JSON payload, since
Jira answers logical errors (unknown project, missing permission) with a
regular body carrying ``errorMessages``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from ..config import Config
from ..constants import BROWSE_PATH, SEARCH_PATH
from ..errors import DecodeError, TransportError
from ..git.branch_strategy import normalize
from .auth import get_jira_client
from .jql import SearchFilters, render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Issue:
    """A Jira issue as returned by the search endpoint."""

    key: str
    title: str

    @property
    def branch_name(self) -> str:
        """``<key>-<normalized title>``, e.g. ``CLOUD-1-Fix-login-bug``."""
        title = normalize(self.title)
        return f"{self.key}-{title}" if title else self.key

    def browse_url(self, host: str) -> str:
        return f"{host.rstrip('/')}{BROWSE_PATH}/{self.key}"


@dataclass(frozen=True)
class IssuesFound:
    issues: list[Issue] = field(default_factory=list)


@dataclass(frozen=True)
class SearchErrors:
    messages: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NoResult:
    pass


SearchOutcome = IssuesFound | SearchErrors | NoResult


def search_url(host: str, filters: SearchFilters) -> str:
    """Build the search URL, omitting ``jql`` when no filter is set."""
    url = f"{host.rstrip('/')}{SEARCH_PATH}"
    query = render(filters)
    if query:
        url += "?jql=" + quote(query, safe="")
    return url


def _parse_issue(raw: object) -> Issue:
    try:
        return Issue(key=str(raw["key"]), title=str(raw["fields"]["summary"]))
    except (KeyError, TypeError) as exc:
        raise DecodeError(f"Malformed issue in Jira response: {raw!r}") from exc


def parse_search_response(payload: object) -> SearchOutcome:
    """Classify a decoded search response.

    Non-empty ``errorMessages`` win over everything else; a present
    ``issues`` list (even an empty one) is a result; anything else is empty.
    """
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object from Jira, got {type(payload).__name__}")

    errors = payload.get("errorMessages")
    if errors is not None and not isinstance(errors, list):
        raise DecodeError("Expected 'errorMessages' to be a list in Jira response")
    if errors:
        return SearchErrors(messages=[str(message) for message in errors])

    issues = payload.get("issues")
    if issues is not None:
        if not isinstance(issues, list):
            raise DecodeError("Expected 'issues' to be a list in Jira response")
        return IssuesFound(issues=[_parse_issue(raw) for raw in issues])

    return NoResult()


def search(config: Config, filters: SearchFilters) -> SearchOutcome:
    """Search Jira issues matching ``filters``.

    Raises ``TransportError`` if the request cannot be completed and
    ``DecodeError`` if the body is not a usable JSON document.  The HTTP
    status code is not used for classification.
    """
    url = search_url(config.host, filters)
    logger.debug("GET %s", url)

    try:
        with get_jira_client(config) as client:
            resp = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("Jira API request failed: %s", exc)
        raise TransportError(f"Jira API request failed: {exc}") from exc

    logger.debug("Jira answered %s", resp.status_code)
    try:
        payload = resp.json()
    except ValueError as exc:
        logger.error("Jira API returned a non-JSON body (status %s)", resp.status_code)
        raise DecodeError(f"Unable to parse Jira response as JSON: {exc}") from exc

    return parse_search_response(payload)
