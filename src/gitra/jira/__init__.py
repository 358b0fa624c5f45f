"""Jira API integration."""

from .api import (
    Issue,
    IssuesFound,
    NoResult,
    SearchErrors,
    SearchOutcome,
    search,
)
from .auth import get_jira_client
from .jql import SearchFilters, render

__all__ = [
    "get_jira_client",
    "search",
    "render",
    "SearchFilters",
    "Issue",
    "IssuesFound",
    "SearchErrors",
    "NoResult",
    "SearchOutcome",
]
