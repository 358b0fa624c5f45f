"""Command implementations behind the CLI.

Each command receives the invocation's ``Config`` explicitly, talks to Jira
through ``jira.api.search`` and to git through ``git.repo_ops``, and either
returns its result or raises a ``GitraError``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from .config import Config
from .constants import ISSUE_ID_PATTERN
from .errors import AmbiguousResultError, NotFoundError, RemoteError, ValidationError
from .git import repo_ops
from .git.branch_strategy import bump
from .jira import api as jira_api
from .jira.api import Issue, IssuesFound, SearchErrors
from .jira.jql import SearchFilters

logger = logging.getLogger(__name__)

_ISSUE_ID = re.compile(ISSUE_ID_PATTERN)


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Unique:
    issue: Issue


@dataclass(frozen=True)
class Ambiguous:
    issues: list[Issue]


Resolution = NotFound | Unique | Ambiguous


def resolve_unique(issues: Sequence[Issue]) -> Resolution:
    """Apply the zero/one/many policy to a list of matching issues."""
    if not issues:
        return NotFound()
    if len(issues) == 1:
        return Unique(issues[0])
    return Ambiguous(list(issues))


def validate_issue_id(issue_id: str) -> str:
    """Return ``issue_id`` if it looks like ``PROJECT-123``."""
    if not _ISSUE_ID.fullmatch(issue_id):
        raise ValidationError(
            f"Invalid issue id '{issue_id}': expected PROJECT-NUMBER, e.g. CLOUD-1"
        )
    return issue_id


def _search_issues(config: Config, filters: SearchFilters) -> list[Issue]:
    outcome = jira_api.search(config, filters)
    if isinstance(outcome, SearchErrors):
        raise RemoteError(outcome.messages)
    if isinstance(outcome, IssuesFound):
        return outcome.issues
    return []


def format_issue_line(issue: Issue, host: str) -> str:
    """One listing line: branch-style name followed by the browse URL."""
    return f"{issue.branch_name}  {issue.browse_url(host)}"


def start_issue(
    config: Config,
    issue_id: str,
    *,
    dry_run: bool = False,
    cwd: str | None = None,
) -> str:
    """Create and check out the branch for ``issue_id``.

    The id is validated before Jira is contacted.  Returns the branch name;
    with ``dry_run`` the branch is only computed.
    """
    validate_issue_id(issue_id)
    issues = _search_issues(config, SearchFilters(id=issue_id))

    resolution = resolve_unique(issues)
    if isinstance(resolution, NotFound):
        raise NotFoundError(f"Issue {issue_id} not found")
    if isinstance(resolution, Ambiguous):
        candidates = "\n".join(
            f"  {format_issue_line(issue, config.host)}" for issue in resolution.issues
        )
        raise AmbiguousResultError(
            f"{len(resolution.issues)} issues match {issue_id}:\n{candidates}",
            resolution.issues,
        )

    branch_name = resolution.issue.branch_name
    if dry_run:
        logger.info("Dry run: not creating %s", branch_name)
    else:
        repo_ops.create_branch(branch_name, cwd=cwd)
    return branch_name


def list_issues(
    config: Config,
    project: str | None = None,
    text: str | None = None,
    *,
    mine: bool = True,
) -> list[Issue]:
    """Return the issues matching the filters.

    With ``mine`` the search is restricted to issues assigned to the
    configured identity.  No match is not an error.
    """
    filters = SearchFilters(
        project=project,
        assignee=config.email if mine else None,
        text=text,
    )
    issues = _search_issues(config, filters)
    logger.info("Found %d issue(s)", len(issues))
    return issues


def bump_branch(*, dry_run: bool = False, cwd: str | None = None) -> str:
    """Create and check out the next ``.vN`` version of the current branch."""
    current = repo_ops.current_branch_name(cwd=cwd)
    branch_name = bump(current)
    logger.debug("Bumping %s to %s", current, branch_name)
    if not dry_run:
        repo_ops.create_branch(branch_name, cwd=cwd)
    return branch_name
