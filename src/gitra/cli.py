"""Command-line entry point for gitra.

Configures logging to stderr, loads configuration for the commands that talk
to Jira, and maps every ``GitraError`` to a message on stderr and exit
status 1.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from functools import wraps

import click
from dotenv import load_dotenv

from . import __version__, commands
from .config import Config
from .constants import DEFAULT_LOG_LEVEL
from .errors import GitraError

logger = logging.getLogger(__name__)


def _reports_errors(func: Callable[..., None]) -> Callable[..., None]:
    """Turn a ``GitraError`` into an error message and exit status 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except GitraError as exc:
            logger.debug("%s failed", func.__name__, exc_info=True)
            click.echo(f"error: {exc}", err=True)
            sys.exit(1)

    return wrapper


@click.group()
@click.version_option(__version__, prog_name="gitra")
@click.option("--verbose", "-v", is_flag=True, help="Log debug information to stderr")
def cli(verbose):
    """Create git branches from Jira issues."""
    load_dotenv()
    configured = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = logging.DEBUG if verbose else getattr(logging, configured.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("issue_id")
@click.option("--dry-run", is_flag=True, help="Print the branch name without creating it")
@_reports_errors
def start(issue_id, dry_run):
    """Create a branch for ISSUE_ID (PROJECT-NUMBER)."""
    commands.validate_issue_id(issue_id)
    config = Config.load()
    branch_name = commands.start_issue(config, issue_id, dry_run=dry_run)
    if dry_run:
        click.echo(branch_name)
    else:
        click.echo(f"Switched to a new branch '{branch_name}'")


def _print_issues(config: Config, issues) -> None:
    if not issues:
        click.echo("No issues found.")
        return
    for issue in issues:
        click.echo(commands.format_issue_line(issue, config.host))


@cli.command(name="list")
@click.option("--project", "-p", help="Only issues of this project key")
@click.option("--filter", "-f", "text", help="Free-text filter")
@_reports_errors
def list_mine(project, text):
    """List issues assigned to you."""
    config = Config.load()
    _print_issues(config, commands.list_issues(config, project, text))


@cli.command(name="list-all")
@click.option("--project", "-p", help="Only issues of this project key")
@click.option("--filter", "-f", "text", help="Free-text filter")
@_reports_errors
def list_all(project, text):
    """List issues regardless of assignee."""
    config = Config.load()
    _print_issues(config, commands.list_issues(config, project, text, mine=False))


@cli.command()
@click.option("--dry-run", is_flag=True, help="Print the branch name without creating it")
@_reports_errors
def bump(dry_run):
    """Create the next .vN version of the current branch."""
    branch_name = commands.bump_branch(dry_run=dry_run)
    if dry_run:
        click.echo(branch_name)
    else:
        click.echo(f"Switched to a new branch '{branch_name}'")


def main() -> None:
    """Entrypoint for the ``gitra`` console script."""
    cli()
