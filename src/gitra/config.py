"""Configuration loading for gitra.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.  Values that are not set in
the environment are read from git configuration, which is where the
remediation hints point users.

Required values (environment variable / git config key):
- JIRA_HOST / jira.host
- JIRA_EMAIL / user.email
- JIRA_API_TOKEN / jira.token
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .errors import ConfigError
from .git import repo_ops

logger = logging.getLogger(__name__)

# (field name, environment variable, git config key, remediation command)
_SOURCES = [
    ("host", "JIRA_HOST", "jira.host", "git config --global jira.host https://<your-site>.atlassian.net"),
    ("email", "JIRA_EMAIL", "user.email", "git config --global user.email <you@example.com>"),
    ("api_token", "JIRA_API_TOKEN", "jira.token", "git config --global jira.token <api-token>"),
]


@dataclass(frozen=True)
class Config:
    """Configuration values for a single invocation."""

    host: str
    email: str
    api_token: str = field(repr=False)

    @classmethod
    def load(cls, cwd: str | None = None) -> Config:
        """Load configuration from the environment, then git config.

        The `.env` file is loaded if present.  Raises `ConfigError` naming the
        first missing key together with the command that sets it.
        """
        load_dotenv()
        values: dict[str, str] = {}
        for name, env_var, git_key, remediation in _SOURCES:
            value = os.getenv(env_var)
            if value:
                logger.debug("%s taken from $%s", name, env_var)
            else:
                value = repo_ops.config_get(git_key, cwd=cwd)
                if value:
                    logger.debug("%s taken from git config %s", name, git_key)
            if not value:
                raise ConfigError(
                    f"Missing configuration '{git_key}'. "
                    f"Set it with `{remediation}` or export {env_var}."
                )
            values[name] = value.strip()

        return cls(
            host=values["host"].rstrip("/"),
            email=values["email"],
            api_token=values["api_token"],
        )
