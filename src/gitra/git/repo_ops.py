"""Git repository operations.

All operations run the git command-line interface as a subprocess in the
current (or given) working directory and inspect its exit status and output.
Failures surface as ``VcsError`` carrying git's stderr.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from collections.abc import Sequence

from ..constants import COMMAND_TIMEOUT_S
from ..errors import VcsError

logger = logging.getLogger(__name__)


def run_git(
    argv: Sequence[str],
    cwd: str | None = None,
    timeout_s: int = COMMAND_TIMEOUT_S,
) -> dict[str, object]:
    """Run a git command and return its result.

    ``argv`` excludes the leading ``git``.  The result contains exit_code,
    stdout, stderr, duration_ms and timed_out fields.  A missing git
    executable raises ``VcsError``; every other outcome is reported in the
    result.
    """
    cmd = ["git", *argv]
    timed_out = False
    start_ns = time.time_ns()

    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            shell=False,
            timeout=timeout_s,
            text=True,
            env={**os.environ, "GIT_TERMINAL_PROMPT": "0"},
        )
        stdout = proc.stdout or ""
        stderr = proc.stderr or ""
        exit_code = proc.returncode
    except subprocess.TimeoutExpired:
        timed_out = True
        stdout = ""
        stderr = "Command timed out"
        exit_code = 124
    except FileNotFoundError as exc:
        raise VcsError("git executable not found", str(exc)) from exc

    duration_ms = int((time.time_ns() - start_ns) / 1_000_000)
    logger.debug("%s exited %s in %d ms", " ".join(cmd), exit_code, duration_ms)

    return {
        "exit_code": exit_code,
        "stdout": stdout,
        "stderr": stderr,
        "duration_ms": duration_ms,
        "timed_out": timed_out,
    }


def create_branch(branch_name: str, cwd: str | None = None) -> None:
    """Create ``branch_name`` from HEAD and check it out."""
    result = run_git(["checkout", "-b", branch_name], cwd=cwd)
    if result["exit_code"] != 0:
        logger.error("git checkout -b %s failed: %s", branch_name, result["stderr"])
        raise VcsError(
            f"Failed to create branch '{branch_name}'",
            str(result["stderr"]).strip(),
        )
    logger.info("Created branch %s", branch_name)


def current_branch_name(cwd: str | None = None) -> str:
    """Return the short name of the checked out branch.

    Raises ``VcsError`` outside a repository or on a detached HEAD.
    """
    result = run_git(["symbolic-ref", "--short", "-q", "HEAD"], cwd=cwd)
    name = str(result["stdout"]).strip()
    if result["exit_code"] != 0 or not name:
        raise VcsError(
            "No current branch (not a git repository or detached HEAD)",
            str(result["stderr"]).strip(),
        )
    return name


def config_get(key: str, cwd: str | None = None) -> str | None:
    """Return the git config value for ``key``, or ``None`` if it is unset."""
    result = run_git(["config", "--get", key], cwd=cwd)
    if result["exit_code"] == 1:
        return None
    if result["exit_code"] != 0:
        raise VcsError(f"Failed to read git config '{key}'", str(result["stderr"]).strip())
    value = str(result["stdout"]).strip()
    return value or None
