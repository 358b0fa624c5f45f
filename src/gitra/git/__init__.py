"""Git integration: branch naming and the git command-line wrapper."""

from .branch_strategy import bump, normalize
from .repo_ops import config_get, create_branch, current_branch_name, run_git

__all__ = [
    "normalize",
    "bump",
    "run_git",
    "create_branch",
    "current_branch_name",
    "config_get",
]
