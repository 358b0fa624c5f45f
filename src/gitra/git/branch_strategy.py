"""Branch naming strategy.

Branch names are derived from issue titles (``normalize``) or from the
current branch (``bump``).  Normalized names only contain characters from
``[A-Za-z0-9_.-]``.
"""

from __future__ import annotations

import re

from ..constants import MAX_BRANCH_VERSION
from ..errors import ValidationError

_NON_WORD = re.compile(r"[^A-Za-z0-9_]+")
_VERSION_SEGMENT = re.compile(r"v([0-9]+)")


def normalize(title: str) -> str:
    """Turn free text into a branch-safe token.

    Every run of characters outside ``[A-Za-z0-9_]`` becomes a single ``-``
    and leading/trailing dashes are dropped, so ``"(test))branch"`` becomes
    ``"test-branch"``.  Input without any word characters yields ``""``.
    """
    dashed = _NON_WORD.sub("-", title).strip("-")
    return "-".join(part for part in dashed.split("-") if part)


def bump(name: str) -> str:
    """Return ``name`` with its ``.vN`` suffix incremented.

    Names without a version suffix get ``.v1``.  Each remaining dot-separated
    segment of a versioned name is normalized on its own::

        >>> bump("test_branch")
        'test_branch.v1'
        >>> bump("test.branch")
        'test-branch.v1'
        >>> bump("(test)branch.v1")
        'test-branch.v2'

    :raises ValidationError: if the next version would not fit in 32 bits
    """
    segments = name.split(".")
    if len(segments) < 2:
        return f"{normalize(name)}.v1"

    match = _VERSION_SEGMENT.fullmatch(segments[-1])
    if match is None:
        return f"{normalize(name)}.v1"

    version = int(match.group(1)) + 1
    if version > MAX_BRANCH_VERSION:
        raise ValidationError(
            f"Branch version of '{name}' cannot be bumped past {MAX_BRANCH_VERSION}"
        )
    base = ".".join(filter(None, (normalize(segment) for segment in segments[:-1])))
    return f"{base}.v{version}"
