"""JQL query builder.

Renders a set of optional search filters into a single JQL fragment.  Values
are inserted verbatim between single quotes; embedded quotes are not
escaped, so free text containing ``'`` produces a query Jira will reject.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchFilters:
    """Optional, independent filters for an issue search."""

    project: str | None = None
    assignee: str | None = None
    id: str | None = None
    text: str | None = None


def render(filters: SearchFilters) -> str:
    """Return the JQL conjunction of the present filters.

    Fields are always emitted in the order project, assignee, id, free text,
    with ``AND `` placed before every field but the first::

        >>> render(SearchFilters(project="X", id="CLOUD-1"))
        "project='X'AND id='CLOUD-1'"

    An empty filter set renders ``""``.
    """
    clauses: list[str] = []
    for name in ("project", "assignee", "id"):
        value = getattr(filters, name)
        if value is not None:
            clauses.append(f"{name}='{value}'")
    if filters.text is not None:
        clauses.append(f"text ~ '{filters.text}'")
    return "AND ".join(clauses)
