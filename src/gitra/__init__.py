"""Top‑level package for gitra.

gitra bridges a local git repository with a Jira issue tracker: it searches
for issues and creates git branches named after them.  See `README.md`
for usage.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
