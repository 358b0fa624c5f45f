"""Global constants for gitra.

Limits and defaults that can be overridden through environment variables.
"""

import os

# Jira
SEARCH_PATH = "/rest/api/3/search"
BROWSE_PATH = "/browse"
ISSUE_ID_PATTERN = r"^[A-Za-z]+-[0-9]+$"

# Limits
REQUEST_TIMEOUT_S = float(os.environ.get("REQUEST_TIMEOUT_S", 10.0))
COMMAND_TIMEOUT_S = int(os.environ.get("COMMAND_TIMEOUT_S", 30))
MAX_BRANCH_VERSION = 2**32 - 1

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
