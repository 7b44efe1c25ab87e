"""Configuration constants, API defaults, and .env loading.

WHY: Centralizes all configurable values so they are easy to find and
override. Endpoint defaults, limits, and polling timings are plain
module-level constants that the client and the tests read from one place.

HOW: python-dotenv loads the .env file on import. Defaults can be
overridden via environment variables. The load_api_key() function
provides a clear error when the key is missing.

RULES:
- API key is loaded from .env via python-dotenv, never hardcoded
- All connection defaults can be overridden via environment variables
- MAX_BATCH_SIZE and MIN_API_KEY_LENGTH are limits imposed by the service
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from youtubetranscript.errors import ErrorKind, YouTubeTranscriptError

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# API configuration defaults
# ---------------------------------------------------------------------------

DEFAULT_BASE_URL = "https://youtubetranscript.dev/api"

YOUTUBETRANSCRIPT_BASE_URL = os.getenv("YOUTUBETRANSCRIPT_BASE_URL", DEFAULT_BASE_URL)
YOUTUBETRANSCRIPT_TIMEOUT = float(os.getenv("YOUTUBETRANSCRIPT_TIMEOUT", "30"))
YOUTUBETRANSCRIPT_MAX_RETRIES = int(os.getenv("YOUTUBETRANSCRIPT_MAX_RETRIES", "2"))

# ---------------------------------------------------------------------------
# Service limits
# ---------------------------------------------------------------------------

MIN_API_KEY_LENGTH = 8
MAX_BATCH_SIZE = 100

# ---------------------------------------------------------------------------
# Job polling
# ---------------------------------------------------------------------------

DEFAULT_POLL_INTERVAL_S = 10.0
DEFAULT_POLL_TIMEOUT_S = 20 * 60  # 20 minutes

DASHBOARD_URL = "https://youtubetranscript.dev/dashboard"


def load_api_key() -> str:
    """Load the YouTubeTranscript API key from the environment.

    WHY: The API key is required for every call. Loading it from the
    environment (via .env) keeps it out of source code.

    HOW: Reads YOUTUBETRANSCRIPT_API_KEY from os.environ (populated by
    python-dotenv).

    RULES:
    - Raises a VALIDATION YouTubeTranscriptError if the key is missing or empty
    - Never returns a default/placeholder value
    """
    key = os.getenv("YOUTUBETRANSCRIPT_API_KEY", "").strip()
    if not key:
        raise YouTubeTranscriptError(
            ErrorKind.VALIDATION,
            "YouTubeTranscript API key not configured. "
            "Add YOUTUBETRANSCRIPT_API_KEY to your .env file "
            "(get one at {}).".format(DASHBOARD_URL),
        )
    return key
