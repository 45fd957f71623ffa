# embedcore/config.py

import os
from dotenv import load_dotenv

# Load environment variables from the .env file into the system environment
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


# Default verbosity of the CLI when --verbose is not passed
VERBOSE = _flag("EMBEDCORE_VERBOSE")

# Escape non-ASCII characters in JSON fragments produced by the CLI
JSON_ENSURE_ASCII = _flag("EMBEDCORE_JSON_ENSURE_ASCII")
