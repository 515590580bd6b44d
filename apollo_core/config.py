# =============================================================================
# apollo_core/config.py  -  Process configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the Apollo API key (and two optional knobs) from the environment
#   into one immutable ApolloConfig value.  main.py builds it once at startup
#   and hands it to ApolloClient; nothing else reads os.environ.
#
# ENVIRONMENT VARIABLES:
#   APOLLO_API_KEY    (required)  Master or standard API key
#   APOLLO_BASE_URL   (optional)  Defaults to https://api.apollo.io/v1
#   APOLLO_LOG_LEVEL  (optional)  Defaults to INFO
#
# A .env file in the working directory is honoured too: main.py calls
# load_dotenv() before from_env() runs.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

APOLLO_BASE_URL = "https://api.apollo.io/v1"
API_KEY_URL = "https://app.apollo.io/#/settings/integrations/api"


class ConfigError(Exception):
    """Raised when the process cannot start with the current environment."""


@dataclass(frozen=True)
class ApolloConfig:
    """Settings shared by every tool call for the life of the process."""

    api_key: str = field(repr=False)   # never echoed in logs or reprs
    base_url: str = APOLLO_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApolloConfig":
        """Build the config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (used by tests).

        Raises:
            ConfigError: APOLLO_API_KEY is unset or empty.
        """
        env = os.environ if environ is None else environ

        api_key = env.get("APOLLO_API_KEY", "")
        if not api_key:
            raise ConfigError("APOLLO_API_KEY environment variable is required")

        return cls(
            api_key=api_key,
            base_url=env.get("APOLLO_BASE_URL") or APOLLO_BASE_URL,
            log_level=(env.get("APOLLO_LOG_LEVEL") or "INFO").upper(),
        )
