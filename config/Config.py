# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-21
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=True)

DEFAULT_READER_ENDPOINT = "https://r.jina.ai/"
DEFAULT_READER_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class Config:
    # Jina Reader
    jina_api_key: str
    reader_endpoint: str = DEFAULT_READER_ENDPOINT
    reader_timeout_seconds: float = DEFAULT_READER_TIMEOUT_SECONDS

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "jina_api_key": "JINA_API_KEY",
        "reader_endpoint": "JINA_READER_ENDPOINT",          # e.g. https://r.jina.ai/
        "reader_timeout_seconds": "JINA_READER_TIMEOUT_SECONDS",
    }

    # Fields that must be non-empty for the reader to work
    REQUIRED_FIELDS = ("jina_api_key",)

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        timeout_raw = os.getenv(Config.ENV_VARS["reader_timeout_seconds"], "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_READER_TIMEOUT_SECONDS
        except ValueError as e:
            raise ValueError(
                f"Env var {Config.ENV_VARS['reader_timeout_seconds']} must be a number, got {timeout_raw!r}"
            ) from e

        return Config(
            jina_api_key=os.getenv(Config.ENV_VARS["jina_api_key"], "").strip(),
            reader_endpoint=(
                os.getenv(Config.ENV_VARS["reader_endpoint"], "").strip()
                or DEFAULT_READER_ENDPOINT
            ),
            reader_timeout_seconds=timeout,
        )

    def __post_init__(self):
        """
        Fail fast if any required config is missing.
        """
        missing_fields = [f for f in self.REQUIRED_FIELDS if not getattr(self, f)]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

        if self.reader_timeout_seconds <= 0:
            raise ValueError(
                f"reader_timeout_seconds must be positive, got {self.reader_timeout_seconds!r}"
            )

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "reader_endpoint": self.reader_endpoint,
            "reader_timeout_seconds": self.reader_timeout_seconds,
            "jina_api_key_set": bool(self.jina_api_key),
        }
