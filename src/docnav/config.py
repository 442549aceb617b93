"""Runtime configuration for docnav."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class DocnavConfig:
    """Configuration for the CLI and terminal browser.

    The search limits (minimum query length, result caps, debounce delay) are
    fixed constants in ``docnav.application.search_engine`` and
    ``docnav.application.autocomplete`` and are not part of this config.
    """

    # Serialized documentation model to open when none is given
    model_path: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = False

    @classmethod
    def from_env(cls) -> "DocnavConfig":
        """Build a config from environment variables (``.env`` is loaded first)."""
        load_dotenv()
        return cls(
            model_path=os.getenv("DOCNAV_MODEL_PATH") or None,
            log_level=os.getenv("DOCNAV_LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("DOCNAV_LOG_FILE") or None,
            console_output=os.getenv("DOCNAV_LOG_CONSOLE", "false").lower() == "true",
        )
