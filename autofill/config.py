# Autofill configuration

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any

from dotenv import load_dotenv

from .errors import ConfigError

# Consecutive no-progress submissions before giving up
MAX_LOOPS = 3

# Page region dumped to the log when a run fails
CONTENT_SELECTOR = "#content"

SUBMIT_SELECTOR = 'input[type="submit"]'

# Screenshot filenames written into the screenshots directory
PRE_SUBMIT_SCREENSHOT = "autofill.pre-submit.png"
DEBUG_SCREENSHOT = "autofill.debug.png"


@dataclass
class AutofillConfig:
    """Options for one autofill run."""

    max_loops: int = MAX_LOOPS
    screenshots: Optional[Path] = None
    content_selector: str = CONTENT_SELECTOR
    submit_selector: str = SUBMIT_SELECTOR

    def __post_init__(self):
        if isinstance(self.max_loops, bool) or not isinstance(self.max_loops, int):
            raise ConfigError(f"max_loops must be an integer, got {self.max_loops!r}")
        if self.max_loops < 1:
            raise ConfigError(f"max_loops must be at least 1, got {self.max_loops}")
        if self.screenshots is not None:
            self.screenshots = Path(self.screenshots)

    def screenshot_path(self, name: str) -> Optional[Path]:
        """Absolute path for a screenshot, or None when screenshots are off."""
        if self.screenshots is None:
            return None
        return (self.screenshots / name).resolve()

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None) -> "AutofillConfig":
        """
        Build a config from a plain options dict.

        Accepts both ``maxLoops`` and ``max_loops`` style keys. Falsy
        values fall back to the defaults.
        """
        options = options or {}
        max_loops = options.get("max_loops") or options.get("maxLoops") or MAX_LOOPS
        screenshots = options.get("screenshots") or None
        return cls(
            max_loops=max_loops,
            screenshots=screenshots,
            content_selector=options.get("content_selector") or CONTENT_SELECTOR,
            submit_selector=options.get("submit_selector") or SUBMIT_SELECTOR,
        )

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "AutofillConfig":
        """
        Build a config from AUTOFILL_* environment variables.

        Loads ``env_file`` (or a .env in the working directory) first.
        Variables already set in the environment take precedence.
        """
        if env_file is not None:
            if Path(env_file).exists():
                load_dotenv(env_file)
        else:
            load_dotenv()

        raw_loops = os.getenv("AUTOFILL_MAX_LOOPS", "")
        try:
            max_loops = int(raw_loops) if raw_loops else MAX_LOOPS
        except ValueError:
            raise ConfigError(f"AUTOFILL_MAX_LOOPS must be an integer, got {raw_loops!r}")

        return cls(
            max_loops=max_loops,
            screenshots=os.getenv("AUTOFILL_SCREENSHOTS") or None,
            content_selector=os.getenv("AUTOFILL_CONTENT_SELECTOR") or CONTENT_SELECTOR,
            submit_selector=os.getenv("AUTOFILL_SUBMIT_SELECTOR") or SUBMIT_SELECTOR,
        )
