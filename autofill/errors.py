"""Exceptions raised by the form autofill runner."""

from pathlib import Path
from typing import Optional


class AutofillError(Exception):
    """Base class for autofill failures."""


class ConfigError(AutofillError, ValueError):
    """Invalid autofill configuration."""


class SubmitNotFoundError(AutofillError):
    """No submit control matched on the current page."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"No submit control found for selector {selector}")


class StuckLoopError(AutofillError):
    """
    The form stopped advancing.

    Raised when consecutive submissions keep landing on the same location
    until the configured loop limit is reached.
    """

    def __init__(self, location: str, screenshot: Optional[Path] = None):
        self.location = location
        self.screenshot = screenshot
        message = f"Progress stuck at {location}"
        if screenshot:
            message += f" - screenshot saved to {screenshot}"
        super().__init__(message)


class ElementNotInteractableError(AutofillError):
    """A control is on the page but hidden, so it cannot be filled or clicked."""

    def __init__(self, action: str, name: Optional[str] = None):
        self.action = action
        self.name = name
        super().__init__(f"Cannot {action} hidden element {name or ''}".rstrip())
