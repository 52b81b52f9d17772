"""
Multi-step form autofill for browser tests.

Usage:
    from autofill import PlaywrightSession, autofill

    autofill(PlaywrightSession(page), "/confirmation", {"email": "a@b.com"})
"""

from .config import AutofillConfig
from .errors import (
    AutofillError,
    ConfigError,
    ElementNotInteractableError,
    StuckLoopError,
    SubmitNotFoundError,
)
from .fields import FieldCompleter, FieldKind, FormControl
from .inputs import ValueSource, make_value_source
from .monitor import ConvergenceMonitor, Outcome, RunState, normalize_location
from .runner import AutofillResult, FormAutofill, autofill
from .protocols import BrowserSession
from .session import PlaywrightSession

__all__ = [
    "autofill",
    "FormAutofill",
    "AutofillResult",
    "AutofillConfig",
    "FieldCompleter",
    "FieldKind",
    "FormControl",
    "ValueSource",
    "make_value_source",
    "ConvergenceMonitor",
    "Outcome",
    "RunState",
    "normalize_location",
    "BrowserSession",
    "PlaywrightSession",
    "AutofillError",
    "ConfigError",
    "StuckLoopError",
    "SubmitNotFoundError",
    "ElementNotInteractableError",
]
