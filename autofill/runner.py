"""
Form autofill runner.

Fills every control on the current page, submits, and keeps going until the
browser lands on the target location. Fails with ``StuckLoopError`` when
submissions stop moving the browser.

Usage:
    from autofill import PlaywrightSession, autofill

    result = autofill(PlaywrightSession(page), "/confirmation", {
        "name": "Sterling Archer",
        "terms": ["agree"],
        "evidence": "fixtures/passport.pdf",
    }, {"maxLoops": 5, "screenshots": "screenshots"})
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import AutofillConfig, PRE_SUBMIT_SCREENSHOT, DEBUG_SCREENSHOT
from .errors import StuckLoopError, SubmitNotFoundError
from .fields import FieldCompleter, FieldKind, FormControl, input_kind
from .inputs import ValueLookup, make_value_source
from .monitor import ConvergenceMonitor, Outcome
from .protocols import BrowserSession

logger = logging.getLogger(__name__)


@dataclass
class AutofillResult:
    """Where a successful run ended and how many submissions it took."""
    location: str
    steps: int


class FormAutofill:
    """Drives one session through a multi-step form."""

    def __init__(
        self,
        session: BrowserSession,
        get_value: ValueLookup,
        config: Optional[AutofillConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.session = session
        self.config = config or AutofillConfig()
        self.completer = FieldCompleter(session, get_value, rng=rng)

    # ============ Step Driver ============

    def input_controls(self) -> List[FormControl]:
        """All <input> controls we know how to fill, in page order."""
        fields = self.session.elements("input")
        logger.debug(f"Found {len(fields)} <input> elements")

        controls = []
        for field in fields:
            input_type = self.session.get_attribute(field, "type")
            name = self.session.get_attribute(field, "name") or ""
            kind = input_kind(input_type)
            if kind is None:
                logger.debug(f"Ignoring field of type {input_type}")
                continue
            controls.append(FormControl(kind=kind, name=name, element=field))
        return controls

    def tagged_controls(self, tag: str, kind: FieldKind) -> List[FormControl]:
        fields = self.session.elements(tag)
        logger.debug(f"Found {len(fields)} <{tag}> elements")
        return [
            FormControl(kind=kind, name=self.session.get_attribute(field, "name") or "", element=field)
            for field in fields
        ]

    def fill_page(self):
        """Complete every control on the current page."""
        # Inputs are read and completed one at a time: clicking a radio can
        # change what its siblings look like.
        for control in self.input_controls():
            self.completer.complete(control)

        for control in self.tagged_controls("select", FieldKind.SELECT):
            self.completer.complete(control)

        for control in self.tagged_controls("textarea", FieldKind.TEXTAREA):
            self.completer.complete(control)

    def save_screenshot(self, name: str) -> Optional[Path]:
        """Best-effort screenshot into the configured directory."""
        path = self.config.screenshot_path(name)
        if path is None:
            return None
        try:
            self.session.save_screenshot(path)
        except Exception as e:
            logger.warning(f"Could not save screenshot {path}: {e}")
            return None
        return path

    def submit(self):
        selector = self.config.submit_selector
        buttons = self.session.elements(selector)
        if not buttons:
            raise SubmitNotFoundError(selector)
        logger.info("Submitting form")
        self.session.click(buttons[0])

    def complete_step(self) -> str:
        """Fill and submit the current page. Returns the URL we ended up on."""
        self.fill_page()
        self.save_screenshot(PRE_SUBMIT_SCREENSHOT)
        self.submit()
        return self.session.current_url()

    # ============ Run loop ============

    def run(self, target: str) -> AutofillResult:
        """
        Fill and submit pages until ``target`` is reached.

        Raises:
            StuckLoopError: the location repeated ``max_loops`` times in a row
        """
        monitor = ConvergenceMonitor(target, self.config.max_loops)
        logger.info(f"Autofilling form towards {monitor.target}")

        try:
            while True:
                url = self.complete_step()
                outcome = monitor.observe(url)
                if outcome is Outcome.DONE:
                    return AutofillResult(location=monitor.target, steps=monitor.state.steps)
                if outcome is Outcome.STUCK:
                    location = monitor.state.last_location
                    screenshot = self.save_screenshot(DEBUG_SCREENSHOT)
                    logger.error(f"Progress stuck at {location}")
                    raise StuckLoopError(location, screenshot)
        except Exception:
            self.capture_page_content()
            raise

    # ============ Diagnostics ============

    def capture_page_content(self):
        """Log the visible page text. Never raises."""
        try:
            text = self.session.get_text(self.config.content_selector)
        except Exception as e:
            logger.debug(f"Could not read page content: {e}")
            return
        logger.debug("PAGE CONTENT >>>>>>")
        logger.debug(text)
        logger.debug("END PAGE CONTENT >>>>>>")


def autofill(
    session: BrowserSession,
    target: str,
    inputs: Union[None, Dict[str, Any], ValueLookup] = None,
    config: Union[None, AutofillConfig, Dict[str, Any]] = None,
) -> AutofillResult:
    """
    Complete a multi-step form until the browser reaches ``target``.

    Args:
        session: browser session positioned on the first form page
        target: path (or URL) that marks the end of the form
        inputs: dict of field values, or a ``(name, kind) -> value`` callable
        config: ``AutofillConfig`` or an options dict (``maxLoops``, ``screenshots``)
    """
    if not isinstance(config, AutofillConfig):
        config = AutofillConfig.from_options(config)
    return FormAutofill(session, make_value_source(inputs), config).run(target)
