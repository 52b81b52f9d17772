"""
Field Completer - sets one form control to its resolved value.

Each kind gets the smallest interaction that gets the control into the
wanted state:

- text / textarea: clear, then type the value. Hidden or disabled fields
  fail here all the time, so interaction errors are logged and ignored.
- file: upload through the session and set the remote path.
- radio: click the member whose value matches, or a random member.
- checkbox: click only when the checked state has to change.
- select: pick by value, or a random option.

Random choices skip the first member, which is usually a blank or
"please select" default.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .inputs import ValueLookup
from .protocols import BrowserSession

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    TEXT = "text"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    FILE = "file"
    SELECT = "select"
    TEXTAREA = "textarea"


# <input type="..."> values filled like plain text
TEXT_LIKE_TYPES = {"", "text", "email", "tel", "number", "password", "search", "url"}

COLLECTION_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True)
class FormControl:
    """One control found on the current page. Only valid for the current step."""
    kind: FieldKind
    name: str
    element: Any


def input_kind(input_type: Optional[str]) -> Optional[FieldKind]:
    """Map an <input> type attribute to a kind, or None for inputs we skip."""
    input_type = (input_type or "").strip().lower()
    if input_type == "radio":
        return FieldKind.RADIO
    if input_type == "checkbox":
        return FieldKind.CHECKBOX
    if input_type == "file":
        return FieldKind.FILE
    if input_type in TEXT_LIKE_TYPES:
        return FieldKind.TEXT
    return None


def css_string(value: str) -> str:
    """Escape a value for use inside a double-quoted CSS attribute selector."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def pick_fallback_index(count: int, rng=random) -> Optional[int]:
    """
    Random index in 1..count-1 for radio groups and select boxes.

    A single candidate is returned as index 0 rather than addressing a
    member that does not exist. No candidates gives None.
    """
    if count <= 0:
        return None
    if count == 1:
        return 0
    return 1 + int(rng.random() * (count - 1))


class FieldCompleter:
    """Completes single controls against a browser session."""

    def __init__(self, session: BrowserSession, get_value: ValueLookup, rng: Optional[random.Random] = None):
        self.session = session
        self.get_value = get_value
        self.rng = rng or random.Random()

    def complete(self, control: FormControl):
        """Dispatch a control to the completion method for its kind."""
        handlers = {
            FieldKind.TEXT: self.complete_text,
            FieldKind.TEXTAREA: self.complete_text,
            FieldKind.RADIO: self.complete_radio,
            FieldKind.CHECKBOX: self.complete_checkbox,
            FieldKind.FILE: self.complete_file,
            FieldKind.SELECT: self.complete_select,
        }
        return handlers[control.kind](control.element, control.name)

    def complete_text(self, element, name: str):
        value = self.get_value(name, FieldKind.TEXT.value)
        text = "" if value is None else str(value)
        logger.debug(f"Filling field: {name} with value: {text}")
        try:
            self.session.clear(element)
            self.session.set_value(element, text)
        except Exception as e:
            # Most likely a hidden or disabled field
            logger.debug(f"Could not fill field: {name} - {e}")

    def complete_file(self, element, name: str):
        value = self.get_value(name, FieldKind.FILE.value)
        if not value:
            logger.debug(f"No file specified for input {name} - ignoring")
            return
        logger.debug(f"Uploading file: {value}")
        remote = self.session.upload_file(str(value))
        logger.debug(f"Uploaded file: {value} - remote path {remote}")
        self.session.set_value(element, remote)

    def complete_radio(self, element, name: str):
        value = self.get_value(name, FieldKind.RADIO.value)
        if value is None:
            radios = self.session.elements(f'input[type="radio"][name="{css_string(name)}"]')
            index = pick_fallback_index(len(radios), self.rng)
            if index is None:
                logger.debug(f"No radios found for group: {name}")
                return
            logger.debug(f"Checking random radio: {name} (index {index} of {len(radios)})")
            self.session.click(radios[index])
            return

        own_value = self.session.get_attribute(element, "value")
        if own_value == str(value):
            logger.debug(f"Checking radio: {name} with value: {own_value}")
            self.session.click(element)

    def complete_checkbox(self, element, name: str):
        value = self.get_value(name, FieldKind.CHECKBOX.value)
        own_value = self.session.get_attribute(element, "value")
        checked = self.session.is_checked(element)

        if value is None:
            if not checked:
                logger.debug(f"Leaving checkbox: {name} blank")
                return
            logger.debug(f"Unchecking checkbox: {name}")
            self.session.click(element)
            return

        if not value:
            if not checked:
                logger.debug(f"Checking checkbox: {name} with value: {own_value}")
                self.session.click(element)
            return

        accepted = [value] if isinstance(value, str) else value
        if isinstance(accepted, COLLECTION_TYPES):
            accepted = [str(v) for v in accepted]
            if own_value in accepted and not checked:
                logger.debug(f"Checking checkbox: {name} with value: {own_value}")
                self.session.click(element)
                return
            if own_value not in accepted and checked:
                logger.debug(f"Unchecking checkbox: {name} with value: {own_value}")
                self.session.click(element)
                return

        logger.debug(f"Ignoring checkbox: {name} with value: {own_value} - looking for {value}")

    def complete_select(self, element, name: str):
        value = self.get_value(name, FieldKind.SELECT.value)
        if value is None:
            options = self.session.child_elements(element, "option")
            index = pick_fallback_index(len(options), self.rng)
            if index is None:
                logger.debug(f"Select box: {name} has no options - ignoring")
                return
            logger.debug(f"Selecting option: {index} from select box: {name}")
            self.session.select_by_index(element, index)
            return

        logger.debug(f"Selecting options: {value} from select box: {name}")
        self.session.select_by_value(element, value)
