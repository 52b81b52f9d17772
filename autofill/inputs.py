"""
Value source for form fields.

Explicit inputs win. For text fields with no explicit input a plausible
value is made up from the field name so required text fields do not block
the form. Every other kind gets None, which tells the completer to use its
own default (random radio/option, unchecked checkbox, no upload).
"""

import re
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

ValueLookup = Callable[[str, str], Any]

DEFAULT_TEXT = "Lorem ipsum dolor sit amet"

# (name pattern, value) - first match wins
TEXT_DEFAULTS: List[Tuple[str, str]] = [
    (r"email", "sterling@archer.com"),
    (r"phone|mobile|telephone", "01234567890"),
    (r"postcode|post-code|zip", "CR0 2EU"),
    (r"-day$", "1"),
    (r"-month$", "1"),
    (r"-year$", "1980"),
    (r"name", "Sterling Archer"),
]


class ValueSource:
    """Resolves a value for ``(field_name, field_kind)``."""

    def __init__(self, inputs: Optional[Dict[str, Any]] = None):
        self.inputs: Dict[str, Any] = dict(inputs or {})

    def __call__(self, name: str, kind: str) -> Any:
        # A present key wins even when its value is falsy
        if name in self.inputs:
            return self.inputs[name]
        if kind == "text":
            return self.default_text(name)
        return None

    @staticmethod
    def default_text(name: str) -> str:
        lowered = (name or "").lower()
        for pattern, value in TEXT_DEFAULTS:
            if re.search(pattern, lowered):
                return value
        return DEFAULT_TEXT


def make_value_source(inputs: Union[None, Dict[str, Any], ValueLookup] = None) -> ValueLookup:
    """Accept a dict of inputs or an existing lookup callable."""
    if callable(inputs):
        return inputs
    return ValueSource(inputs)
