"""
Tests for the default value source.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from autofill.inputs import DEFAULT_TEXT, ValueSource, make_value_source


class TestValueSource:
    """Tests for resolving values by field name and kind."""

    def test_explicit_value_wins(self):
        source = ValueSource({"email": "me@example.com"})
        assert source("email", "text") == "me@example.com"

    def test_falsy_explicit_value_is_kept(self):
        """An empty value is a real answer, not 'no preference'."""
        source = ValueSource({"terms": ""})
        assert source("terms", "checkbox") == ""

    @pytest.mark.parametrize("kind", ["radio", "checkbox", "file", "select"])
    def test_non_text_defaults_to_none(self, kind):
        assert ValueSource()("anything", kind) is None

    @pytest.mark.parametrize("name,expected", [
        ("email", "sterling@archer.com"),
        ("phone-number", "01234567890"),
        ("postcode", "CR0 2EU"),
        ("dob-day", "1"),
        ("dob-month", "1"),
        ("dob-year", "1980"),
        ("full-name", "Sterling Archer"),
        ("description", DEFAULT_TEXT),
    ])
    def test_text_defaults_from_name(self, name, expected):
        assert ValueSource()(name, "text") == expected

    def test_inputs_are_copied(self):
        inputs = {"a": "1"}
        source = ValueSource(inputs)
        inputs["a"] = "2"
        assert source("a", "text") == "1"


class TestMakeValueSource:
    """Tests for accepting dicts or callables."""

    def test_dict(self):
        source = make_value_source({"a": "b"})
        assert isinstance(source, ValueSource)
        assert source("a", "text") == "b"

    def test_none(self):
        assert make_value_source(None)("x", "select") is None

    def test_callable_passthrough(self):
        lookup = lambda name, kind: "v"
        assert make_value_source(lookup) is lookup
