"""
Tests for AutofillConfig.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from autofill.config import AutofillConfig, MAX_LOOPS
from autofill.errors import ConfigError


ENV_VARS = [
    "AUTOFILL_MAX_LOOPS",
    "AUTOFILL_SCREENSHOTS",
    "AUTOFILL_CONTENT_SELECTOR",
    "AUTOFILL_SUBMIT_SELECTOR",
]


# ============ Fixtures ============

@pytest.fixture
def clean_env(monkeypatch):
    """Remove AUTOFILL_* variables for the test."""
    for name in ENV_VARS:
        # setenv first so values loaded from .env are removed on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestDefaults:
    """Tests for default values and validation."""

    def test_default_values(self):
        config = AutofillConfig()

        assert config.max_loops == MAX_LOOPS == 3
        assert config.screenshots is None
        assert config.content_selector == "#content"
        assert config.submit_selector == 'input[type="submit"]'
        assert config.screenshot_path("x.png") is None

    @pytest.mark.parametrize("value", [0, -1, "3", 2.5, True])
    def test_invalid_max_loops(self, value):
        with pytest.raises(ConfigError):
            AutofillConfig(max_loops=value)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            AutofillConfig(max_loops=0)

    def test_screenshot_path(self, tmp_path):
        config = AutofillConfig(screenshots=str(tmp_path))
        assert config.screenshot_path("a.png") == (tmp_path / "a.png").resolve()


class TestFromOptions:
    """Tests for building config from an options dict."""

    def test_camel_case_keys(self, tmp_path):
        config = AutofillConfig.from_options({"maxLoops": 5, "screenshots": str(tmp_path)})

        assert config.max_loops == 5
        assert config.screenshots == tmp_path

    def test_snake_case_keys(self):
        config = AutofillConfig.from_options({"max_loops": 2, "submit_selector": "button.submit"})

        assert config.max_loops == 2
        assert config.submit_selector == "button.submit"

    def test_none_and_falsy_use_defaults(self):
        assert AutofillConfig.from_options(None) == AutofillConfig()
        assert AutofillConfig.from_options({"maxLoops": 0}).max_loops == MAX_LOOPS


class TestFromEnv:
    """Tests for environment / .env loading."""

    def test_reads_environment(self, clean_env, tmp_path):
        clean_env.setenv("AUTOFILL_MAX_LOOPS", "7")
        clean_env.setenv("AUTOFILL_SCREENSHOTS", str(tmp_path))

        config = AutofillConfig.from_env(env_file=tmp_path / "missing.env")

        assert config.max_loops == 7
        assert config.screenshots == tmp_path

    def test_reads_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("AUTOFILL_MAX_LOOPS=4\nAUTOFILL_CONTENT_SELECTOR=main\n")

        config = AutofillConfig.from_env(env_file=env_file)

        assert config.max_loops == 4
        assert config.content_selector == "main"

    def test_bad_integer(self, clean_env, tmp_path):
        clean_env.setenv("AUTOFILL_MAX_LOOPS", "many")

        with pytest.raises(ConfigError):
            AutofillConfig.from_env(env_file=tmp_path / "missing.env")
