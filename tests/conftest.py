"""Pytest configuration and fixtures."""

import logging
import os
from pathlib import Path

import pytest

from screenwrite.config import ScreenwriteSettings, reset_settings, set_settings
from screenwrite.models import Element, ElementType, ScriptContent

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "cli: mark test as exercising the command-line interface",
    )


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test against default settings.

    User config files, project config files and SCREENWRITE_ environment
    variables of the machine running the tests are hidden.
    """
    for key in list(os.environ):
        if key.startswith("SCREENWRITE_"):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)

    reset_settings()
    set_settings(ScreenwriteSettings())

    yield

    reset_settings()


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore the root logger after tests that reconfigure logging."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    root_logger.setLevel(original_level)
    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)


def make_element(element_type, text="", **kwargs) -> Element:
    """Build an element from a type name and text."""
    return Element(type=ElementType.coerce(element_type), text=text, **kwargs)


@pytest.fixture
def make():
    """Expose the element factory to tests."""
    return make_element


@pytest.fixture
def kitchen_scene() -> ScriptContent:
    """A short scene in which BOB is interrupted by an action line."""
    return ScriptContent(
        elements=[
            make_element("scene-heading", "INT. KITCHEN - DAY", id="h1"),
            make_element("action", "Bob pours coffee.", id="a1"),
            make_element("character", "BOB", id="c1"),
            make_element("dialogue", "Morning.", id="d1"),
            make_element("action", "He sips. Winces.", id="a2"),
            make_element("character", "BOB (CONT'D)", id="c2"),
            make_element("dialogue", "Too hot.", id="d2"),
        ]
    )


@pytest.fixture
def script_file(tmp_path, kitchen_scene) -> Path:
    """The kitchen scene written to a JSON document."""
    path = tmp_path / "kitchen.json"
    path.write_text(
        kitchen_scene.model_dump_json(by_alias=True, exclude_none=True),
        encoding="utf-8",
    )
    return path
