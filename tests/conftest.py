"""
Pytest configuration for the QUWATRO suite.

Provides fixtures for:
- Settings pointing every log file at a temporary directory
- A Rich console that records output for assertions
- Scripted console input for driving menu sessions
"""

from __future__ import annotations

import io
from typing import Iterable, List

import pytest
from rich.console import Console

from quwatro.config import Settings, get_settings


class ScriptedInput:
    """
    Stand-in for console input: returns queued lines, then raises EOFError.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


def console_text(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    """
    Settings are cached process-wide; start and finish every test uncached.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """
    Settings with all logs under tmp_path and default thresholds.
    """
    return Settings(data_dir=tmp_path, log_level="DEBUG")


@pytest.fixture
def console() -> Console:
    """
    Plain-text console writing to an in-memory buffer.
    """
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def scripted():
    """
    Factory for ScriptedInput: `read = scripted(["1", "Albay", "6"])`.
    """
    return ScriptedInput


@pytest.fixture
def output(console: Console):
    """
    Callable returning everything printed to the console fixture so far.
    """
    return lambda: console_text(console)
