from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from stencil.core.errors import ScaffoldCancelled
from stencil.settings import get_settings


class RecordingPrompter:
    """Replays canned confirmation answers and records every question."""

    def __init__(self, *answers: bool, cancel: bool = False) -> None:
        self.answers = list(answers)
        self.cancel = cancel
        self.messages: list[str] = []

    def confirm(self, message: str, *, default: bool = False) -> bool:
        self.messages.append(message)
        if self.cancel:
            raise ScaffoldCancelled(message)
        if not self.answers:
            raise AssertionError(f"prompted unexpectedly: {message}")
        return self.answers.pop(0)

    def text(self, message: str, *, default: Any = None) -> Any:
        self.messages.append(message)
        if self.cancel:
            raise ScaffoldCancelled(message)
        return default


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "STENCIL_PACKAGE_MANAGER",
        "STENCIL_JSON_INDENT",
        "STENCIL_LOG_LEVEL",
        "STENCIL_ASSUME_YES",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def prompter() -> RecordingPrompter:
    return RecordingPrompter()


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    path = tmp_path / "template"
    path.mkdir()
    return path


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"


@pytest.fixture
def make_prompter():
    return RecordingPrompter
