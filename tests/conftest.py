"""Shared test fixtures for the version-gate test suite."""
from __future__ import annotations

import html
import logging
from typing import Any, Callable, Generator

import pytest

from src.host.notice_board import NoticeBoard, reset_notice_board


class RecordingHost:
    """Test double for HostServices that records every call."""

    runtime_label = "Python"
    host_label = "Host"

    def __init__(self, runtime_version: str = "8.1.0", host_version: str = "6.4") -> None:
        self.runtime_version = runtime_version
        self.host_version = host_version
        self.registered: list[tuple[str, Callable[[], Any]]] = []
        self.deactivated: list[str] = []
        self.output: list[str] = []

    def query_runtime_version(self) -> str:
        return self.runtime_version

    def query_host_version(self) -> str:
        return self.host_version

    def register_deferred_callback(self, event: str, callback: Callable[[], Any]) -> None:
        self.registered.append((event, callback))

    def deactivate_extension(self, identifier: str) -> None:
        self.deactivated.append(identifier)

    def resolve_identifier(self, path: str) -> str:
        return path.rsplit("/extensions/", 1)[-1]

    def escape_for_output(self, text: str) -> str:
        return html.escape(text, quote=True)

    def write_output(self, markup: str) -> None:
        self.output.append(markup)

    def fire(self, event: str) -> None:
        due = [cb for ev, cb in self.registered if ev == event]
        self.registered = [(ev, cb) for ev, cb in self.registered if ev != event]
        for cb in due:
            cb()


@pytest.fixture
def recording_host() -> RecordingHost:
    """Host double whose versions satisfy the default minimums."""
    return RecordingHost()


@pytest.fixture
def notice_board() -> Generator[NoticeBoard, None, None]:
    """Provide a fresh process-wide notice board."""
    board = reset_notice_board()
    yield board
    reset_notice_board()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo the JSON handler an ExtensionHost installs on the package logger."""
    yield
    package_logger = logging.getLogger("src")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables read by the settings classes."""
    for name in ("LOG_LEVEL", "HOST_VERSION", "EXTENSIONS_DIR"):
        monkeypatch.delenv(name, raising=False)
