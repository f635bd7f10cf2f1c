"""Shared fixtures for gritter tests."""

from __future__ import annotations

import pytest

from gritter.display import ScriptSink


class RecordingSink(ScriptSink):
    """Script sink that keeps every script it is asked to run."""

    def __init__(self):
        self.scripts: list[str] = []

    def eval_javascript(self, script: str) -> None:
        self.scripts.append(script)


@pytest.fixture
def sink():
    """Provide a fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def encode_url():
    """Provide a fake per-session URL encoder."""
    return lambda url: f"/ctx/{url};jsessionid=abc"


@pytest.fixture
def builder():
    """Provide a builder with the required fields set."""
    from gritter.notification import notification

    return notification().with_title("A").with_text("B")
