"""Shared fakes and fixtures for converter unit tests."""

from unittest.mock import AsyncMock

import pytest

from src.converter.client import RecipeServiceClient
from src.converter.converter import RecipeConverter
from src.models.models import Notification


class RecordingNotifier:
    """Notification sink that remembers everything it was sent."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.notifications]

    @property
    def last(self) -> Notification:
        return self.notifications[-1]


class FakeClipboard:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[str] = []

    async def write_text(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("clipboard permission denied")
        self.writes.append(text)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def client() -> AsyncMock:
    return AsyncMock(spec=RecipeServiceClient)


@pytest.fixture
def converter(client, notifier, clipboard) -> RecipeConverter:
    return RecipeConverter(client=client, notifier=notifier, clipboard=clipboard, discard_stale=False)
