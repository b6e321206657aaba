from __future__ import annotations

from typing import List, Tuple

import pytest

from scriptshell.core.bridge import Bridge, Outlet
from scriptshell.core.host import HostController
from scriptshell.core.models import InboundChannel, Page
from scriptshell.core.session import Session


class FakeWindow:
    """Records navigation into a shared event log."""

    def __init__(self, events: List[Tuple[str, object]]) -> None:
        self.events = events
        self.shown: List[Page] = []

    def show(self, page: Page) -> None:
        self.shown.append(page)
        self.events.append(("show", page))


class Shell:
    def __init__(self) -> None:
        self.events: List[Tuple[str, object]] = []
        self.window = FakeWindow(self.events)
        self.outlet = Outlet()
        self.session = Session()
        self.host = HostController(self.window, self.outlet, self.session)
        self.bridge = Bridge(handler=self.host.handle)
        for channel in InboundChannel:
            self.outlet.receive(channel, self._recorder(channel.value))

    def _recorder(self, channel: str):
        def _record(*args):
            self.events.append((channel, args))
        return _record

    def messages(self, channel: str) -> list:
        return [args for name, args in self.events if name == channel]


@pytest.fixture
def shell() -> Shell:
    return Shell()
