# scriptshell/core/window.py
"""pywebview window adapter: page names -> URLs, outlet messages -> JS."""

from __future__ import annotations

import json
import logging
from typing import Any

from scriptshell.core.bridge import Outlet
from scriptshell.core.models import InboundChannel, Page

logger = logging.getLogger(__name__)

# entry point defined by static/js/bridge.js
JS_DISPATCH = "window.shell && window.shell.dispatch({channel}, {args})"


class WebviewWindow:
    def __init__(self, window: Any, base_url: str) -> None:
        self._window = window
        self._base_url = base_url.rstrip("/")

    def url_for(self, page: Page) -> str:
        return f"{self._base_url}{page.route}"

    def show(self, page: Page) -> None:
        logger.info("Showing %s page", page.value)
        self._window.load_url(self.url_for(page))

    def attach(self, outlet: Outlet) -> None:
        """Forward every listenable channel into the page."""
        for channel in InboundChannel:
            outlet.receive(channel, self._forwarder(channel))

    def _forwarder(self, channel: InboundChannel):
        def _push(*args: Any) -> None:
            self._window.evaluate_js(
                JS_DISPATCH.format(channel=json.dumps(channel.value), args=json.dumps(list(args)))
            )
        return _push
