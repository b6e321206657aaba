# scriptshell/core/host.py
"""
Script Shell – host controller
==============================

Reacts to the three page messages and decides which of the two pages
the window shows:

    login(password)      -> store password; non-empty => `refresh` + main page
    refresh(ignored)     -> main page
    execute-script(path) -> fixed text on `output`

There is no way back to the login page.  Any non-empty password is
accepted; nothing is compared against a reference value.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from scriptshell.core import config
from scriptshell.core.bridge import Outlet
from scriptshell.core.models import (
    ExecuteScriptMessage,
    InboundChannel,
    LoginMessage,
    Page,
    RefreshMessage,
)
from scriptshell.core.session import Session

logger = logging.getLogger(__name__)


class Window(Protocol):
    def show(self, page: Page) -> None: ...


class HostController:
    def __init__(self, window: Window, outlet: Outlet, session: Session) -> None:
        self.window = window
        self.outlet = outlet
        self.session = session
        self.page = Page.LOGIN
        # pywebview calls js_api methods from worker threads
        self._lock = threading.Lock()

    def start(self) -> None:
        """Show the initial (login) page."""
        with self._lock:
            self._show(Page.LOGIN)

    def handle(self, message) -> None:
        """Dispatch one typed page message; handlers never overlap."""
        with self._lock:
            if isinstance(message, LoginMessage):
                self._on_login(message.password)
            elif isinstance(message, RefreshMessage):
                self._on_refresh()
            elif isinstance(message, ExecuteScriptMessage):
                self._on_execute_script(message.script_path)
            else:
                raise TypeError(f"Unsupported message: {message!r}")

    # ---- handlers ----
    def _on_login(self, password: str) -> None:
        logger.debug("login received: %r", password)
        self.session.store(password)
        if password != "":
            self.outlet.send(InboundChannel.REFRESH, "")
            self._show(Page.MAIN)

    def _on_refresh(self) -> None:
        self._show(Page.MAIN)

    def _on_execute_script(self, script_path: str) -> None:
        logger.info("execute-script requested (%s); nothing is run", script_path or "<empty>")
        self.outlet.send(InboundChannel.OUTPUT, config.OUTPUT_MESSAGE)

    def _show(self, page: Page) -> None:
        self.window.show(page)
        self.page = page
