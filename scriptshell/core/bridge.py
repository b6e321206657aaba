# scriptshell/core/bridge.py
"""
Script Shell – page/host bridge
===============================

The only way the displayed page and the host talk to each other.

Page → host
    `Bridge` is handed to pywebview as `js_api`; every public method
    becomes `window.pywebview.api.<name>()` in the page.  `send()` lets
    through the three page channels and silently drops everything else.

Host → page
    `Outlet` keeps the page-side listeners.  Only the five inbound
    channels can be listened on or delivered.

Both allow-lists are mirrored by `static/js/bridge.js`.
"""

from __future__ import annotations

import enum
import logging
import platform
from collections import defaultdict
from importlib import metadata
from typing import Any, Callable, DefaultDict, Dict, List

from scriptshell.core.models import InboundChannel, OutboundChannel, parse_message

try:
    import webview  # type: ignore
except ModuleNotFoundError:
    webview = None  # engine() reports "unknown"

logger = logging.getLogger(__name__)

OUTBOUND_CHANNELS = frozenset(c.value for c in OutboundChannel)
INBOUND_CHANNELS = frozenset(c.value for c in InboundChannel)


def _channel_name(channel: Any) -> str:
    # str-mixin enums hash by member name, so compare on the raw value
    if isinstance(channel, enum.Enum):
        return str(channel.value)
    return channel if isinstance(channel, str) else ""


# ──────────────────────────────────────────────
# 1. Page → host
# ──────────────────────────────────────────────
class Bridge:
    """
    js_api object for pywebview.

    *handler* receives the typed message (usually `HostController.handle`).
    Nothing is ever returned to the page.
    """

    def __init__(self, handler: Callable[[Any], None]) -> None:
        self._handler = handler

    def send(self, channel: str, data: Any = None) -> None:
        name = _channel_name(channel)
        if name not in OUTBOUND_CHANNELS:
            logger.debug("Dropped page message on channel %r", channel)
            return
        self._handler(parse_message(name, data))

    # ---- read-only version queries ----
    def runtime(self) -> str:
        return runtime_version()

    def engine(self) -> str:
        return engine_version()

    def framework(self) -> str:
        return framework_version()


def runtime_version() -> str:
    """Version of the Python interpreter running the host."""
    return platform.python_version()


def engine_version() -> str:
    """Renderer pywebview picked for the window ("unknown" before start)."""
    renderer = getattr(webview, "renderer", None) if webview is not None else None
    return str(renderer) if renderer else "unknown"


def framework_version() -> str:
    """Installed pywebview version."""
    try:
        return metadata.version("pywebview")
    except metadata.PackageNotFoundError:
        return "unknown"


def versions() -> Dict[str, str]:
    return {
        "runtime": runtime_version(),
        "engine": engine_version(),
        "framework": framework_version(),
    }


# ──────────────────────────────────────────────
# 2. Host → page
# ──────────────────────────────────────────────
class Outlet:
    """Allow-listed registry of page-side message handlers."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Callable[..., Any]]] = defaultdict(list)

    def receive(self, channel: Any, func: Callable[..., Any]) -> bool:
        """Register *func* for *channel*; returns False (and registers
        nothing) when the channel is not listenable."""
        name = _channel_name(channel)
        if name not in INBOUND_CHANNELS:
            logger.debug("Refused listener on channel %r", channel)
            return False
        self._listeners[name].append(func)
        return True

    def send(self, channel: Any, *args: Any) -> int:
        """Deliver *args* to every listener on *channel*; returns how many
        handlers were reached (0 for channels outside the allow-list)."""
        name = _channel_name(channel)
        if name not in INBOUND_CHANNELS:
            logger.debug("Dropped host message on channel %r", channel)
            return 0
        handlers = list(self._listeners.get(name, ()))
        for func in handlers:
            func(*args)
        return len(handlers)
