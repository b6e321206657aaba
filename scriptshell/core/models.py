# scriptshell/core/models.py
"""
Script Shell – shared data models
=================================

Every message that crosses the page/host boundary is a **typed** value
object defined here, one variant per channel and direction.  Using
Pydantic gives us validation and a discriminated union for free.

Keep business logic out of this file – that belongs in `core/host.py`.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator


# ──────────────────────────────────────────────
# 1. Channels
# ──────────────────────────────────────────────
class OutboundChannel(str, enum.Enum):
    """Channels the page may send on (page → host)."""
    EXECUTE_SCRIPT = "execute-script"
    LOGIN = "login"
    REFRESH = "refresh"


class InboundChannel(str, enum.Enum):
    """Channels the page may listen on (host → page)."""
    SCRIPT_OUTPUT = "script-output"            # reserved, never sent yet
    SCRIPT_EXECUTION_ERROR = "script-execution-error"  # reserved
    CREATE = "create"                          # reserved
    OUTPUT = "output"
    REFRESH = "refresh"


class Page(str, enum.Enum):
    """The two static pages the window can display."""
    LOGIN = "login"
    MAIN = "main"

    @property
    def route(self) -> str:
        return "/login" if self is Page.LOGIN else "/"


# ──────────────────────────────────────────────
# 2. Page → host messages
# ──────────────────────────────────────────────
def _as_text(value: Any) -> str:
    # 0, False, [] and friends count as an empty payload
    if value is None or (not isinstance(value, str) and not value):
        return ""
    return value if isinstance(value, str) else str(value)


class LoginMessage(BaseModel):
    channel: Literal["login"] = "login"
    password: str = ""

    @field_validator("password", mode="before")
    @classmethod
    def coerce_password(cls, value: Any) -> str:
        return _as_text(value)


class RefreshMessage(BaseModel):
    channel: Literal["refresh"] = "refresh"
    payload: Any = None                        # ignored by the host


class ExecuteScriptMessage(BaseModel):
    channel: Literal["execute-script"] = "execute-script"
    script_path: str = ""                      # accepted, never used

    @field_validator("script_path", mode="before")
    @classmethod
    def coerce_path(cls, value: Any) -> str:
        return _as_text(value)


PageMessage = Annotated[
    Union[LoginMessage, RefreshMessage, ExecuteScriptMessage],
    Field(discriminator="channel"),
]

_PAYLOAD_FIELD = {
    OutboundChannel.LOGIN: "password",
    OutboundChannel.REFRESH: "payload",
    OutboundChannel.EXECUTE_SCRIPT: "script_path",
}

_ADAPTER: TypeAdapter = TypeAdapter(PageMessage)


def parse_message(channel: str, data: Any = None) -> Union[LoginMessage, RefreshMessage, ExecuteScriptMessage]:
    """
    Build the typed message for a raw (channel, payload) pair sent by the page.

    Raises ValueError if *channel* is not a page → host channel.
    """
    chan = OutboundChannel(channel)
    return _ADAPTER.validate_python({"channel": chan.value, _PAYLOAD_FIELD[chan]: data})
