from __future__ import annotations

import pytest

from scriptshell.core.models import (
    ExecuteScriptMessage,
    LoginMessage,
    Page,
    RefreshMessage,
    parse_message,
)


def test_parse_each_channel() -> None:
    assert parse_message("login", "pw") == LoginMessage(password="pw")
    assert parse_message("refresh", [1, 2]) == RefreshMessage(payload=[1, 2])
    assert parse_message("execute-script", "/x") == ExecuteScriptMessage(script_path="/x")


@pytest.mark.parametrize(
    "data, expected",
    [(None, ""), ("", ""), (123, "123"), (True, "True"), (0, ""), (False, ""), ([], "")],
)
def test_login_payload_is_coerced_to_text(data, expected: str) -> None:
    assert parse_message("login", data).password == expected


def test_parse_rejects_host_channels() -> None:
    with pytest.raises(ValueError):
        parse_message("output", "x")


def test_page_routes() -> None:
    assert Page.LOGIN.route == "/login"
    assert Page.MAIN.route == "/"



@pytest.mark.parametrize("data", [0, False, []])
def test_falsy_login_payload_stays_on_login_page(shell, data) -> None:
    shell.bridge.send("login", data)

    assert shell.host.page is Page.LOGIN
    assert shell.window.shown == []
    assert shell.session.password == ""
