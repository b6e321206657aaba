# scriptshell/core/session.py
"""Application-lifetime login state, handed to the host controller."""

from __future__ import annotations


class Session:
    """
    Holds the last password the login page sent.

    The value is overwritten on every login message and never checked,
    cleared or written to disk.
    """

    def __init__(self) -> None:
        self.password: str = ""

    def store(self, password: str) -> None:
        self.password = password

    def __repr__(self) -> str:  # never echo the secret
        return f"Session(password_set={bool(self.password)})"
