# scriptshell/core/config.py
"""
Script Shell – central configuration helper
===========================================

All modules import *only* from this file when they need:
• application constants (name, version, window geometry, fixed messages)
• resolved user-specific paths (logs/)
• environment overrides (home folder, log level)

Nothing here touches the disk at import time.  Directories are created
by `ensure_dirs()` once logging is configured.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Dict

# ──────────────────────────────────────────────
# 1. Application constants
# ──────────────────────────────────────────────
APP_NAME: str = "Script Shell"
APP_ID: str = "scriptshell"
SHELL_VERSION: str = "0.1.0"

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 5050

WINDOW: Dict[str, object] = {
    "width": 800,
    "height": 600,
    "hide_menu": True,           # no application menu bar
}

# Sent on the `output` channel after every execute-script request
OUTPUT_MESSAGE: str = "Olá, processo de renderização foi um sucesso!"

LOG_FILE_NAME = "shell.log"
DEFAULT_LOG_LEVEL = "INFO"


# ──────────────────────────────────────────────
# 2. Directory resolution helpers
# ──────────────────────────────────────────────
def _home_base() -> Path:
    """Return the root folder for all user data (`~/.scriptshell/` on Unix,
    `%LOCALAPPDATA%\\ScriptShell\\` on Windows). Can be overridden with
    the env variable `SCRIPTSHELL_HOME`."""
    if env := os.getenv("SCRIPTSHELL_HOME"):
        return Path(env).expanduser().resolve()

    if platform.system() == "Windows":
        root = Path(os.getenv("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
        return (root / "ScriptShell").resolve()

    return (Path.home() / ".scriptshell").resolve()


def base_dir() -> Path:
    return _home_base()


def log_dir() -> Path:
    return base_dir() / "logs"


def ensure_dirs() -> None:
    """Create any missing directories (no error if they exist)."""
    log_dir().mkdir(parents=True, exist_ok=True)


# ──────────────────────────────────────────────
# 3. Environment overrides
# ──────────────────────────────────────────────
def log_level() -> str:
    """Level name from `SCRIPTSHELL_LOG_LEVEL`, falling back to INFO
    for anything the logging module would not understand."""
    name = os.getenv("SCRIPTSHELL_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if name not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return DEFAULT_LOG_LEVEL
    return name


def base_url(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> str:
    return f"http://{host}:{port}"
