"""
Standalone entry point that *always* launches a native window.
Run via:  python run_shell_desktop.py
"""

from scriptshell.main import run_desktop

# fixed port so the page URLs stay predictable
run_desktop(host="127.0.0.1", port=5050)
