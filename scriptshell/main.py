# scriptshell/main.py
"""
Script Shell – FastAPI page server + desktop entry point
========================================================

Run options
-----------
• Desktop window:          python run_shell_desktop.py   (or `scriptshell`)

The FastAPI app only serves the two static pages and the page-side
bridge script; all page → host traffic goes through the pywebview
`js_api` object (see core/bridge.py).
"""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Dict

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from scriptshell.core import config
from scriptshell.core.bridge import Bridge, Outlet, versions
from scriptshell.core.host import HostController
from scriptshell.core.logs import configure_logging
from scriptshell.core.models import Page
from scriptshell.core.session import Session
from scriptshell.core.window import WebviewWindow

try:
    import webview  # type: ignore
except ModuleNotFoundError:
    webview = None  # run_desktop() will raise

logger = logging.getLogger(__name__)

# ────────────────────────────── template setup
BASE_PATH = Path(__file__).resolve().parent
TEMPLATES = Jinja2Templates(directory=str(BASE_PATH / "templates"))

app = FastAPI(
    title=config.APP_NAME,
    version=config.SHELL_VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.mount(
    "/static",
    StaticFiles(directory=str(BASE_PATH / "static"), html=False),
    name="static",
)

# ────────────────────────────── pages
def _page_context() -> Dict[str, object]:
    # versions are read per request: the renderer is only known once the GUI runs
    return {
        "app_name": config.APP_NAME,
        "shell_version": config.SHELL_VERSION,
        "versions": versions(),
    }


@app.get(Page.LOGIN.route, response_class=HTMLResponse)
async def page_login(request: Request):
    return TEMPLATES.TemplateResponse(request, "pages/login.html", _page_context())


@app.get(Page.MAIN.route, response_class=HTMLResponse)
async def page_main(request: Request):
    return TEMPLATES.TemplateResponse(request, "pages/index.html", _page_context())


# ────────────────────────────── desktop helper
def _run_uvicorn_bg(host: str, port: int) -> None:
    def _target():
        uvicorn.run(app, host=host, port=port, log_level="error")
    threading.Thread(target=_target, daemon=True).start()


def run_desktop(host: str = config.DEFAULT_HOST, port: int = config.DEFAULT_PORT) -> None:
    if webview is None:
        raise RuntimeError("pywebview not installed – run:  pip install pywebview")

    log_file = configure_logging()
    logger.info("%s %s starting (log: %s)", config.APP_NAME, config.SHELL_VERSION, log_file)

    _run_uvicorn_bg(host, port)
    time.sleep(0.8)                               # wait until Uvicorn is ready

    session = Session()
    outlet = Outlet()
    # `controller` is bound below, once the native window exists
    bridge = Bridge(handler=lambda message: controller.handle(message))

    base_url = config.base_url(host, port)
    # opens blank; controller.start() navigates to the login page
    native = webview.create_window(
        title=config.APP_NAME,
        url=None,
        width=config.WINDOW["width"],
        height=config.WINDOW["height"],
        js_api=bridge,
    )

    window = WebviewWindow(native, base_url)
    window.attach(outlet)
    controller = HostController(window, outlet, session)

    start_kwargs = {"menu": []} if config.WINDOW["hide_menu"] else {}
    webview.start(controller.start, **start_kwargs)
    logger.info("Window closed, shutting down")


def main() -> None:
    run_desktop()
