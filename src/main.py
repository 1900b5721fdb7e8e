"""Main application entry point.

Serves the question page (/), the chat page (/chat) and the JSON API
(/ask, /health). Environment variables are loaded from .env file.

RUN_MODE selects the layout:
    integrated  NiceGUI mounted on the FastAPI app, one port (PORT, 8000)
    separate    API on API_PORT (8000), pages on UI_PORT (8080)
"""

import logging
import os
import sys
import threading

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

APP_TITLE = "Ask PDF"
FAVICON = "📄"


def _register_pages() -> None:
    from src.ui import ask_page, chat_page  # noqa: F401 - @ui.page registration


def _storage_secret() -> str:
    return os.getenv("NICEGUI_STORAGE_SECRET") or "ask-pdf-secret"


def run_integrated(host: str, port: int) -> None:
    """Serve pages and API from a single uvicorn server."""
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app

    _register_pages()
    app = create_app()
    ui.run_with(app, title=APP_TITLE, favicon=FAVICON, storage_secret=_storage_secret())

    logger.info(f"Pages on http://localhost:{port}/ and /chat, API docs at /docs")
    uvicorn.run(app, host=host, port=port, log_level=os.getenv("LOG_LEVEL", "info").lower())


def run_separate(host: str, api_port: int, ui_port: int) -> None:
    """Serve the API from a background thread and the pages from NiceGUI's own server.

    The pages call the answer services directly, so the two servers share
    nothing but configuration.
    """
    import uvicorn
    from nicegui import ui

    api_server = uvicorn.Server(uvicorn.Config("src.api.app:app", host=host, port=api_port))
    threading.Thread(target=api_server.run, name="ask-pdf-api", daemon=True).start()
    logger.info(f"API on http://localhost:{api_port}, pages on http://localhost:{ui_port}")

    _register_pages()
    try:
        ui.run(
            host=host,
            port=ui_port,
            title=APP_TITLE,
            favicon=FAVICON,
            storage_secret=_storage_secret(),
            reload=False,
        )
    finally:
        api_server.should_exit = True


def main() -> None:
    """Application entry point."""
    mode = (os.getenv("RUN_MODE") or "integrated").lower()
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting {APP_TITLE} in {mode} mode")

    if mode == "separate":
        run_separate(
            host,
            api_port=int(os.getenv("API_PORT", "8000")),
            ui_port=int(os.getenv("UI_PORT", "8080")),
        )
    else:
        run_integrated(host, port=int(os.getenv("PORT", "8000")))


if __name__ == "__main__":
    main()
