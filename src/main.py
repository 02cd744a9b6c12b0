"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat page.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI serves /health, NiceGUI serves the chat page at /.
    """
    import uvicorn
    from nicegui import ui

    from src.agent.config import get_chat_config
    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    port = int(os.getenv("PORT", "8000"))

    ui.run_with(
        app,
        title=get_chat_config().title,
        dark=True,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chat-secret"),
    )

    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the chat page on NiceGUI's own server, without the FastAPI app."""
    from nicegui import ui

    from src.agent.config import get_chat_config
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    ui.run(
        title=get_chat_config().title,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        dark=True,
        reload=False,
    )


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve only the NiceGUI page.
    Default is integrated mode (FastAPI and NiceGUI on one server).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Gemini Chat in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ in {"__main__", "__mp_main__"}:
    main()
