"""Main application entry point.

Runs FastAPI (port 8080) with the NiceGUI chat page mounted on it.
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
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    port = int(os.getenv("PORT", "8080"))

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Chat",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "citation-chat-secret"),
    )

    logger.info(f"Chat UI available at http://localhost:{port}/")
    logger.info(f"Health probe at http://localhost:{port}/health")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the NiceGUI chat page on its own server, without the FastAPI host."""
    from src.ui.chat_page import main as run_page

    run_page()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve only the NiceGUI page.
    Default is integrated mode (FastAPI host with the page mounted).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting chat client in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
