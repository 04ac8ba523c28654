"""Main application entry point.

Runs the NiceGUI resume chat client against the backend at API_BASE_URL.
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


def run_ui() -> None:
    """Serve the chat interface.

    Binds to HOST/PORT (default 0.0.0.0:3000) so it does not collide with
    the backend's default port 8080.
    """
    from nicegui import ui

    from src.client import get_client_config
    from src.ui.chat_page import APP_TITLE, resume_chat_page  # noqa: F401 - Registers the page

    config = get_client_config()
    port = int(os.getenv("PORT", "3000"))

    logger.info(f"Resume backend: {config.api_base_url}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    ui.run(
        title=APP_TITLE,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        reload=False,
        show=False,
    )


def run_health_check() -> int:
    """Probe the backend health endpoint once.

    Returns:
        Process exit code: 0 if healthy, 1 otherwise.
    """
    import asyncio

    from src.client import ResumeApiClient

    client = ResumeApiClient()
    healthy = asyncio.run(client.check_health())
    if healthy:
        logger.info(f"Backend at {client.base_url} is up")
        return 0
    logger.error(f"Backend at {client.base_url} is unavailable")
    return 1


def main() -> None:
    """Application entry point.

    Set RUN_MODE=health to check the backend and exit instead of serving the UI.
    """
    mode = os.getenv("RUN_MODE", "ui").lower()

    logger.info(f"Starting Resume AI client in {mode} mode")

    if mode == "health":
        sys.exit(run_health_check())
    run_ui()


if __name__ in {"__main__", "__mp_main__"}:
    main()
