"""Main application entry point.

Runs the NiceGUI chat interface against the configured backend.
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


def main() -> None:
    """Application entry point.

    HOST and PORT select the UI address (default 0.0.0.0:8080);
    API_BASE_URL selects the backend.
    """
    from nicegui import app, ui

    from pdfchat.client import close_api_client, get_client_config
    from pdfchat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    config = get_client_config()
    app.on_shutdown(close_api_client)

    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Using backend at {config.base_url}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    ui.run(
        title="PDF Chat",
        favicon="📄",
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        reload=False,
        show=False,
    )


if __name__ == "__main__":
    main()
