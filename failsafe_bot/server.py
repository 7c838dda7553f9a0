"""
FailSafe Training Bot - Server Entry Point

Serves the HTTP API (and Slack events over HTTP) with uvicorn. When a
Slack app-level token is configured, also connects to Slack in Socket Mode.

Usage:
    python -m failsafe_bot.server
"""

import logging

import uvicorn
from slack_bolt.adapter.socket_mode import SocketModeHandler

from failsafe_bot.core.config import configure_logging, load_settings
from failsafe_bot.main import create_app

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the FailSafe training bot."""
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)

    app = create_app(settings)

    socket_handler = None
    if app.state.slack_app is not None and settings.SLACK_APP_TOKEN:
        logger.info("⚡️ Connecting Slack bot in Socket Mode...")
        socket_handler = SocketModeHandler(app.state.slack_app, settings.SLACK_APP_TOKEN)
        socket_handler.connect()

    try:
        logger.info(f"Server is running on http://{settings.HTTP_HOST}:{settings.HTTP_PORT}")
        uvicorn.run(app, host=settings.HTTP_HOST, port=settings.HTTP_PORT)
    finally:
        if socket_handler is not None:
            logger.info("Closing Socket Mode connection...")
            socket_handler.close()


if __name__ == "__main__":
    main()
