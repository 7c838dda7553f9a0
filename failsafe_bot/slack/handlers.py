"""
Slack Event Handlers

Answers channel and direct messages with the same lookup/complete cycle
as the /query endpoint.
"""

import logging
from typing import Callable

from slack_bolt import App

from failsafe_bot.services.engine import AnswerEngine

logger = logging.getLogger(__name__)

APOLOGY_TEXT = "Sorry, I encountered an error while processing your request."

# Edit/delete notifications carry no new user text
IGNORED_SUBTYPES = {"message_changed", "message_deleted"}


def is_bot_message(event: dict) -> bool:
    return event.get("subtype") == "bot_message" or "bot_id" in event


def handle_message(event: dict, say: Callable, engine: AnswerEngine) -> None:
    """Reply to a Slack message with a generated answer.

    Bot-originated messages are ignored to avoid reply loops. Any failure
    is reported to the channel as a fixed apology.

    Args:
        event: The Slack event dictionary
        say: Function to send messages back to the originating channel
        engine: The answer engine
    """
    if is_bot_message(event) or event.get("subtype") in IGNORED_SUBTYPES:
        return

    question = event.get("text", "")

    try:
        answer = engine.answer(question)
        say(answer)
    except Exception as e:
        logger.error(f"Error in Slack message event: {e}", exc_info=True)
        say(APOLOGY_TEXT)


def register_slack_handlers(app: App, engine: AnswerEngine) -> None:
    """Register all Slack event handlers on the Bolt app."""

    @app.event("message")
    def on_message(event: dict, say) -> None:
        handle_message(event, say, engine)

    logger.info("Slack event handlers registered.")
