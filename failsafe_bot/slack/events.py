"""
Slack Events Router (HTTP Mode)

FastAPI route receiving Slack Events API callbacks. Request signing and
URL verification are handled by Bolt's FastAPI adapter.
"""

from fastapi import APIRouter, Request
from slack_bolt import App
from slack_bolt.adapter.fastapi import SlackRequestHandler


def build_slack_router(slack_app: App) -> APIRouter:
    """Build the /slack/events router for a Bolt app."""
    router = APIRouter()
    handler = SlackRequestHandler(slack_app)

    @router.post("/slack/events")
    async def slack_events(req: Request):
        """Handle incoming Slack events via HTTP webhook."""
        return await handler.handle(req)

    return router
