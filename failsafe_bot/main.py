"""
FailSafe Training Bot - Main FastAPI Application

Wires the knowledge store, completion client, and ingestion service into
the /train and /query routes, plus Slack event routes when Slack
credentials are configured.
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from openai import OpenAI
from slack_bolt import App

from failsafe_bot.api.routes import router as api_router, validation_error_handler
from failsafe_bot.core.config import (
    Settings,
    build_dynamodb_table,
    build_openai_client,
    build_slack_app,
)
from failsafe_bot.services.completion import CompletionClient
from failsafe_bot.services.engine import AnswerEngine
from failsafe_bot.services.ingestion import ContentIngestor, fetch_page
from failsafe_bot.services.store import KnowledgeStore
from failsafe_bot.slack.events import build_slack_router
from failsafe_bot.slack.handlers import register_slack_handlers

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings,
    table=None,
    openai_client: Optional[OpenAI] = None,
    fetcher: Callable[..., str] = fetch_page,
    slack_app: Optional[App] = None
) -> FastAPI:
    """Build the FastAPI application.

    Clients that are not supplied are built from settings.

    Args:
        settings: Loaded application settings
        table: DynamoDB Table resource for training records
        openai_client: OpenAI API client
        fetcher: Callable returning the HTML of a URL
        slack_app: Bolt app; built from settings when Slack is configured

    Returns:
        The configured FastAPI application
    """
    if table is None:
        table = build_dynamodb_table(settings)
    if openai_client is None:
        openai_client = build_openai_client(settings)

    store = KnowledgeStore(table)
    completion = CompletionClient(openai_client, model=settings.OPENAI_MODEL)
    engine = AnswerEngine(store, completion, product=settings.PRODUCT_NAME)
    ingestor = ContentIngestor(store, fetcher=fetcher, timeout=settings.FETCH_TIMEOUT)

    app = FastAPI(
        title="FailSafe Training Bot API",
        description="Answers questions about FailSafe from stored training articles, over HTTP and Slack",
        version="1.0.0"
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.ingestor = ingestor

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(api_router)

    if slack_app is None and settings.slack_enabled:
        slack_app = build_slack_app(settings)
    if slack_app is not None:
        register_slack_handlers(slack_app, engine)
        app.include_router(build_slack_router(slack_app))
    else:
        logger.warning("Slack credentials not configured; Slack events are disabled")
    app.state.slack_app = slack_app

    return app
