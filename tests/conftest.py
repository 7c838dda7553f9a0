"""
Pytest configuration and fixtures for FailSafe bot tests.
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from failsafe_bot.core.config import Settings
from failsafe_bot.main import create_app


def completion_response(content):
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


@pytest.fixture
def make_completion():
    return completion_response


@pytest.fixture
def settings():
    return Settings(OPENAI_API_KEY="sk-test", DYNAMODB_TABLE="BotTrainingData")


@pytest.fixture
def table():
    """A DynamoDB Table double with an empty scan result."""
    table = MagicMock()
    table.scan.return_value = {"Items": []}
    return table


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = completion_response("Mocked answer.")
    return client


@pytest.fixture
def fetcher():
    return MagicMock(return_value="<html><body><p>Fetched paragraph.</p></body></html>")


@pytest.fixture
def app(settings, table, openai_client, fetcher):
    return create_app(settings, table=table, openai_client=openai_client, fetcher=fetcher)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
