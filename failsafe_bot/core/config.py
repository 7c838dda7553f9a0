"""
Application Configuration

Centralizes configuration, credentials, and client construction.
Settings are loaded once at startup from a local dotenv file and passed
explicitly to every component that needs them.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

import boto3
from dotenv import load_dotenv
from openai import OpenAI
from slack_sdk import WebClient
from slack_bolt import App

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# =============================================================================
# Logging Configuration
# =============================================================================


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


# =============================================================================
# Settings
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Immutable once built; construct with load_settings() at process start.
    """

    # OpenAI (completion provider)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4"

    # AWS credentials (for DynamoDB)
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_REGION: str = "us-west-2"
    DYNAMODB_TABLE: str = "BotTrainingData"

    # Slack credentials
    SLACK_BOT_TOKEN: Optional[str] = None
    SLACK_SIGNING_SECRET: Optional[str] = None
    SLACK_APP_TOKEN: Optional[str] = None  # For Socket Mode

    # Bot behaviour
    PRODUCT_NAME: str = "FailSafe"
    FETCH_TIMEOUT: Optional[float] = None

    # HTTP server
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 5000

    LOG_LEVEL: str = "INFO"

    @property
    def slack_enabled(self) -> bool:
        return bool(self.SLACK_BOT_TOKEN and self.SLACK_SIGNING_SECRET)


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """Load settings from a dotenv file and the process environment.

    Variables already present in the environment win over the file. Keys
    left empty (`KEY=`) fall back to their defaults.

    Args:
        env_file: Path to the dotenv file, or None to read the environment only

    Returns:
        A frozen Settings instance
    """
    if env_file:
        load_dotenv(env_file)

    timeout = os.getenv("FETCH_TIMEOUT")

    settings = Settings(
        OPENAI_API_KEY=os.getenv("OPENAI_API_KEY"),
        OPENAI_MODEL=os.getenv("OPENAI_MODEL") or "gpt-4",
        AWS_ACCESS_KEY_ID=os.getenv("AWS_ACCESS_KEY_ID"),
        AWS_SECRET_ACCESS_KEY=os.getenv("AWS_SECRET_ACCESS_KEY"),
        AWS_REGION=os.getenv("AWS_REGION") or "us-west-2",
        DYNAMODB_TABLE=os.getenv("DYNAMODB_TABLE") or "BotTrainingData",
        SLACK_BOT_TOKEN=os.getenv("SLACK_BOT_TOKEN"),
        SLACK_SIGNING_SECRET=os.getenv("SLACK_SIGNING_SECRET"),
        SLACK_APP_TOKEN=os.getenv("SLACK_APP_TOKEN"),
        PRODUCT_NAME=os.getenv("PRODUCT_NAME") or "FailSafe",
        FETCH_TIMEOUT=float(timeout) if timeout else None,
        HTTP_HOST=os.getenv("HTTP_HOST") or "0.0.0.0",
        HTTP_PORT=int(os.getenv("HTTP_PORT") or "5000"),
        LOG_LEVEL=os.getenv("LOG_LEVEL") or "INFO",
    )
    logger.info(
        f"Loaded settings (table={settings.DYNAMODB_TABLE}, "
        f"model={settings.OPENAI_MODEL}, slack={settings.slack_enabled})"
    )
    return settings


# =============================================================================
# Client Factories
# =============================================================================


def build_dynamodb_table(settings: Settings):
    """Build the boto3 DynamoDB Table resource holding training records."""
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=settings.AWS_REGION,
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY
    )
    return dynamodb.Table(settings.DYNAMODB_TABLE)


def build_openai_client(settings: Settings) -> OpenAI:
    """Build the OpenAI API client."""
    return OpenAI(api_key=settings.OPENAI_API_KEY)


def build_slack_app(settings: Settings) -> App:
    """Build the Slack Bolt app used for event handling."""
    slack_client = WebClient(token=settings.SLACK_BOT_TOKEN)
    return App(
        client=slack_client,
        signing_secret=settings.SLACK_SIGNING_SECRET
    )
