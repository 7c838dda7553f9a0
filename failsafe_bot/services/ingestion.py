"""
Content Ingestion

Accepts article text or a URL, extracts the article body, and stores it
as a training record.
"""

import uuid
import logging
from typing import Callable, Optional

import requests
from bs4 import BeautifulSoup

from failsafe_bot.core.errors import ExtractionFailed, InvalidInput
from failsafe_bot.models.schemas import IngestResult, TrainingRecord
from failsafe_bot.services.store import KnowledgeStore

logger = logging.getLogger(__name__)

ARTICLE_QUESTION = "Article"
SUMMARY_LENGTH = 500


def fetch_page(url: str, timeout: Optional[float] = None) -> str:
    """Download a page and return its HTML."""
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def extract_paragraphs(html: str) -> str:
    """Return the text of every <p> element, each followed by a newline."""
    soup = BeautifulSoup(html, "html.parser")
    return "".join(p.get_text() + "\n" for p in soup.find_all("p"))


def summarize(content: str) -> str:
    return f"Summary of article: {content[:SUMMARY_LENGTH]}..."


class ContentIngestor:
    """Turns submitted articles into stored training records."""

    def __init__(
        self,
        store: KnowledgeStore,
        fetcher: Callable[..., str] = fetch_page,
        timeout: Optional[float] = None
    ):
        """
        Args:
            store: Where new records are written
            fetcher: Callable returning the HTML for a URL
            timeout: Page fetch timeout in seconds (None waits indefinitely)
        """
        self.store = store
        self.fetcher = fetcher
        self.timeout = timeout

    def ingest(self, article: Optional[str] = None, url: Optional[str] = None) -> IngestResult:
        """Store an article, fetching it first when a URL is given.

        A URL takes precedence over article text when both are supplied.

        Raises:
            InvalidInput: If neither article nor url is provided
            ExtractionFailed: If the page has no paragraph text
            StoreUnavailable: If the record cannot be written
        """
        if url:
            logger.info(f"Fetching article from {url}")
            html = self.fetcher(url, timeout=self.timeout)
            content = extract_paragraphs(html)
            if not content:
                raise ExtractionFailed("Failed to extract article content from the URL.")
        elif article:
            content = article
        else:
            raise InvalidInput("No article or URL provided.")

        record = TrainingRecord(
            userId=str(uuid.uuid4()),
            questionId=str(uuid.uuid4()),
            question=ARTICLE_QUESTION,
            answer=content,
        )
        self.store.put(record)

        return IngestResult(record=record, summary=summarize(content))
