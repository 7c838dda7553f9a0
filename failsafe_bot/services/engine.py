"""
Answer Engine

Orchestrates the lookup -> assemble -> complete cycle shared by the
HTTP query endpoint and the Slack message handler.
"""

import logging

from failsafe_bot.services.completion import CompletionClient
from failsafe_bot.services.prompts import build_prompt
from failsafe_bot.services.store import KnowledgeStore

logger = logging.getLogger(__name__)


class AnswerEngine:
    """Answers questions using every stored training record as context."""

    def __init__(self, store: KnowledgeStore, completion: CompletionClient, product: str = "FailSafe"):
        self.store = store
        self.completion = completion
        self.product = product

    def answer(self, question: str) -> str:
        """Generate an answer to a user's question.

        Args:
            question: The user's question

        Returns:
            The completion model's answer text
        """
        logger.info(f"Answering question: {question}")

        records = self.store.list_all()
        context = build_prompt(records, question, product=self.product)
        return self.completion.complete(context, question)
