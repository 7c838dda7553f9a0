"""
OpenAI Completion Client

Sends an assembled prompt to the chat completion API and returns the
text of the first choice.
"""

import logging

from openai import OpenAI, OpenAIError

from failsafe_bot.core.errors import CompletionUnavailable

logger = logging.getLogger(__name__)


class CompletionClient:
    """Generate answers using an OpenAI chat model."""

    def __init__(self, client: OpenAI, model: str = "gpt-4"):
        """Initialize the client.

        Args:
            client: The OpenAI API client
            model: The chat model identifier to use
        """
        self.client = client
        self.model = model

    def complete(self, system_context: str, question: str) -> str:
        """Run a two-message (system/user) completion.

        Args:
            system_context: The assembled training data prompt
            question: The user's question

        Returns:
            The trimmed text of the first choice

        Raises:
            CompletionUnavailable: If the call fails or returns no answer
        """
        messages = [
            {"role": "system", "content": system_context},
            {"role": "user", "content": question}
        ]
        logger.info(f"Requesting completion from {self.model} ({len(system_context)} chars of context)")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages
            )
        except OpenAIError as e:
            logger.error(f"Completion request failed: {e}")
            raise CompletionUnavailable(str(e)) from e

        if not response.choices:
            raise CompletionUnavailable("Completion returned no choices")

        content = response.choices[0].message.content
        if content is None:
            raise CompletionUnavailable("Completion returned no content")
        return content.strip()
