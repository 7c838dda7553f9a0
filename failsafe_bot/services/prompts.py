"""
Prompt Assembly

Builds the system context sent to the completion model from every
stored training record plus the user's question.
"""

from typing import Iterable

from failsafe_bot.models.schemas import TrainingRecord

INTRO_TEMPLATE = (
    "You are a bot trained to answer questions about the {product} product. "
    "Here is the training data:\n\n"
)

RECORD_TEMPLATE = "Q: {question}\nA: {answer}\n\n"

QUESTION_TEMPLATE = "\nUser's Question: {question}\nAnswer:"


def build_prompt(
    records: Iterable[TrainingRecord],
    question: str,
    product: str = "FailSafe"
) -> str:
    """Concatenate all records and the question into one context string.

    Every record is included in listing order; nothing is filtered or
    truncated, so the prompt grows with the table.
    """
    parts = [INTRO_TEMPLATE.format(product=product)]
    for record in records:
        parts.append(RECORD_TEMPLATE.format(question=record.question, answer=record.answer))
    parts.append(QUESTION_TEMPLATE.format(question=question))
    return "".join(parts)
