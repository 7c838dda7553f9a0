"""
Pydantic Schemas

Data models for training records and the HTTP API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrainingRecord(BaseModel):
    """A stored question/answer pair.

    Attributes:
        user_id: Unique identifier generated per write
        question_id: Unique identifier generated per write
        question: Label or question text ("Article" for ingested content)
        answer: The stored content or answer
    """
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    question_id: str = Field(alias="questionId")
    question: str = ""
    answer: str = ""


class IngestResult(BaseModel):
    """Outcome of storing an article."""
    record: TrainingRecord
    summary: str


class TrainRequest(BaseModel):
    article: Optional[str] = None
    url: Optional[str] = None


class TrainResponse(BaseModel):
    message: str
    userId: str
    articleSummary: str


class QueryRequest(BaseModel):
    question: str = ""

    @field_validator("question", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        # An absent or null question is forwarded as empty text
        return "" if value is None else value


class QueryResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
