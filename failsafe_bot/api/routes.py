"""
Training and Query Routes

HTTP endpoints for adding articles to the training data and asking
questions against it. Failures are mapped to a JSON error body here.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from failsafe_bot.core.errors import ExtractionFailed, InvalidInput
from failsafe_bot.models.schemas import (
    ErrorResponse,
    QueryRequest,
    QueryResponse,
    TrainRequest,
    TrainResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Status for bodies that fail validation, per route
VALIDATION_ERROR_STATUS = {"/train": 400, "/query": 500}


def _error(status_code: int, e: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=str(e)).model_dump())


@router.post("/train", response_model=TrainResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
def train(request: Request, body: Optional[TrainRequest] = None):
    """Store an article (given inline or by URL) as training data."""
    if body is None:
        body = TrainRequest()
    ingestor = request.app.state.ingestor
    try:
        result = ingestor.ingest(article=body.article, url=body.url)
    except (InvalidInput, ExtractionFailed) as e:
        logger.warning(f"Rejected /train request: {e}")
        return _error(e.status_code, e)
    except Exception as e:
        logger.error(f"Error in /train route: {e}", exc_info=True)
        return _error(500, e)

    return TrainResponse(
        message="Article added successfully!",
        userId=result.record.user_id,
        articleSummary=result.summary,
    )


@router.post("/query", response_model=QueryResponse, responses={500: {"model": ErrorResponse}})
def query(request: Request, body: Optional[QueryRequest] = None):
    """Answer a question using the stored training data."""
    if body is None:
        body = QueryRequest()
    engine = request.app.state.engine
    try:
        answer = engine.answer(body.question)
    except Exception as e:
        logger.error(f"Error in /query route: {e}", exc_info=True)
        return _error(500, e)

    return QueryResponse(answer=answer)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report an unparseable request body as a JSON error body."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    logger.warning(f"Invalid request body for {request.url.path}: {details}")
    status_code = VALIDATION_ERROR_STATUS.get(request.url.path, 400)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=f"Invalid request body: {details}").model_dump()
    )
