"""
Error Types

Failures raised by the services and mapped to HTTP status codes at the
request boundary.
"""


class BotError(Exception):
    """Base class for service failures."""

    status_code = 500


class InvalidInput(BotError):
    """Request is missing required input (e.g. no article or URL)."""

    status_code = 400


class ExtractionFailed(BotError):
    """A fetched page yielded no paragraph text."""

    status_code = 400


class StoreUnavailable(BotError):
    """The training data table could not be read or written."""


class CompletionUnavailable(BotError):
    """The completion API call failed or returned no answer."""
