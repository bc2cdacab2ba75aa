"""Error taxonomy shared by getnews and its callers.

Each error carries an explicit ``kind`` so presentation code never has to
guess from class names or message text.
"""
from enum import Enum


class ErrorKind(Enum):
    RECOVERABLE = "recoverable"
    NEWS_API = "news_api"


class GetNewsError(Exception):
    """Base exception for errors with a known presentation kind."""

    kind: ErrorKind = ErrorKind.RECOVERABLE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecoverableError(GetNewsError):
    """An error whose message is safe to show to the end user as-is."""

    kind = ErrorKind.RECOVERABLE


class NewsAPIError(GetNewsError):
    """An error reported by the upstream News API."""

    kind = ErrorKind.NEWS_API

    def __init__(self, message: str, code: str = ""):
        super().__init__(message)
        self.code = code
