"""Error messages for terminal output."""
import logging
from dataclasses import dataclass
from enum import Enum

from rich.text import Text

from getnews.errors import ErrorKind
from getnews.formatters.table import TableBuilder, render_table
from getnews.utils import wrap_text

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An error occurred on our end. Please try again later."
HELP_HINT = "curl getnews.tech/:help"


class Presentation(Enum):
    RECOVERABLE = "recoverable"
    NEWS_API = "news_api"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorPresentation:
    """What the user sees for an error, decided from its ``kind``."""
    presentation: Presentation
    message: str


def classify_error(error: BaseException) -> ErrorPresentation:
    kind = getattr(error, "kind", None)
    message = str(getattr(error, "message", None) or error)
    if kind is ErrorKind.RECOVERABLE:
        return ErrorPresentation(Presentation.RECOVERABLE, message)
    if kind is ErrorKind.NEWS_API:
        return ErrorPresentation(Presentation.NEWS_API, wrap_text(message))
    logger.error(f"[Errors] Unhandled {type(error).__name__}: {error}")
    return ErrorPresentation(Presentation.INTERNAL, INTERNAL_ERROR_MESSAGE)


def format_error(error: BaseException) -> str:
    """Format an error for display, hiding internal details."""
    shown = classify_error(error)

    def populate(table: TableBuilder) -> None:
        content = Text.assemble(shown.message, "\n\n", (HELP_HINT, "red"))
        table.push(content, center=True, blank_lines=1)

    return render_table(None, populate)
