"""Article tables for terminal output."""
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from rich.text import Text

from getnews.formatters.table import TableBuilder, render_table
from getnews.models import Article, as_article
from getnews.utils import DEFAULT_DISPLAY_WIDTH, format_date, parse_timestamp, wrap_text

NO_ARTICLES = "No articles found on this topic."
NO_DESCRIPTION = "No description available."

ArticleLike = Union[Article, Dict[str, Any]]


def _sort_key(article: Article) -> Tuple[int, float]:
    published = parse_timestamp(article.published_at)
    # Undated articles sort before everything else.
    if published is None:
        return (0, 0.0)
    return (1, published.timestamp())


def sort_articles(articles: Sequence[ArticleLike], reverse: bool = False) -> List[Article]:
    """Return a new list ordered by publish time, oldest first.

    With ``reverse`` the ascending order is flipped, so newest come first and
    articles published at the same instant appear in reverse input order.
    """
    ordered = sorted((as_article(a) for a in articles), key=_sort_key)
    if reverse:
        ordered.reverse()
    return ordered


def article_cell(article: Article, timezone: Optional[str] = None,
                 wrap_width: int = DEFAULT_DISPLAY_WIDTH - 4) -> Text:
    """Compose the title, date, description and URL lines of one article."""
    title = wrap_text(f"{article.source_name} - {article.title}", wrap_width)
    description = wrap_text(article.description or NO_DESCRIPTION, wrap_width)
    return Text.assemble(
        (title, "bold cyan"),
        "\n",
        (format_date(article.published_at, timezone), "cyan"),
        "\n",
        description,
        "\n",
        (str(article.url), "underline green"),
    )


def format_articles(
    articles: Sequence[ArticleLike],
    timezone: Optional[str] = None,
    no_color: bool = False,
    reverse: bool = False,
    width: int = DEFAULT_DISPLAY_WIDTH,
) -> str:
    """Format a list of News API articles into a table for the terminal.

    Articles may be ``Article`` objects or raw News API dicts. The input list
    is never modified.
    """
    ordered = sort_articles(articles, reverse=reverse)

    def populate(table: TableBuilder) -> None:
        for article in ordered:
            table.push(article_cell(article, timezone, table.context.wrap_width))
        if not ordered:
            table.push(NO_ARTICLES)

    return render_table("Articles", populate, no_color=no_color, width=width)
