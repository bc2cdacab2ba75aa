"""Data models for getnews."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Union

Timestamp = Union[str, datetime, int, float, None]


@dataclass(frozen=True)
class Article:
    title: str
    url: str
    source_name: str
    description: Optional[str] = None
    published_at: Timestamp = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Article":
        """Build an Article from a News API article object.

        Missing fields become empty strings (or None for description and
        publishedAt); nothing is validated here.
        """
        source = data.get("source") or {}
        if isinstance(source, dict):
            source_name = source.get("name") or ""
        else:
            source_name = str(source)
        return cls(
            title=data.get("title") or "",
            url=data.get("url") or "",
            source_name=source_name,
            description=data.get("description"),
            published_at=data.get("publishedAt"),
        )


def as_article(value: Union[Article, Dict[str, Any]]) -> Article:
    """Accept either an Article or a raw News API dict."""
    if isinstance(value, Article):
        return value
    return Article.from_dict(value)
