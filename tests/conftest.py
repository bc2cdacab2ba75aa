"""Shared test fixtures and configuration."""
import pytest
from rich.text import Text

from getnews.models import Article

_CONFIG_ENV = ("BASE_URL", "GETNEWS_WIDTH", "GETNEWS_TIMEZONE", "GETNEWS_NO_COLOR",
               "GETNEWS_REVERSE", "GETNEWS_BASE_URL", "GETNEWS_VERBOSE", "NO_COLOR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep user config files and GETNEWS_* variables out of tests."""
    for key in _CONFIG_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


def plain(rendered: str) -> str:
    """Drop ANSI styling from rendered output."""
    return Text.from_ansi(rendered).plain


def make_article(title="Test", url="https://example.com", source_name="Test Source", **kw):
    return Article(title=title, url=url, source_name=source_name, **kw)


@pytest.fixture
def news_api_payload():
    return [
        {
            "source": {"id": "bbc-news", "name": "BBC News"},
            "title": "Second story",
            "description": "Something happened in the afternoon.",
            "url": "https://bbc.co.uk/2",
            "publishedAt": "2024-03-03T15:00:00Z",
        },
        {
            "source": {"id": None, "name": "Reuters"},
            "title": "First story",
            "description": None,
            "url": "https://reuters.com/1",
            "publishedAt": "2024-03-03T09:00:00Z",
        },
        {
            "source": {"id": None, "name": "AP"},
            "title": "Third story",
            "description": "Late news.",
            "url": "https://apnews.com/3",
            "publishedAt": "2024-03-03T21:05:00Z",
        },
    ]
