"""Registry of query arguments understood by the getnews service.

Single source of truth for the help screen. Order in VALID_ARGS is the order
arguments are listed to the user.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class ArgumentEntry:
    """Metadata for one query argument."""
    name: str
    description: str


VALID_ARGS: Dict[str, ArgumentEntry] = {
    entry.name: entry
    for entry in (
        ArgumentEntry("n", "the number of articles to display"),
        ArgumentEntry("page", "the page of articles to display"),
        ArgumentEntry("category", "the category of articles to display"),
        ArgumentEntry("country", "the country of the news sources to query"),
        ArgumentEntry("nocolor", "disables colors in the output"),
        ArgumentEntry("reverse", "shows the articles in reverse chronological order"),
    )
}

VALID_COUNTRIES: List[str] = [
    "ae", "ar", "at", "au", "be", "bg", "br", "ca", "ch", "cn", "co", "cu",
    "cz", "de", "eg", "fr", "gb", "gr", "hk", "hu", "id", "ie", "il", "in",
    "it", "jp", "kr", "lt", "lv", "ma", "mx", "my", "ng", "nl", "no", "nz",
    "ph", "pl", "pt", "ro", "rs", "ru", "sa", "se", "sg", "si", "sk", "th",
    "tr", "tw", "ua", "us", "ve", "za",
]

VALID_CATEGORIES: List[str] = [
    "business", "entertainment", "general", "health", "science", "sports",
    "technology",
]
