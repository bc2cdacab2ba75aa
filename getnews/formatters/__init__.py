"""Output formatters."""
from .articles import format_articles, sort_articles
from .errors import classify_error, format_error
from .help import format_help
from .table import RenderContext, render_table

__all__ = ["RenderContext", "classify_error", "format_articles", "format_error", "format_help", "render_table", "sort_articles"]
