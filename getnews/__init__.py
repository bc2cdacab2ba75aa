"""getnews — terminal-friendly news tables."""
__version__ = "2.0.0"
