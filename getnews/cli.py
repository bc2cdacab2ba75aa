"""CLI entry point for getnews."""
import argparse
import json
import logging
import sys

from getnews import __version__
from getnews.errors import RecoverableError
from getnews.formatters import format_articles, format_error, format_help
from getnews.utils import DEFAULT_DISPLAY_WIDTH

logger = logging.getLogger(__name__)


def _read_articles(path: str):
    """Load a News API payload ({"articles": [...]}) or a bare article list."""
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    if isinstance(data, dict):
        data = data.get("articles", [])
    if not isinstance(data, list):
        raise RecoverableError("Expected a list of articles.")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="getnews",
        description="Render News API articles as terminal tables",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("command", choices=["articles", "help"],
                        help="What to render")
    parser.add_argument("file", nargs="?", default="-",
                        help="JSON file of articles (default: stdin)")
    parser.add_argument("--timezone", type=str, default=None,
                        help="IANA timezone for publish dates (default: UTC)")
    parser.add_argument("--no-color", action="store_true", dest="no_color",
                        help="Disable colors in the output")
    parser.add_argument("--reverse", action="store_true",
                        help="Show the newest articles first")
    parser.add_argument("--width", type=int, default=DEFAULT_DISPLAY_WIDTH,
                        help=f"Total table width (default: {DEFAULT_DISPLAY_WIDTH})")
    parser.add_argument("--no-config", action="store_true", dest="no_config",
                        help="Ignore config files (~/.getnews.yaml, ./getnews.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    from getnews.config import apply_config_defaults, get_base_url
    args = apply_config_defaults(parser, args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "help":
        sys.stdout.write(format_help(base_url=get_base_url(use_files=not args.no_config)))
        return 0

    try:
        articles = _read_articles(args.file)
    except (OSError, ValueError, RecoverableError) as e:
        logger.debug(f"[CLI] Could not read articles from {args.file}: {e}")
        if isinstance(e, FileNotFoundError):
            e = RecoverableError(f"No such file: {args.file}")
        sys.stdout.write(format_error(e))
        return 1

    sys.stdout.write(format_articles(
        articles,
        timezone=args.timezone,
        no_color=args.no_color,
        reverse=args.reverse,
        width=args.width,
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
