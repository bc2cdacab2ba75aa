"""Usage screen for the getnews service."""
from typing import Mapping, Optional, Sequence, Union

from rich.text import Text

from getnews.arguments import VALID_ARGS, VALID_CATEGORIES, VALID_COUNTRIES, ArgumentEntry
from getnews.config import get_base_url
from getnews.formatters.table import TableBuilder, render_table
from getnews.utils import wrap_text


def _labelled_list(label: str, values: Sequence[str], wrap_width: int, style: str = "") -> Text:
    # Wrapping only swaps spaces for line breaks, so the label keeps its offset.
    prefix = f"{label}: "
    text = Text(wrap_text(prefix + ", ".join(values), wrap_width))
    if style:
        text.stylize(style, len(prefix))
    return text


def format_help(
    base_url: Optional[str] = None,
    arguments: Mapping[str, Union[ArgumentEntry, str]] = VALID_ARGS,
    countries: Sequence[str] = VALID_COUNTRIES,
    categories: Sequence[str] = VALID_CATEGORIES,
) -> str:
    """Format the help prompt: syntax, valid values, and example queries."""
    if base_url is None:
        base_url = get_base_url(use_files=False)

    def populate(table: TableBuilder) -> None:
        wrap_width = table.context.wrap_width
        lines = [
            Text(""),
            Text.assemble(
                f"Usage: curl {base_url}/",
                ("[query,]", "green"), ("arg", "yellow"), "=value,", ("arg", "yellow"), "=value",
            ),
            Text("\n"),
            _labelled_list("Valid countries", countries, wrap_width, "cyan"),
            Text("\n"),
            Text("Valid arguments:"),
        ]
        for name, entry in arguments.items():
            description = entry.description if isinstance(entry, ArgumentEntry) else str(entry)
            lines.append(Text.assemble("    ", (name, "yellow"), f": {description}"))
        lines += [
            Text("\n"),
            _labelled_list("Valid categories", categories, wrap_width),
            Text("\n"),
            Text("Example queries:"),
            Text(f"    curl {base_url}/trump"),
            Text(f"    curl {base_url}/mass+shooting,n=20"),
            Text(f"    curl {base_url}/category=business,nocolor"),
            Text(f"    curl {base_url}/category=general,page=2,reverse"),
            Text(""),
            Text(f"    firefox {base_url}/s/t8wAWZW0"),
            Text(""),
        ]
        table.push(Text("\n").join(lines))

    return render_table("Help", populate)
