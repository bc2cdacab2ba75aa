"""Bordered single-column tables rendered with rich.

Every table is exactly ``width`` display cells wide: one border column on each
side, one space of padding inside each border, and ``width - 4`` columns of
text. Styling lives in a per-render ``RenderContext`` so renders never share
state.
"""
import io
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from rich import box
from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from getnews.utils import DEFAULT_DISPLAY_WIDTH

Cell = Union[str, Text]


@dataclass(frozen=True)
class RenderContext:
    """Presentation settings for one render."""
    width: int = DEFAULT_DISPLAY_WIDTH
    color: bool = True

    @property
    def content_width(self) -> int:
        # Subtract 2 to account for the table border
        return self.width - 2

    @property
    def wrap_width(self) -> int:
        # One space of padding on each side of the content
        return self.content_width - 2


class TableBuilder:
    """Collects the rows of a table before it is rendered."""

    def __init__(self, context: RenderContext):
        self.context = context
        self.rows: List[RenderableType] = []

    def push(self, content: Cell, center: bool = False, blank_lines: int = 0) -> None:
        """Add a row, optionally centered and framed by blank lines above and below."""
        text = content.copy() if isinstance(content, Text) else Text(str(content))
        if center:
            text.justify = "center"
        self.rows.append(Padding(text, (blank_lines, 0)) if blank_lines else text)

    def __len__(self) -> int:
        return len(self.rows)


def attribution() -> Text:
    """The footer appended to every table."""
    return Text.assemble(
        ("Powered by the News API (https://newsapi.org).\n", "green"),
        ("Follow ", "green"),
        ("@omgimanerd ", "blue"),
        ("on Twitter and GitHub.\n", "green"),
        ("Open source contributions are welcome!\n", "green"),
        ("https://github.com/omgimanerd/getnews.tech", "underline blue"),
        justify="center",
    )


def _console(context: RenderContext) -> Console:
    return Console(
        file=io.StringIO(),
        record=True,
        width=context.width,
        force_terminal=True,
        force_jupyter=False,
        color_system="standard",
        no_color=False,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )


def render_rows(header: Optional[str], rows: List[RenderableType], context: RenderContext) -> str:
    """Render prepared rows into the final table string."""
    table = Table(
        box=box.SQUARE,
        width=context.width,
        show_header=header is not None,
        show_lines=True,
        padding=(0, 1),
        header_style="bold",
    )
    table.add_column(Text(header or "", style="bold"), overflow="fold")
    for row in rows:
        table.add_row(row)

    console = _console(context)
    console.print(table)
    rendered = console.export_text(styles=context.color)
    return rendered.rstrip("\n") + "\n"


def render_table(
    header: Optional[str],
    populate: Callable[[TableBuilder], None],
    no_color: bool = False,
    width: int = DEFAULT_DISPLAY_WIDTH,
) -> str:
    """Build a table, let ``populate`` push content rows, then add the footer.

    No heading row is drawn when ``header`` is None. With ``no_color`` the
    result is plain text without escape sequences.
    """
    context = RenderContext(width=width, color=not no_color)
    builder = TableBuilder(context)
    populate(builder)
    builder.push(attribution(), center=True)
    return render_rows(header, builder.rows, context)
