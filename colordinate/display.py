# display.py

from typing import Optional

from rich.color import Color as RichColor, ColorParseError
from rich.panel import Panel
from rich.style import Style
from rich.syntax import Syntax
from rich.text import Text

from .errors import ValidationError
from .model import ConfigModel, GroupConfig


def _rich_color(value: Optional[str]) -> Optional[str]:
    """Return value if rich understands it, else None."""
    if not value:
        return None
    try:
        RichColor.parse(value)
    except ColorParseError:
        return None
    return value


def group_style(conf: GroupConfig) -> Style:
    """
    Terminal approximation of a highlight group.

    standout is shown as reverse and undercurl as underline.
    """
    attrs = set(conf.style or [])
    color = conf.color
    return Style(
        color=_rich_color(color.fg) if color else None,
        bgcolor=_rich_color(color.bg) if color else None,
        bold="bold" in attrs,
        italic="italic" in attrs,
        reverse=bool(attrs & {"reverse", "standout"}),
        underline=bool(attrs & {"underline", "undercurl"}),
        strike="strikethrough" in attrs,
    )


def render_document(text: str) -> Syntax:
    """YAML document with syntax highlighting."""
    return Syntax(text, "yaml", theme="ansi_dark", word_wrap=True)


def render_preview(model: ConfigModel) -> Text:
    """One line per group: its name and aliases drawn in the group's own style."""
    preview = Text()
    for name, conf in model.items():
        style = group_style(conf)
        preview.append(name, style=style)
        for alias in conf.links or []:
            preview.append("  ")
            preview.append(alias, style=style)
        preview.append("\n")
    return preview


def render_error(err: Exception) -> Panel:
    """Diagnostic panel for an error raised by colordinate."""
    body = Text(str(err))
    if isinstance(err, ValidationError) and err.key:
        body = Text.assemble(("key: ", "bold"), (err.key, "yellow"), "\n", body)
    return Panel(
        body,
        title=type(err).__name__,
        title_align="left",
        border_style="red",
        padding=(0, 1),
    )
