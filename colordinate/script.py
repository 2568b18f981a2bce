# script.py

from typing import List

from .model import ConfigModel

# Sentinels understood by `:highlight` for "no value"
UNSET_COLOR = "None"
NO_STYLE = "NONE"

GENERATED_HEADER = '" Generated by colordinate'


def define_directive(name: str, fg=None, bg=None, style=None) -> str:
    """Return a `hi!` line defining the colors and attributes of one group."""
    attrs = ",".join(style or [])
    return (
        f"hi! {name} guifg={fg or UNSET_COLOR} guibg={bg or UNSET_COLOR} "
        f"gui={attrs or NO_STYLE}"
    )


def link_directive(alias: str, target: str) -> str:
    """Return a `hi! link` line making alias inherit from target."""
    return f"hi! link {alias} {target}"


def to_script(model: ConfigModel) -> str:
    """
    Project a ConfigModel onto highlight commands.

    Emits, in model order, one definition per group followed by one link
    per alias of that group.
    """
    lines: List[str] = []
    for name, conf in model.items():
        color = conf.color
        lines.append(define_directive(
            name,
            fg=color.fg if color else None,
            bg=color.bg if color else None,
            style=conf.style,
        ))
        lines.extend(link_directive(alias, name) for alias in conf.links or [])
    return "\n".join(lines)


def reset_preamble(csname: str) -> str:
    """Commands that clear syntax state and claim the colorscheme name."""
    return "\n".join([
        "if exists('syntax_on')",
        "  syntax reset",
        "endif",
        f"let g:colors_name = '{csname}'",
    ])


def to_colorscheme(model: ConfigModel, csname: str) -> str:
    """Render a complete colorscheme file for model named csname."""
    return "\n".join([
        GENERATED_HEADER,
        reset_preamble(csname),
        "",
        "",
    ]) + to_script(model) + "\n"
