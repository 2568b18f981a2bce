# model.py

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from .attributes import HIGHLIGHT_ATTRS, is_highlight_attr, ordered_attrs
from .errors import ValidationError

# Canonical per-record field order in the document
FIELD_ORDER = ("color", "style", "links")


@dataclass
class Color:
    """Foreground/background pair. Each side is an opaque color string or None."""
    fg: Optional[str] = None
    bg: Optional[str] = None


@dataclass
class GroupConfig:
    """
    Configuration of a single highlight group.

    The record holds:
    - color: optional Color
    - style: optional attribute list, always in HIGHLIGHT_ATTRS order
    - links: optional list of group names that alias this group
    - extra: unrecognized fields, preserved in their original order
    """
    color: Optional[Color] = None
    style: Optional[List[str]] = None
    links: Optional[List[str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ConfigModel:
    """Ordered mapping of highlight group name to its GroupConfig."""
    groups: Dict[str, GroupConfig] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self):
        return iter(self.groups)

    def __contains__(self, name: str) -> bool:
        return name in self.groups

    def __getitem__(self, name: str) -> GroupConfig:
        return self.groups[name]

    def items(self):
        return self.groups.items()


def _color_value(name: str, side: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(
            f"The color '{side}' of '{name}' must be a string. Actual: {value!r}. "
            "Quote values such as off, yes or 0x10.",
            key=f"{name}.color.{side}",
        )
    return value


def _parse_color(name: str, value: Any) -> Color:
    if not isinstance(value, dict):
        raise ValidationError(
            f"The value corresponding to attribute 'color' of '{name}' must be a mapping. "
            f"Actual: {value!r}.",
            key=f"{name}.color",
        )
    return Color(
        fg=_color_value(name, "fg", value.get("fg")),
        bg=_color_value(name, "bg", value.get("bg")),
    )


def _parse_style(name: str, value: Any) -> List[str]:
    if not isinstance(value, list):
        raise ValidationError(
            f"The value corresponding to attribute 'style' of '{name}' must be an attribute list. "
            f"Actual: {value!r}.",
            key=f"{name}.style",
            allowed=HIGHLIGHT_ATTRS,
        )
    for token in value:
        if not is_highlight_attr(token):
            raise ValidationError(
                f"Unknown attribute '{token}' in 'style' of '{name}'.",
                key=f"{name}.style",
                allowed=HIGHLIGHT_ATTRS,
            )
    return ordered_attrs(value)


def _parse_links(name: str, value: Any) -> List[str]:
    if not isinstance(value, list):
        raise ValidationError(
            f"The value corresponding to attribute 'links' of '{name}' must be a string list. "
            f"Actual: {value!r}.",
            key=f"{name}.links",
        )
    for alias in value:
        if not isinstance(alias, str):
            raise ValidationError(
                f"The value corresponding to attribute 'links' of '{name}' must be a string list. "
                f"Invalid element: {alias!r}.",
                key=f"{name}.links",
            )
        if alias == name:
            raise ValidationError(
                f"Group '{name}' cannot link to itself.",
                key=f"{name}.links",
            )
    return list(value)


def _parse_group(name: str, conf: Any) -> GroupConfig:
    if not isinstance(conf, dict):
        raise ValidationError(
            f"The value of color config '{name}' must be a mapping. Actual: {conf!r}.",
            key=name,
        )

    group = GroupConfig()
    if "color" in conf:
        group.color = _parse_color(name, conf["color"])
    if "style" in conf:
        group.style = _parse_style(name, conf["style"])
    if "links" in conf:
        group.links = _parse_links(name, conf["links"])
    group.extra = {str(k): v for k, v in conf.items() if k not in FIELD_ORDER}
    return group


def parse(text: str) -> ConfigModel:
    """
    Parse a YAML highlight document into a ConfigModel.

    Validation fails fast on the first violation and never returns a
    partially built model.

    Raises:
        ValidationError: If the document is not valid YAML or does not
            describe a mapping of group names to group configs.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError(f"The document is not valid YAML: {e}", key="<document>") from e

    if not isinstance(data, dict):
        raise ValidationError(
            "The document must be a mapping from highlight group names to color configs. "
            f"Actual: {data!r}.",
            key="<document>",
        )

    groups: Dict[str, GroupConfig] = {}
    owners: Dict[str, str] = {}
    for raw_name, conf in data.items():
        name = str(raw_name)
        if name in groups:
            raise ValidationError(f"Duplicate highlight group '{name}'.", key=name)
        group = _parse_group(name, conf)
        for alias in group.links or []:
            owner = owners.setdefault(alias, name)
            if owner != name:
                raise ValidationError(
                    f"'{alias}' is linked from both '{owner}' and '{name}'. "
                    "A group can alias only one other group.",
                    key=f"{name}.links",
                )
        groups[name] = group

    return ConfigModel(groups)
