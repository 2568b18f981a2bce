# hosts/embedded.py

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ..attributes import HIGHLIGHT_ATTRS
from ..errors import HostQueryFailure
from ..script import to_script

_HI_COMMANDS = {"hi", "hi!", "highlight", "highlight!"}
_NONE_VALUES = {"none", ""}


@dataclass
class HighlightGroup:
    """One slot of the embedded highlight table."""
    name: str
    fg: Optional[str] = None
    bg: Optional[str] = None
    attrs: Set[str] = field(default_factory=set)
    link: Optional[str] = None

    def clear(self) -> None:
        self.fg = None
        self.bg = None
        self.attrs = set()
        self.link = None


class EmbeddedHost:
    """
    In-memory highlight table that behaves like Vim's.

    Groups get 1-based ids in creation order and keep them for the life of
    the host. Only highlight commands are interpreted; any other line of a
    script (conditionals, `syntax reset`, `let`) is ignored.
    """

    def __init__(self, logger=None):
        self.logger = logger
        self.groups: List[HighlightGroup] = []
        self._ids: Dict[str, int] = {}
        self.cursor: Optional[str] = None
        if self.logger:
            self.logger.debug("Initialized embedded highlight host")

    @classmethod
    def from_model(cls, model, logger=None) -> "EmbeddedHost":
        """Create a host whose highlight table is the result of applying model."""
        host = cls(logger=logger)
        host.apply_script(to_script(model))
        return host

    def group(self, name: str) -> HighlightGroup:
        """Return the group called name, creating it if needed."""
        if name not in self._ids:
            self.groups.append(HighlightGroup(name))
            self._ids[name] = len(self.groups)
        return self.groups[self._ids[name] - 1]

    def _slot(self, syn_id: int) -> Optional[HighlightGroup]:
        if 1 <= syn_id <= len(self.groups):
            return self.groups[syn_id - 1]
        return None

    def resolve(self, syn_id: int) -> Optional[int]:
        """Follow links from syn_id to the group that holds the actual highlight."""
        slot = self._slot(syn_id)
        if slot is None:
            return None
        seen = {syn_id}
        while slot.link is not None:
            target = self._ids.get(slot.link)
            if target is None or target in seen:
                break
            seen.add(target)
            syn_id, slot = target, self._slot(target)
        return syn_id

    # Host protocol

    async def translate(self, syn_id: int) -> Optional[int]:
        return self.resolve(syn_id)

    async def attribute(self, syn_id: int, key: str, mode: str = "gui") -> str:
        slot = self._slot(syn_id)
        if slot is None:
            return ""
        if key == "name":
            return slot.name
        if key in ("fg", "bg"):
            return getattr(slot, key) or ""
        if key in HIGHLIGHT_ATTRS:
            return "1" if key in slot.attrs else ""
        return ""

    async def execute(self, script: str) -> None:
        self.apply_script(script)

    async def cursor_group(self) -> str:
        return self.cursor or ""

    # Command interpretation

    def apply_script(self, script: str) -> None:
        """Apply every highlight command in script."""
        for lineno, line in enumerate(script.splitlines(), 1):
            tokens = line.split()
            if not tokens or tokens[0] not in _HI_COMMANDS:
                continue
            try:
                self._apply_highlight(tokens[1:])
            except ValueError as e:
                msg = f"Line {lineno}: {e}"
                if self.logger:
                    self.logger.error(msg)
                raise HostQueryFailure(msg) from e

    def _apply_highlight(self, args: List[str]) -> None:
        if not args:
            return
        if args[0] == "clear":
            targets = [self.group(n) for n in args[1:]] if len(args) > 1 else self.groups
            for group in targets:
                group.clear()
            return
        if args[0] == "link":
            if len(args) != 3:
                raise ValueError(f"Invalid link command: {' '.join(args)}")
            alias, target = args[1], args[2]
            group = self.group(alias)
            if target.lower() == "none":
                group.link = None
            else:
                self.group(target)
                group.link = target
            return

        group = self.group(args[0])
        settings = args[1:]
        if settings:
            group.link = None
        for setting in settings:
            key, sep, value = setting.partition("=")
            if not sep:
                raise ValueError(f"Missing '=' in '{setting}'")
            if key == "guifg":
                group.fg = None if value.lower() in _NONE_VALUES else value
            elif key == "guibg":
                group.bg = None if value.lower() in _NONE_VALUES else value
            elif key == "gui":
                group.attrs = self._parse_attrs(value)

    @staticmethod
    def _parse_attrs(value: str) -> Set[str]:
        if value.lower() in _NONE_VALUES:
            return set()
        attrs = set(value.split(","))
        unknown = attrs - set(HIGHLIGHT_ATTRS)
        if unknown:
            raise ValueError(f"Illegal value: {','.join(sorted(unknown))}")
        return attrs
