# hosts/base.py

from typing import Optional, Protocol, Union

AttrValue = Union[str, int, bool]


class Host(Protocol):
    """
    Protocol for the editor whose highlight table is inspected and updated.

    Every call is a request/response round trip and may suspend.
    """

    async def translate(self, syn_id: int) -> Optional[int]:
        """Return the id syn_id resolves to through links, or None if there is no such group."""
        ...

    async def attribute(self, syn_id: int, key: str, mode: str = "gui") -> AttrValue:
        """Return highlight attribute key ("name", "fg", "bg" or a style toggle) of syn_id."""
        ...

    async def execute(self, script: str) -> None:
        """Apply a batch of highlight commands."""
        ...

    async def cursor_group(self) -> str:
        """Return the name of the highlight group under the cursor."""
        ...


def is_set(value: AttrValue) -> bool:
    """Interpret the host's answer for a style toggle."""
    return value is True or value == 1 or value == "1"
