# extractor.py

from typing import Dict

from .attributes import HIGHLIGHT_ATTRS
from .errors import HostQueryFailure
from .hosts.base import Host, is_set
from .model import Color, ConfigModel, GroupConfig


class _Query:
    """Wraps host calls so any failure surfaces as HostQueryFailure."""

    def __init__(self, host: Host, mode: str, logger=None):
        self.host = host
        self.mode = mode
        self.logger = logger

    def _fail(self, e: Exception, syn_id: int, key: str) -> HostQueryFailure:
        msg = f"Host query '{key}' failed for group id {syn_id}: {e}"
        if self.logger:
            self.logger.error(msg)
        return HostQueryFailure(msg, syn_id=syn_id, key=key)

    async def translate(self, syn_id: int):
        try:
            return await self.host.translate(syn_id)
        except HostQueryFailure:
            raise
        except Exception as e:
            raise self._fail(e, syn_id, "translate") from e

    async def attribute(self, syn_id: int, key: str):
        try:
            return await self.host.attribute(syn_id, key, self.mode)
        except HostQueryFailure:
            raise
        except Exception as e:
            raise self._fail(e, syn_id, key) from e

    async def text(self, syn_id: int, key: str):
        """Attribute as a string, or None when the host reports it empty."""
        value = await self.attribute(syn_id, key)
        return str(value) if value not in (None, "") else None


async def extract_current(host: Host, mode: str = "gui", logger=None) -> ConfigModel:
    """
    Rebuild a ConfigModel from the host's live highlight table.

    Group ids are visited from 1 until the host reports there is no such
    group. Empty names are unused slots. A group that translates to itself
    is canonical and contributes its colors and attributes; any other group
    is recorded as an alias in the links of the group it translates to.

    Args:
        host: Host to query.
        mode: Render mode for attribute queries.
        logger: Optional Logger.

    Raises:
        HostQueryFailure: If any query fails. No partial model is returned.
    """
    query = _Query(host, mode, logger)
    record: Dict[str, GroupConfig] = {}

    syn_id = 0
    while True:
        syn_id += 1
        trans_id = await query.translate(syn_id)
        if not trans_id:
            break

        name = await query.text(syn_id, "name")
        if name is None:
            continue

        if syn_id == trans_id:
            conf = record.setdefault(name, GroupConfig())
            fg = await query.text(syn_id, "fg")
            bg = await query.text(syn_id, "bg")
            conf.color = Color(fg=fg, bg=bg)

            style = []
            for attr in HIGHLIGHT_ATTRS:
                if is_set(await query.attribute(syn_id, attr)):
                    style.append(attr)
            if style:
                conf.style = style
        else:
            trans_name = await query.text(trans_id, "name")
            if trans_name is None:
                # Target slot without a name: nothing to attach the alias to
                if logger:
                    logger.warning(f"Group '{name}' translates to unnamed id {trans_id}")
                continue
            conf = record.setdefault(trans_name, GroupConfig())
            if conf.links is None:
                conf.links = [name]
            else:
                conf.links.append(name)

    if logger:
        logger.debug(f"Extracted {len(record)} highlight groups from {syn_id - 1} ids")
    return ConfigModel(record)
