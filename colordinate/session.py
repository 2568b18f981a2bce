# session.py

import re
from pathlib import Path
from typing import Callable, Optional, Protocol

from .config import ColordinateConfig
from .document import to_document
from .errors import ColordinateError, SessionError
from .extractor import extract_current
from .hosts.base import Host
from .model import ConfigModel, parse
from .script import reset_preamble, to_colorscheme, to_script


class TextBuffer(Protocol):
    """Buffer holding the document the user edits."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...


class MemoryBuffer:
    """TextBuffer kept in memory."""

    def __init__(self, name: str = "[Colordinate]", text: str = ""):
        self.name = name
        self.lines: list[str] = []
        self.set_text(text)

    def get_text(self) -> str:
        return "\n".join(self.lines)

    def set_text(self, text: str) -> None:
        """Replace the whole buffer. Surrounding blank space is trimmed."""
        stripped = text.strip()
        self.lines = stripped.split("\n") if stripped else []


class ColordinateSession:
    """
    Integration entry points for one editing session.

    Holds the host, the document buffer and the config explicitly; nothing
    is kept in module globals.
    """

    def __init__(self, host: Host, buffer: Optional[TextBuffer] = None,
                 config: Optional[ColordinateConfig] = None, logger=None):
        self.host = host
        self.buffer = buffer
        self.config = config or ColordinateConfig()
        self.logger = logger
        self.model: Optional[ConfigModel] = None

    def _log_error(self, e: Exception) -> None:
        if self.logger:
            self.logger.error(f"{type(e).__name__}: {e}")

    def _ensure_buffer(self) -> TextBuffer:
        if self.buffer is None:
            self.buffer = MemoryBuffer(self.config.buffer_name)
        return self.buffer

    async def load(self) -> ConfigModel:
        """Extract the live highlight table and show it in the buffer."""
        buffer = self._ensure_buffer()
        try:
            model = await extract_current(self.host, self.config.mode, self.logger)
        except ColordinateError as e:
            self._log_error(e)
            raise
        buffer.set_text(to_document(model))
        self.model = model
        if self.logger:
            self.logger.info(f"Loaded {len(model)} highlight groups")
        return model

    async def reflect(self) -> Optional[ConfigModel]:
        """
        Apply the buffer's document to the host.

        Returns the applied model, or None when there is no buffer yet.
        The host is left untouched if the document does not validate.
        """
        if self.buffer is None:
            return None
        try:
            model = parse(self.buffer.get_text())
            await self.host.execute(reset_preamble("colordinate") + "\n" + to_script(model))
        except ColordinateError as e:
            self._log_error(e)
            raise
        self.model = model
        if self.logger:
            self.logger.debug(f"Reflected {len(model)} highlight groups")
        return model

    async def jump(self, name: Optional[str] = None) -> Optional[int]:
        """
        Locate a group in the buffer.

        Args:
            name: Group to look for. Defaults to the group under the host's cursor.

        Returns:
            1-based line number of the first whole-word match, or None.
        """
        if name is None:
            name = await self.host.cursor_group()
        if self.buffer is None:
            await self.load()
        if not name:
            return None

        pattern = re.compile(rf"(?<!\w){re.escape(name)}(?!\w)")
        for lineno, line in enumerate(self.buffer.get_text().split("\n"), 1):
            if pattern.search(line):
                return lineno
        return None

    def save(self, csname: str, confirm: Optional[Callable[[str], bool]] = None) -> Optional[Path]:
        """
        Write the buffer's document as a colorscheme file.

        Args:
            csname: Colorscheme name; also the file stem.
            confirm: Asked before overwriting an existing file. Without it
                existing files are overwritten.

        Returns:
            The written path, or None if overwriting was declined.

        Raises:
            SessionError: If nothing has been loaded into a buffer yet.
            ValidationError: If the buffer's document is malformed.
        """
        if self.buffer is None:
            raise SessionError(
                f"Buffer {self.config.buffer_name} is not found. Load the current highlights first."
            )
        try:
            model = parse(self.buffer.get_text())
        except ColordinateError as e:
            self._log_error(e)
            raise

        path = Path(self.config.colorscheme_path(csname))
        if path.exists() and confirm is not None:
            if not confirm(f"The file {path} already exists. Overwrite it?"):
                if self.logger:
                    self.logger.info(f"Kept existing {path}")
                return None

        path.write_text(to_colorscheme(model, csname))
        if self.logger:
            self.logger.info(f"Saved colorscheme '{csname}' to {path}")
        return path
