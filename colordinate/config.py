# config.py

import os
from dataclasses import dataclass, fields
from typing import Optional

DEFAULT_MODE = "gui"
DEFAULT_BUFFER_NAME = "[Colordinate]"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ColordinateConfig:
    """
    Runtime settings shared by the session, hosts and command line.

    Attributes:
        endpoint: URL of the editor bridge. None selects the embedded host.
        save_path: Directory colorschemes are written to. None means the
            current working directory.
        mode: Render mode passed to highlight queries ("gui" or "cterm").
        buffer_name: Name of the editing buffer.
        logging_enabled: Enable debug logging.
        log_file: Log destination, "-" for stdout.
    """
    endpoint: Optional[str] = None
    save_path: Optional[str] = None
    mode: str = DEFAULT_MODE
    buffer_name: str = DEFAULT_BUFFER_NAME
    logging_enabled: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, **overrides) -> "ColordinateConfig":
        """
        Build a config with explicit overrides taking priority over
        environment variables, and environment variables over defaults.
        None-valued overrides are treated as not given.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown config options: {', '.join(sorted(unknown))}")

        env = {
            "endpoint": os.environ.get("COLORDINATE_ENDPOINT"),
            "save_path": os.environ.get("COLORDINATE_SAVE_PATH"),
            "mode": os.environ.get("COLORDINATE_MODE"),
            "log_file": os.environ.get("COLORDINATE_LOG_FILE"),
        }
        logging_env = os.environ.get("COLORDINATE_LOGGING")
        if logging_env is not None:
            env["logging_enabled"] = logging_env.strip().lower() in _TRUTHY

        values = {k: v for k, v in env.items() if v is not None}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def colorscheme_path(self, csname: str) -> str:
        """Return the file path a colorscheme named csname is saved to."""
        fname = f"{csname}.vim"
        return fname if self.save_path is None else os.path.join(self.save_path, fname)
