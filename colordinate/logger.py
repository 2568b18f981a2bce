# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

class Logger:
    """
    Thin wrapper around the standard logging module.

    Logging is silent unless enabled. When enabled, records go to log_file,
    to stdout if log_file is "-", or to logs/colordinate.log under the
    project root otherwise.
    """
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.logging_enabled = logging_enabled
        # A named logger is shared; replace whatever an earlier Logger attached
        for old in list(self._logger.handlers):
            self._logger.removeHandler(old)
            old.close()
        if logging_enabled:
            fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            if log_file == "-":
                handler = logging.StreamHandler(sys.stdout)
            else:
                if log_file is None:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'colordinate.log')
                handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(fmt))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
