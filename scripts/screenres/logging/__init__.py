import logging
import sys
from typing import Dict, Optional, Union

LEVEL_COLORS = {
    "DEBUG": "\x1b[36m",
    "INFO": "\x1b[32m",
    "WARNING": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "CRITICAL": "\x1b[41m",
}
RESET = "\x1b[0m"

_registry: Dict[str, "Logger"] = {}
_default_level: Union[str, int] = "INFO"


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = LEVEL_COLORS.get(levelname, "") if self.use_color else ""
        record.levelname = f"{color}{levelname}{RESET}" if color else levelname
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class StderrHandler(logging.StreamHandler):
    """Resolves sys.stderr on every emit so redirected streams are honoured."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class Logger:
    """Per-module logger writing to stderr so stdout stays free for command output."""

    def __init__(self, name: str, level: Optional[Union[str, int]] = None, log_file: Optional[str] = None):
        self.name = name
        self.logger = logging.getLogger(name)
        self.set_level(_default_level if level is None else level)
        self._setup_handlers(log_file)
        _registry[name] = self

    def set_level(self, level: Union[str, int]) -> None:
        if isinstance(level, int):
            level_value = level
        else:
            level_value = logging.getLevelName(level.upper())
            if isinstance(level_value, str):
                level_value = logging.INFO
        self.logger.setLevel(level_value)

    def _setup_handlers(self, log_file: Optional[str]) -> None:
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)

        console_format = "[%(levelname)s] %(name)s: %(message)s"
        console_handler = StderrHandler()
        console_handler.setFormatter(ColoredFormatter(console_format, use_color=sys.stderr.isatty()))
        self.logger.addHandler(console_handler)

        if log_file:
            file_format = "%(asctime)s - %(name)s - [%(levelname)s] %(message)s"
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(file_format))
            self.logger.addHandler(file_handler)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self.logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self.logger.exception(msg, *args, **kwargs)


def set_global_level(level: Union[str, int]) -> None:
    """Apply ``level`` to every logger, including ones created later."""
    global _default_level
    _default_level = level
    for logger in _registry.values():
        logger.set_level(level)


__all__ = ["Logger", "ColoredFormatter", "set_global_level"]
