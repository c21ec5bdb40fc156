from typing import NotRequired, TypedDict
import logging
import sys
from scripts.tanfmt.utils import resolve_config

ROOT_LOGGER_NAME = "tanfmt"


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "core",
    "is_enabled": True,
    "level": logging.WARNING,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class ComponentLogger(logging.LoggerAdapter):
    """Per-instance view of a shared ``tanfmt.<component>`` logger.

    The on/off switch and the minimum level belong to the adapter, so two
    formatters with different settings never affect each other.
    """

    def __init__(self, logger: logging.Logger, is_enabled: bool, min_level: int):
        super().__init__(logger, {})
        self.is_enabled = is_enabled
        self.min_level = min_level

    def isEnabledFor(self, level):
        return self.is_enabled and level >= self.min_level and self.logger.isEnabledFor(level)


class Logger:
    """Builds the logger for one lexer, parser or formatter instance.

    ``Logger({"name": "formatter"}).logger`` wraps ``logging.getLogger("tanfmt.formatter")``.
    The stderr handler sits on the ``tanfmt`` logger and is installed once.
    """

    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.set_configuration()
        self.logger = ComponentLogger(
            logging.getLogger(f"{ROOT_LOGGER_NAME}.{self.config['name']}"),
            is_enabled=self.config["is_enabled"],
            min_level=self.config["level"],
        )

    def set_configuration(self):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        if root.handlers:
            return
        # per-instance levels do the filtering; the package logger passes everything through
        if root.level == logging.NOTSET:
            root.setLevel(logging.DEBUG)
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(self.config["format"]))
        root.addHandler(handler)
