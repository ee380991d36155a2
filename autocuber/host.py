"""Entry point for an embedding host.

The host calls `init` once at startup with a diagnostic sink. Library log
records under the ``autocuber`` logger are formatted and written to it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from autocuber.config import CoreConfig
from autocuber.state import Cube

ROOT_LOGGER_NAME = "autocuber"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    def write(self, text: str) -> None:
        ...


class SinkHandler(logging.Handler):
    def __init__(self, sink: DiagnosticSink, level: int = logging.NOTSET) -> None:
        super().__init__(level=level)
        self.sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink.write(self.format(record))
        except Exception:
            self.handleError(record)


@dataclass(frozen=True)
class Universe:
    """Opaque handle returned to the host by `init`."""

    config: CoreConfig

    def new_cube(self) -> Cube:
        return Cube.solved(self.config.layers)

    def greet(self) -> str:
        text = self.new_cube().render()
        logger.info("cube:\n%s", text)
        return text


_installed_handler: Optional[SinkHandler] = None


def init(sink: Optional[DiagnosticSink] = None, config: Optional[CoreConfig] = None) -> Universe:
    global _installed_handler

    config = config or CoreConfig.from_env()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(config.logging_level)

    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)
        _installed_handler = None

    if sink is not None:
        handler = SinkHandler(sink)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        package_logger.addHandler(handler)
        _installed_handler = handler
        logger.info("installed diagnostic sink")
    else:
        logger.info("no diagnostic sink installed")

    return Universe(config=config)
