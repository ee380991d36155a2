from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LAYERS_ENV = "AUTOCUBER_LAYERS"
LOG_LEVEL_ENV = "AUTOCUBER_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CoreConfig:
    layers: int = 3
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.layers < 1:
            raise ValueError("layers must be >= 1")
        level = self.log_level.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(_LOG_LEVELS)}")
        object.__setattr__(self, "log_level", level)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CoreConfig:
        env = os.environ if environ is None else environ
        raw_layers = env.get(LAYERS_ENV, "").strip()
        raw_level = env.get(LOG_LEVEL_ENV, "").strip()

        layers = cls.layers
        if raw_layers:
            try:
                layers = int(raw_layers)
            except ValueError:
                raise ValueError(f"{LAYERS_ENV} must be an integer, got '{raw_layers}'") from None

        return cls(layers=layers, log_level=raw_level or cls.log_level)
