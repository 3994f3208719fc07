"""Runtime configuration for MetaHooks."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class HooksConfig:
    """Logging and hook-file configuration.

    Debug logging of hook registration and dispatch is off by default;
    it is the equivalent of turning on a "hooks" debug context.
    """

    debug: bool = False
    log_level: str = "WARNING"
    hooks_file: Path | None = None

    @classmethod
    def from_env(cls) -> HooksConfig:
        """Create config from environment variables.

        - METAHOOKS_DEBUG: truthy value enables DEBUG logging for hooks
        - METAHOOKS_LOG_LEVEL: level name for the metahooks logger (default WARNING)
        - METAHOOKS_HOOKS_FILE: default YAML hook file for the CLI
        """
        debug = os.environ.get("METAHOOKS_DEBUG", "").strip().lower() in _TRUTHY
        log_level = os.environ.get("METAHOOKS_LOG_LEVEL", "WARNING").strip().upper()
        hooks_file = os.environ.get("METAHOOKS_HOOKS_FILE")
        return cls(
            debug=debug,
            log_level=log_level or "WARNING",
            hooks_file=Path(hooks_file) if hooks_file else None,
        )

    @property
    def effective_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level


def configure_logging(config: HooksConfig | None = None) -> logging.Logger:
    """Apply the configured level to the metahooks logger tree.

    Handlers are left to the application; the level is all that is set.
    """
    config = config or HooksConfig.from_env()
    logger = logging.getLogger("metahooks")
    logger.setLevel(config.effective_level)
    return logger
