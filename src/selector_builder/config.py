from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class SelectorBuilderConfig:
    log_level: str = "WARNING"
    default_combinator: str = " "  # descendant

    @classmethod
    def from_env(cls) -> SelectorBuilderConfig:
        """Create config from environment variables.

        Reads SELECTOR_BUILDER_LOG_LEVEL and SELECTOR_BUILDER_COMBINATOR;
        unset variables keep the defaults. Raises ValueError if the log
        level is not one of LOG_LEVELS.
        """
        defaults = cls()
        log_level = os.environ.get(
            "SELECTOR_BUILDER_LOG_LEVEL", defaults.log_level
        ).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid SELECTOR_BUILDER_LOG_LEVEL {log_level!r} "
                f"(expected one of: {', '.join(LOG_LEVELS)})"
            )
        return cls(
            log_level=log_level,
            default_combinator=os.environ.get(
                "SELECTOR_BUILDER_COMBINATOR", defaults.default_combinator
            ),
        )
