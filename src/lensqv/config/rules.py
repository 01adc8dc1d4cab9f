"""Rule-pack location and runtime configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import ConfigurationError

RULES_DIR_ENV: Final[str] = "LENSQV_RULES_DIR"
LOG_LEVEL_ENV: Final[str] = "LENSQV_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class RulePackConfig:
    """Where rule packs come from; ``None`` selects the bundled defaults."""

    rules_dir: Path | None = None

    def resolve_rules_dir(self) -> Path | None:
        if self.rules_dir is None:
            return None
        return self.rules_dir.expanduser().resolve()


def get_rule_pack_config(*, rules_dir: str | Path | None = None) -> RulePackConfig:
    if rules_dir is not None:
        return RulePackConfig(rules_dir=Path(rules_dir))
    env_dir = os.getenv(RULES_DIR_ENV)
    if env_dir and env_dir.strip():
        return RulePackConfig(rules_dir=Path(env_dir.strip()))
    return RulePackConfig()


def get_log_level(default: int = logging.INFO) -> int:
    """Return the log level named by ``LENSQV_LOG_LEVEL`` or ``default``."""

    value = os.getenv(LOG_LEVEL_ENV)
    if value is None or not value.strip():
        return default
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV}: {value}")
    return level
