"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError, InvalidRulePackError, UnknownDomainError
from .logging import configure_logging
from .rules import RulePackConfig, get_log_level, get_rule_pack_config

__all__ = [
    "ConfigurationError",
    "InvalidRulePackError",
    "RulePackConfig",
    "UnknownDomainError",
    "configure_logging",
    "get_log_level",
    "get_rule_pack_config",
]
