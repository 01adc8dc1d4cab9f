"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class UnknownDomainError(ConfigurationError):
    """Raised when no rule pack is registered for a requested domain key."""

    def __init__(self, domain_key: str) -> None:
        self.domain_key = domain_key
        super().__init__(f"No rule pack registered for domain: {domain_key!r}")


class InvalidRulePackError(ConfigurationError):
    """Raised when a rule pack fails structural validation at load time."""

    def __init__(self, domain_key: str, reason: str) -> None:
        self.domain_key = domain_key
        self.reason = reason
        super().__init__(f"Invalid rule pack {domain_key!r}: {reason}")
