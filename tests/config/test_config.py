from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lensqv.config import (
    ConfigurationError,
    configure_logging,
    get_log_level,
    get_rule_pack_config,
)
from lensqv.config.rules import LOG_LEVEL_ENV, RULES_DIR_ENV


def test_rule_pack_config_defaults_to_bundled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(RULES_DIR_ENV, raising=False)

    config = get_rule_pack_config()

    assert config.rules_dir is None
    assert config.resolve_rules_dir() is None


def test_rule_pack_config_reads_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(RULES_DIR_ENV, f"  {tmp_path}  ")

    config = get_rule_pack_config()

    assert config.resolve_rules_dir() == tmp_path.resolve()


def test_rule_pack_config_ignores_blank_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(RULES_DIR_ENV, "   ")

    assert get_rule_pack_config().rules_dir is None


def test_explicit_rules_dir_overrides_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(RULES_DIR_ENV, "/somewhere/else")

    config = get_rule_pack_config(rules_dir=tmp_path)

    assert config.rules_dir == Path(tmp_path)


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert get_log_level() == logging.DEBUG

    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert get_log_level(default=logging.WARNING) == logging.WARNING


def test_log_level_rejects_unknown_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

    with pytest.raises(ConfigurationError, match=LOG_LEVEL_ENV):
        get_log_level()


def test_configure_logging_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        configure_logging(level="DEBUG", force=True)
        logging.getLogger("lensqv.test").info("loaded %s packs", 6)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "INFO    lensqv.test: loaded 6 packs" in captured.err
