from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from lensqv.config.rules import LOG_LEVEL_ENV, RULES_DIR_ENV
from lensqv.ui import cli as cli_module


def test_cli_prints_report(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv(RULES_DIR_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    evidence = tmp_path / "notice.txt"
    evidence.write_text("Material breach of contract.", encoding="utf-8")

    cli_module.main([str(evidence), "--compact"])

    output = capsys.readouterr().out.strip()
    report = json.loads(output)
    assert [lens["role"] for lens in report["lenses"]] == ["legal", "risk", "timeline", "ethics"]
    assert report["summary"].startswith("Majority clusters:")


def test_cli_passes_options(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_analyse(paths: list[Path], **kwargs: object) -> object:
        captured["paths"] = paths
        captured.update(kwargs)
        raise RuntimeError("stop here")

    monkeypatch.setattr(cli_module, "analyse_evidence", fake_analyse)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["a.txt", "b.txt", "--rules-dir", str(tmp_path), "--workers", "3"])

    assert excinfo.value.code == 1
    assert captured["paths"] == [Path("a.txt"), Path("b.txt")]
    assert captured["max_workers"] == 3
    config = captured["config"]
    assert config.rules_dir == tmp_path  # pyright: ignore[reportAttributeAccessIssue]


def test_cli_rejects_invalid_workers() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["a.txt", "--workers", "0"])

    assert excinfo.value.code == 2


def test_cli_reports_rule_pack_errors(tmp_path: Path) -> None:
    (tmp_path / "legal.json").write_text("[]", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["a.txt", "--rules-dir", str(tmp_path)])

    assert excinfo.value.code == 2


def test_cli_reports_undecodable_rule_pack(tmp_path: Path) -> None:
    (tmp_path / "legal.json").write_bytes(b"[\xff]")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["a.txt", "--rules-dir", str(tmp_path)])

    assert excinfo.value.code == 2


def test_cli_requires_paths() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2


def test_cli_prints_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("lensqv ")


def test_sigint_handler_exits_with_interrupt_code(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="lensqv.ui.cli"):
        with pytest.raises(SystemExit) as excinfo:
            cli_module.sigint_handler(2, None)

    assert excinfo.value.code == cli_module.INTERRUPTED_EXIT_CODE
    assert "interrupted" in caplog.text
