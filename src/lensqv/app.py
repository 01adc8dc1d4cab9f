"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from lensqv.adapters.ingestion import read_evidence_files
from lensqv.adapters.rulepacks import load_default_rule_packs, load_rule_pack_dir
from lensqv.config import get_rule_pack_config
from lensqv.domain.verification import run_offline_qv

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from lensqv.config import RulePackConfig
    from lensqv.domain.rules import RulePackStore
    from lensqv.domain.verification import QVResult


log = getLogger(__name__)


def load_rule_pack_store(config: RulePackConfig | None = None) -> RulePackStore:
    """Load the configured rule packs, falling back to the bundled defaults."""

    effective_config = config or get_rule_pack_config()
    rules_dir = effective_config.resolve_rules_dir()
    if rules_dir is None:
        return load_default_rule_packs()
    return load_rule_pack_dir(rules_dir)


def analyse_evidence(
    paths: Iterable[Path],
    *,
    config: RulePackConfig | None = None,
    max_workers: int | None = None,
) -> QVResult:
    """Ingest evidence files and run offline quadruple verification over them."""

    store = load_rule_pack_store(config)
    files = read_evidence_files(paths)
    log.info(
        "Starting offline QV: files=%s, domains=%s, workers=%s",
        len(files),
        len(store.domains),
        max_workers,
    )
    return run_offline_qv(files, store=store, max_workers=max_workers)
