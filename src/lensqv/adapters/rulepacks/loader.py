"""Load rule packs from mappings, JSON files or the bundled defaults.

Loading is all-or-nothing: any malformed pack raises ``InvalidRulePackError``
and no store is produced.
"""

from __future__ import annotations

import json
from functools import cache
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from lensqv.config.errors import InvalidRulePackError
from lensqv.domain.rules import RulePackStore
from lensqv.domain.verification import QV_DOMAINS

from .schema import RulePackDocument
from .translator import translate_rule_pack

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from lensqv.domain.rules import RulePack


log = getLogger(__name__)

REQUIRED_DOMAINS: Final[tuple[str, ...]] = tuple(domain.value for domain in QV_DOMAINS)
DEFAULT_RULES_DIR: Final[Path] = Path(__file__).resolve().parent / "data"


def parse_rule_pack(domain_key: str, raw: object) -> RulePack:
    """Validate one raw pack (a document mapping or a bare list of rules)."""

    payload = {"rules": raw} if isinstance(raw, list) else raw
    try:
        document = RulePackDocument.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRulePackError(domain_key, str(exc)) from exc
    if document.domain is not None and document.domain != domain_key:
        raise InvalidRulePackError(
            domain_key, f"document declares domain {document.domain!r}"
        )
    return translate_rule_pack(domain_key, document)


def load_rule_packs(
    raw_packs: Mapping[str, object],
    *,
    required: Iterable[str] = (),
) -> RulePackStore:
    """Build a store from a mapping of domain key to raw pack data."""

    missing = sorted(set(required) - set(raw_packs))
    if missing:
        raise InvalidRulePackError(", ".join(missing), "required rule pack is missing")

    packs = [parse_rule_pack(domain_key, raw) for domain_key, raw in raw_packs.items()]
    for pack in packs:
        log.debug("Loaded rule pack %s with %s rules", pack.domain, len(pack))
    return RulePackStore.from_packs(packs)


def load_rule_pack_dir(
    path: Path,
    *,
    required: Iterable[str] = REQUIRED_DOMAINS,
) -> RulePackStore:
    """Load ``<domain>.json`` files from ``path``; required domains come first."""

    if not path.is_dir():
        raise InvalidRulePackError(str(path), "rule pack directory does not exist")

    required_keys = tuple(required)
    files = {file.stem: file for file in sorted(path.glob("*.json"))}
    ordered = [key for key in required_keys if key in files]
    ordered += [key for key in files if key not in required_keys]

    raw_packs = {key: _read_json(key, files[key]) for key in ordered}
    log.info("Loading %s rule packs from %s", len(raw_packs), path)
    return load_rule_packs(raw_packs, required=required_keys)


@cache
def load_default_rule_packs() -> RulePackStore:
    """Return the rule packs bundled with the package, loaded once per process."""

    return load_rule_pack_dir(DEFAULT_RULES_DIR)


def _read_json(domain_key: str, path: Path) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidRulePackError(
            domain_key, f"unreadable rule pack file {path.name}: {exc}"
        ) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidRulePackError(domain_key, f"invalid JSON: {exc}") from exc
