from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from lensqv import __version__
from lensqv.adapters.report import render_report_json
from lensqv.app import analyse_evidence
from lensqv.config import (
    ConfigurationError,
    configure_logging,
    get_log_level,
    get_rule_pack_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lensqv",
        description="Run offline quadruple verification over evidence files"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Plain-text evidence files to analyse",
    )
    parser.add_argument(
        "--rules-dir",
        type=Path,
        help="Directory of <domain>.json rule packs (defaults to LENSQV_RULES_DIR or bundled)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Run the domain rule packs on this many threads",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level name (defaults to LENSQV_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print the report as single-line JSON",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.workers is not None and parsed_args.workers < 1:
            raise ValueError("--workers must be at least 1")  # noqa: TRY301
        level = (
            parsed_args.log_level.upper() if parsed_args.log_level else get_log_level()
        )
        configure_logging(level=level)
        config = get_rule_pack_config(rules_dir=parsed_args.rules_dir)
    except (ValueError, ConfigurationError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = analyse_evidence(
            parsed_args.paths,
            config=config,
            max_workers=parsed_args.workers,
        )
    except ConfigurationError:
        log.exception("Rule pack configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during analysis")
        sys.exit(1)

    print(render_report_json(result, indent=None if parsed_args.compact else 2))  # noqa: T201


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    log.warning("Analysis interrupted; no report written")
    sys.exit(INTERRUPTED_EXIT_CODE)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
