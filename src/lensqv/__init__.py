"""Offline multi-lens rule evaluation and consensus scoring."""

from __future__ import annotations

from importlib import metadata

DIST_NAME = "lensqv"

try:
    __version__ = metadata.version(DIST_NAME)
except metadata.PackageNotFoundError:
    # running from a source checkout without an install
    __version__ = "0.0.0+local"
