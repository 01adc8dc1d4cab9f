"""Structured report payloads consumed by external renderers."""

from __future__ import annotations

from .builder import build_report_payload, render_report_json, summary_line
from .schema import ReportPayload

__all__ = [
    "ReportPayload",
    "build_report_payload",
    "render_report_json",
    "summary_line",
]
