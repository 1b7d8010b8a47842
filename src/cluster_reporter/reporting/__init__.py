"""Reporting layer: render snapshots as plain-text lines."""

from cluster_reporter.reporting.builder import build_report

__all__ = [
    "build_report",
]
