"""Console reporting."""

from profile_sync.adapters.report.console_reporter import SECTIONS, ConsoleReporter

__all__ = ["ConsoleReporter", "SECTIONS"]
