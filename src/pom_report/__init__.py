"""pom-report: first-level dependency pom.xml reports for multi-module builds."""

import pluggy

from pom_report.config import __version__
from pom_report.logging import get_logger

# Convenience export for plugins: from pom_report import hookimpl
hookimpl = pluggy.HookimplMarker("pom_report")

from pom_report.report import PomReportResult, generate_pom_report  # noqa: E402

__all__ = [
    "__version__",
    "hookimpl",
    "get_logger",
    "generate_pom_report",
    "PomReportResult",
]
