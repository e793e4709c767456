"""First-level dependency pom.xml report generator."""

from pom_report.generators.pom.pom_xml import render_pom, write_pom

__all__ = ["render_pom", "write_pom"]
