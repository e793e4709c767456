"""Entry point for running pom-report as a module.

Allows the package to be run as:
    python -m pom_report
"""

import sys

from pom_report.cli import main

if __name__ == "__main__":
    sys.exit(main())
