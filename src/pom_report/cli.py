"""Command-line interface for pom-report."""

from pathlib import Path

import click
from rich.table import Table

from pom_report.collector import collect_dependencies
from pom_report.config import DEFAULT_OUTPUT_FILE, __version__
from pom_report.console import console, success
from pom_report.loaders import get_registered_loaders, load_descriptor
from pom_report.logging import get_logger, setup_logging
from pom_report.report import generate_pom_report

logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output (DEBUG level)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Show only warnings and errors",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Explicit log level (overrides -v/-q)",
)
@click.version_option(version=__version__, prog_name="pom-report")
def cli(verbose, quiet, log_level):
    """Generate first-level dependency pom.xml reports for multi-module builds."""
    if sum([verbose, quiet, log_level is not None]) > 1:
        raise click.UsageError("--verbose, --quiet, and --log-level are mutually exclusive")

    setup_logging(verbose=verbose, quiet=quiet, log_level=log_level)


@cli.command(name="generate")
@click.argument("descriptor", type=click.Path(path_type=Path))  # type: ignore[type-var]
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),  # type: ignore[type-var]
    default=DEFAULT_OUTPUT_FILE,
    show_default=True,
    help="Report file to write (replaced if it exists)",
)
@click.option(
    "--loader",
    default=None,
    help="Descriptor loader to use (default: chosen by file extension)",
)
def generate(descriptor, output, loader):
    """Write the pom.xml report described by DESCRIPTOR."""
    try:
        project = load_descriptor(descriptor, loader_name=loader)
        result = generate_pom_report(project, output)
    except ValueError as e:
        logger.error(str(e))
        raise SystemExit(1)
    except OSError as e:
        logger.error(f"I/O error: {e}")
        raise SystemExit(1)

    success(f"Wrote {result.output_path} ({result.dependency_count} dependencies)")


@cli.command(name="dependencies")
@click.argument("descriptor", type=click.Path(path_type=Path))  # type: ignore[type-var]
@click.option(
    "--loader",
    default=None,
    help="Descriptor loader to use (default: chosen by file extension)",
)
def dependencies(descriptor, loader):
    """List the first-level dependencies described by DESCRIPTOR."""
    try:
        project = load_descriptor(descriptor, loader_name=loader)
        declarations = list(collect_dependencies(project.project))
    except ValueError as e:
        logger.error(str(e))
        raise SystemExit(1)
    except OSError as e:
        logger.error(f"I/O error: {e}")
        raise SystemExit(1)

    if not declarations:
        click.echo("No first-level dependencies declared.")
        return

    table = Table(title="First-level dependencies")
    table.add_column("Group")
    table.add_column("Artifact")
    table.add_column("Version")
    table.add_column("Scope")
    table.add_column("Package URL", overflow="fold")

    for declaration in declarations:
        table.add_row(
            declaration.group_id,
            declaration.artifact_id,
            declaration.version,
            declaration.scope.value,
            declaration.purl.to_string(),
        )

    console.print(table)


@cli.command(name="list-loaders")
def list_loaders():
    """List available project descriptor loaders."""
    loaders = get_registered_loaders()

    if not loaders:
        click.echo("No descriptor loaders registered.")
        click.echo("Plugins may not be installed correctly.")
        raise SystemExit(1)

    click.echo("Available Loaders:")
    click.echo("")

    for name, info in sorted(loaders.items()):
        click.echo(f"  {click.style(name, bold=True)}")

        if info.description:
            click.echo(f"    {info.description}")

        if info.extensions:
            click.echo(f"    Extensions: {', '.join(info.extensions)}")

        click.echo("")


def main():
    """Entry point for pom-report command."""
    cli()


if __name__ == "__main__":
    main()
