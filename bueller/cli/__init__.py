"""CLI for Bueller."""

import click

from bueller import __version__
from bueller.cli._utils import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
def main(verbose: bool) -> None:
    """Bueller: queue-driven issue automation

    Inspect the issue queue the agent loop works through.
    """
    configure_logging(verbose)


# Import and register command modules
from bueller.cli import issues

main.add_command(issues.issue)
main.add_command(issues.list_issues)

__all__ = ["main"]
