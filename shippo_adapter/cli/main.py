# shippo_adapter/cli/main.py
import click

from shippo_adapter.core.config import get_settings
from shippo_adapter.core.logging_config import configure_logging
from shippo_adapter.cli.run_operation import run_operation
from shippo_adapter.cli.webhook import test_credentials, webhook


@click.group()
@click.option("--log-level", default=None, help="Overrides LOG_LEVEL")
def cli(log_level):
    """Shippo adapter command line"""
    configure_logging(log_level or get_settings().LOG_LEVEL)


cli.add_command(run_operation)
cli.add_command(test_credentials)
cli.add_command(webhook)


if __name__ == "__main__":
    cli()
