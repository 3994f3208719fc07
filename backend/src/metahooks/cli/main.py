"""MetaHooks CLI entry point."""

import click

from metahooks.config import HooksConfig, configure_logging


@click.group()
@click.pass_context
def cli(ctx):
    """MetaHooks — lifecycle hook catalog and hook file tools."""
    config = HooksConfig.from_env()
    configure_logging(config)
    ctx.obj = config


# Register subcommand groups
from metahooks.cli.catalog_cmd import catalog  # noqa: E402
from metahooks.cli.hooks_cmd import hooks  # noqa: E402

cli.add_command(catalog)
cli.add_command(hooks)
