"""cssbuilder CLI entry point: Click group with subcommands."""

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import ConfigError
from cssbuilder.log import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cssbuilder - compose CSS selectors from fragments."""
    try:
        config = CssBuilderConfig.from_env()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    configure_logging(config.log_level, verbose=verbose)
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.render import dump, render  # noqa: E402

cli.add_command(build)
cli.add_command(render)
cli.add_command(dump)
