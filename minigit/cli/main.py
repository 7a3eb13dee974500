"""Main CLI entry point for mini-git."""

import logging

import click
from colorama import init

from minigit import __version__
from minigit.cli.output import banner, set_color
from minigit.cli.commands import (init_cmd, add_cmd, commit_cmd, status_cmd, rm_cmd,
                                  log_cmd, branch_cmd, checkout_cmd, shell_cmd)
from minigit.core.config import get_config

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class MiniGitGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        set_color(get_config().color_mode() != 'never')
        click.echo(banner())
        super().format_help(ctx, formatter)


def configure_logging(verbose: bool, config) -> None:
    """Send log records to stderr at the configured level."""
    level = logging.DEBUG if verbose else config.log_level()
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
    )


@click.group(cls=MiniGitGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log repository operations')
def cli(verbose):
    config = get_config()
    configure_logging(verbose, config)
    set_color(config.color_mode() != 'never')


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(status_cmd)
cli.add_command(rm_cmd)
cli.add_command(log_cmd)
cli.add_command(branch_cmd)
cli.add_command(checkout_cmd)
cli.add_command(shell_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
