"""Click commands for mini-git.

Each command runs its verb through the Engine and prints the response.
"""

from typing import List

import click

from minigit.cli.output import describe, error, info
from minigit.core.errors import MiniGitError
from minigit.engine import Engine


def run_command(verb: str, args: List[str]) -> None:
    """
    Execute a verb in the current directory and print the outcome.

    Aborts with a non-zero exit status when the response is a failure or
    the repository is corrupt.
    """
    try:
        response = Engine().execute(verb, list(args))
    except (MiniGitError, OSError) as e:
        click.echo(error(str(e)))
        raise click.Abort()

    for line in describe(response):
        click.echo(line)

    if not response.ok:
        raise click.Abort()


@click.command('init')
def init_cmd():
    """
    Create an empty repository in the current directory.

    Examples:
        minigit init
    """
    run_command('init', [])


@click.command('add')
@click.argument('file')
def add_cmd(file):
    """
    Stage a file for the next commit.

    Examples:
        minigit add a.txt
        minigit add src/main.py
    """
    run_command('add', [file])


@click.command('commit')
@click.argument('message', nargs=-1, required=True)
def commit_cmd(message):
    """
    Record the staged changes.

    Examples:
        minigit commit "Initial commit"
    """
    run_command('commit', list(message))


@click.command('status')
def status_cmd():
    """Show staged, modified and untracked files."""
    run_command('status', [])


@click.command('rm')
@click.argument('file')
def rm_cmd(file):
    """
    Unstage a file, or stage a tracked file for removal.

    Examples:
        minigit rm a.txt
    """
    run_command('rm', [file])


@click.command('log')
def log_cmd():
    """Show commit history of the current branch."""
    run_command('log', [])


@click.command('branch')
@click.argument('name', required=False)
def branch_cmd(name):
    """
    List branches, or create one at the current commit.

    Examples:
        minigit branch
        minigit branch feature
    """
    run_command('branch', [name] if name else [])


@click.command('checkout', context_settings={'ignore_unknown_options': True})
@click.argument('args', nargs=-1)
def checkout_cmd(args):
    """Switch branches (not supported yet)."""
    run_command('checkout', list(args))


@click.command('shell')
def shell_cmd():
    """
    Read command lines interactively.

    Commands are written as 'git <verb> [args]'. Use double quotes for
    arguments containing spaces. Type 'exit' or 'quit' to leave.

    Examples:
        git init
        git commit "first commit"
    """
    try:
        engine = Engine()
    except (MiniGitError, OSError) as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(info("Type 'exit' to quit"))

    while True:
        try:
            line = click.prompt(engine.prompt(), default='', show_default=False,
                                prompt_suffix='> ')
        except click.Abort:
            click.echo()
            break

        if line.strip() in ('exit', 'quit'):
            break

        try:
            response = engine.respond(line)
        except (MiniGitError, OSError) as e:
            click.echo(error(str(e)))
            continue

        for out in describe(response):
            click.echo(out)
