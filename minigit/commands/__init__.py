"""Command handlers for mini-git.

Each handler takes (repository, current branch, arguments) and returns a
Response. Handlers never print.
"""

from minigit.commands.response import Response, ResponseKind, SUCCESS_KINDS
from minigit.commands import init, add, commit, status, rm, log, branch, checkout

COMMANDS = {
    'init': init.run,
    'add': add.run,
    'commit': commit.run,
    'status': status.run,
    'rm': rm.run,
    'log': log.run,
    'branch': branch.run,
    'checkout': checkout.run,
}

__all__ = ['COMMANDS', 'Response', 'ResponseKind', 'SUCCESS_KINDS']
