"""Command dispatching for mini-git.

Turns a command line into a call on a handler and returns a typed
Response for the display layer.
"""

from minigit.commands.response import Response, ResponseKind, SUCCESS_KINDS
from minigit.engine.parser import tokenize
from minigit.engine.dispatcher import Engine

__all__ = [
    'Response',
    'ResponseKind',
    'SUCCESS_KINDS',
    'tokenize',
    'Engine',
]
