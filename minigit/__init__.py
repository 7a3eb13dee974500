"""mini-git - A minimal content-addressed version control engine."""

__version__ = '0.1.0'

from minigit.core.repository import Repository
from minigit.core.objects import Blob, Commit
from minigit.engine import Engine, Response, ResponseKind

__all__ = [
    'Repository',
    'Blob',
    'Commit',
    'Engine',
    'Response',
    'ResponseKind',
]
