"""Checkout command - recognised, not implemented."""

from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    # HEAD never moves: there is no branch switching yet.
    return Response.of(ResponseKind.NOT_SUPPORTED, command='checkout', args=list(args))
