"""Log command - show the current branch's history."""

from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    commits = [
        {
            'id': commit.id,
            'message': commit.message,
            'timestamp': commit.timestamp,
            'parent_id': commit.parent_id,
        }
        for commit in repo.history(branch)
    ]
    return Response.of(ResponseKind.LOG, branch=branch, commits=commits)
