"""Init command - create a new repository."""

from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.errors import RepositoryExistsError
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    """
    Create the .mini-git layout in the working tree.

    HEAD points at master, which exists but has no commit until the
    first commit is made.
    """
    try:
        current = repo.init()
    except RepositoryExistsError:
        return Response.of(ResponseKind.ALREADY_INIT, path=str(repo.git_dir))

    return Response.of(ResponseKind.INIT_SUCCESS, branch=current, path=str(repo.git_dir))
