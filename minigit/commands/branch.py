"""Branch command - list branches or create one."""

from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.errors import BranchExistsError, InvalidBranchNameError
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    """
    With no argument, list branches. With a name, create a branch at the
    current branch's commit. HEAD stays where it is.
    """
    if not args:
        return Response.of(
            ResponseKind.BRANCH_LIST,
            current=branch,
            branches=repo.refs.list_branches(),
        )

    name = args[0]
    commit_id = repo.head_commit_id(branch)
    try:
        if repo.refs.branch_exists(name):
            return Response.of(ResponseKind.BRANCH_EXISTS, branch=name)
        if not commit_id:
            return Response.of(ResponseKind.NO_COMMITS, branch=branch)
        repo.refs.create_branch(name, commit_id)
    except InvalidBranchNameError:
        return Response.of(ResponseKind.INVALID_BRANCH_NAME, branch=name)
    except BranchExistsError:
        return Response.of(ResponseKind.BRANCH_EXISTS, branch=name)

    return Response.of(ResponseKind.BRANCH_CREATED, branch=name, commit_id=commit_id)
