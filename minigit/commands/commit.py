"""Commit command - record the staged changes."""

from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    """
    Create a commit from the parent's snapshot plus the staged changes.

    Only the entries that went into the commit are cleared from the
    stage afterwards.
    """
    message = ' '.join(args).strip()
    if not message:
        return Response.of(ResponseKind.MISSING_ARGUMENT, command='commit', argument='message')

    stage = repo.load_stage()
    if stage.is_empty():
        return Response.of(ResponseKind.NOTHING_TO_COMMIT, branch=branch)

    parent = repo.head_commit(branch)
    parent_id = parent.id if parent else ''
    tree = stage.apply_to(parent.tree if parent else {})
    committed = stage.entries()

    commit_id = repo.commit_snapshot(message, parent_id, tree, branch)

    for filename in committed:
        stage.clear_entry(filename)
    repo.save_stage(stage)

    return Response.of(
        ResponseKind.COMMIT_SUCCESS,
        commit_id=commit_id,
        parent_id=parent_id,
        message=message,
        branch=branch,
        files=len(tree),
    )
