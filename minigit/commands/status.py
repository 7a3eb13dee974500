"""Status command - compare working tree, stage and head commit."""

from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    """
    Report staged, removed, modified, deleted and untracked files.

    A file's expected content is what is staged for it, or else what the
    head commit holds (unless it is staged for removal).
    """
    head = repo.head_commit(branch)
    head_files = head.tree if head else {}
    stage = repo.load_stage()
    working_files = repo.current_snapshot()

    expected = {
        path: blob_id for path, blob_id in head_files.items()
        if path not in stage.removals
    }
    expected.update(stage.additions)

    modified = []
    deleted = []
    for path, blob_id in expected.items():
        if path not in working_files:
            deleted.append(path)
        elif working_files[path] != blob_id:
            modified.append(path)

    untracked = [path for path in working_files if path not in expected]

    return Response.of(
        ResponseKind.STATUS,
        branch=branch,
        staged=sorted(stage.additions),
        removed=sorted(stage.removals),
        modified=sorted(modified),
        deleted=sorted(deleted),
        untracked=sorted(untracked),
    )
