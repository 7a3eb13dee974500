"""Rm command - unstage a file or stage its removal."""

from pathlib import Path
from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    """
    Remove a file from the next commit.

    A file that is only staged is unstaged and left on disk. A file
    tracked by the head commit is staged for removal and deleted from
    the working tree.
    """
    if not args or not args[0]:
        return Response.of(ResponseKind.MISSING_ARGUMENT, command='rm', argument='file')

    filename = repo.relative_name(args[0])
    if filename is None:
        return Response.of(ResponseKind.INVALID_PATH, path=args[0])

    head = repo.head_commit(branch)
    tracked = head is not None and filename in head.tree
    stage = repo.load_stage()

    if not tracked:
        if filename not in stage.additions:
            return Response.of(ResponseKind.NO_REASON_TO_REMOVE, filename=filename)
        stage.clear_entry(filename)
        repo.save_stage(stage)
        return Response.of(ResponseKind.RM_SUCCESS, filename=filename, untracked_only=True)

    stage.stage_removal(filename)
    repo.save_stage(stage)

    file_path = repo.work_tree / Path(*filename.split('/'))
    if file_path.is_file():
        file_path.unlink()

    return Response.of(ResponseKind.RM_SUCCESS, filename=filename, untracked_only=False)
