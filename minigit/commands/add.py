"""Add command - stage a file for commit."""

from pathlib import Path
from typing import List

from minigit.commands.response import Response, ResponseKind
from minigit.core.repository import Repository


def run(repo: Repository, branch: str, args: List[str]) -> Response:
    """
    Stage a file.

    The blob is written to the object store straight away. Adding a file
    whose content matches the last commit still records it as staged.
    """
    if not args or not args[0]:
        return Response.of(ResponseKind.MISSING_ARGUMENT, command='add', argument='file')

    filename = repo.relative_name(args[0])
    if filename is None:
        return Response.of(ResponseKind.INVALID_PATH, path=args[0])

    file_path = repo.work_tree / Path(*filename.split('/'))
    if not file_path.is_file():
        return Response.of(ResponseKind.FILE_NOT_FOUND, path=args[0])

    try:
        content = file_path.read_bytes()
    except OSError:
        return Response.of(ResponseKind.FILE_NOT_FOUND, path=args[0])

    blob_id = repo.stage_file(filename, content)

    stage = repo.load_stage()
    stage.stage_addition(filename, blob_id)
    repo.save_stage(stage)

    return Response.of(ResponseKind.ADD_SUCCESS, filename=filename, blob_id=blob_id)
