"""Routes command lines to handlers."""

import logging
from pathlib import Path
from typing import List

from minigit.commands import COMMANDS
from minigit.core.repository import Repository
from minigit.engine.parser import tokenize
from minigit.commands.response import Response, ResponseKind

logger = logging.getLogger(__name__)

PROGRAM = 'git'


class Engine:
    """
    Owns one repository and the name of its current branch.

    The branch is derived from HEAD once, when the engine starts, and
    again after init; handlers receive it as an argument.
    """

    def __init__(self, work_dir: str = '.'):
        """
        Initialize engine.

        Args:
            work_dir: Working tree the commands operate on

        Raises:
            MalformedHeadError: If the repository's HEAD cannot be decoded
        """
        self.work_dir = Path(work_dir).resolve()
        self.repo = Repository(str(self.work_dir))
        self.branch = self.repo.initialize_branch_state()

    def respond(self, line: str) -> Response:
        """
        Run one command line such as 'git add a.txt'.

        Args:
            line: Raw command line

        Returns:
            Response describing the outcome
        """
        if not line.strip():
            return Response.of(ResponseKind.NONE_MESSAGE)

        tokens = tokenize(line)
        if len(tokens) < 2 or tokens[0] != PROGRAM:
            return Response.of(ResponseKind.UNKNOWN_COMMAND, command=line.strip())

        return self.execute(tokens[1], tokens[2:])

    def execute(self, verb: str, args: List[str]) -> Response:
        """
        Run a tokenized command.

        Args:
            verb: Command name (init, add, commit, ...)
            args: Remaining arguments

        Returns:
            Response describing the outcome
        """
        handler = COMMANDS.get(verb)
        if handler is None:
            return Response.of(ResponseKind.UNKNOWN_COMMAND, command=verb)

        logger.debug("Dispatching %s %s", verb, args)

        if verb == 'init':
            if self.repo.exists():
                return Response.of(ResponseKind.ALREADY_INIT, path=str(self.repo.git_dir))
            response = handler(self.repo, self.branch, args)
            self.branch = self.repo.initialize_branch_state()
            return response

        if not self.repo.exists():
            return Response.of(ResponseKind.NOT_INIT)

        return handler(self.repo, self.branch, args)

    def prompt(self) -> str:
        """Working directory, followed by (branch) when one is known."""
        if not self.branch:
            return str(self.work_dir)
        return f"{self.work_dir}({self.branch})"
