"""Exceptions raised by the mini-git core."""


class MiniGitError(Exception):
    """Base class for all mini-git errors."""


class ObjectNotFoundError(MiniGitError):
    """A referenced object id has no backing file in the object store."""

    def __init__(self, object_id: str):
        super().__init__(f"Object {object_id} not found")
        self.object_id = object_id


class CorruptObjectError(MiniGitError):
    """An object file exists but cannot be decoded as the expected kind."""


class CorruptIndexError(MiniGitError):
    """The index file exists but cannot be decoded."""


class MalformedHeadError(MiniGitError):
    """HEAD does not hold a 'ref: refs/heads/<branch>' pointer."""


class RepositoryExistsError(MiniGitError):
    """init was called on a directory that already holds a repository."""


class BranchExistsError(MiniGitError):
    """A branch with the requested name already exists."""


class InvalidBranchNameError(MiniGitError):
    """The requested branch name cannot be used as a ref file name."""
