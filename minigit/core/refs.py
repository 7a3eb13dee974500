"""Reference management for mini-git."""

import logging
import re
from pathlib import Path
from typing import List, Tuple

from .errors import BranchExistsError, InvalidBranchNameError, MalformedHeadError

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = 'master'
HEAD_PREFIX = 'ref: '
HEADS_REF = 'refs/heads/'

_INVALID_BRANCH = re.compile(r'[\s/\\:*?"<>|~^]')


def validate_branch_name(name: str) -> str:
    """
    Check that a branch name can be stored as a single ref file.

    Args:
        name: Candidate branch name

    Returns:
        The name unchanged

    Raises:
        InvalidBranchNameError: If the name is empty, starts with '.',
            or contains a separator, whitespace or a special character
    """
    if not name or name.startswith('.') or '..' in name or _INVALID_BRANCH.search(name):
        raise InvalidBranchNameError(f"Invalid branch name: {name!r}")
    return name


def encode_head_pointer(branch_name: str) -> str:
    """
    Build the HEAD file content for a branch.

    Args:
        branch_name: Branch HEAD should point at

    Returns:
        'ref: refs/heads/<branch_name>'
    """
    return f"{HEAD_PREFIX}{HEADS_REF}{validate_branch_name(branch_name)}"


def decode_head_pointer(content: str) -> str:
    """
    Extract the branch name from HEAD file content.

    Args:
        content: Raw HEAD content, surrounding whitespace allowed

    Returns:
        Branch name

    Raises:
        MalformedHeadError: If the content is not 'ref: refs/heads/<branch>'
    """
    text = content.strip()
    if not text.startswith(HEAD_PREFIX):
        raise MalformedHeadError(f"HEAD is not a symbolic ref: {text!r}")

    ref = text[len(HEAD_PREFIX):]
    if not ref.startswith(HEADS_REF):
        raise MalformedHeadError(f"HEAD does not point at a branch: {ref!r}")

    try:
        return validate_branch_name(ref[len(HEADS_REF):])
    except InvalidBranchNameError as e:
        raise MalformedHeadError(str(e))


class RefStore:
    """
    Manages branch pointers and HEAD.

    Handles:
    - HEAD, a symbolic reference naming the current branch
    - Branch references (refs/heads/<name>), each holding a commit id

    A branch file that is missing or empty means the branch has no commit.
    """

    def __init__(self, heads_dir: Path, head_file: Path):
        """
        Initialize reference store.

        Args:
            heads_dir: Directory holding one file per branch
            head_file: Path to HEAD
        """
        self.heads_dir = heads_dir
        self.head_file = head_file

    def branch_path(self, branch_name: str) -> Path:
        return self.heads_dir / validate_branch_name(branch_name)

    def current_branch(self) -> str:
        """
        Get the branch HEAD points at.

        Returns:
            Branch name, or the default branch when HEAD is absent

        Raises:
            MalformedHeadError: If HEAD exists but cannot be decoded
        """
        if not self.head_file.exists():
            return DEFAULT_BRANCH
        return decode_head_pointer(self.head_file.read_text())

    def write_head_pointer(self, branch_name: str) -> None:
        """Point HEAD at a branch."""
        self.head_file.write_text(encode_head_pointer(branch_name))
        logger.debug("HEAD -> %s", branch_name)

    def head_commit_id(self, branch_name: str) -> str:
        """
        Read the commit id a branch points at.

        Args:
            branch_name: Branch to read

        Returns:
            Commit id, or '' if the branch has no commit or does not exist
        """
        path = self.branch_path(branch_name)
        if not path.is_file():
            return ''
        return path.read_text().strip()

    def set_branch_head(self, branch_name: str, commit_id: str) -> None:
        """
        Point a branch at a commit, creating the branch file if needed.

        Args:
            branch_name: Branch to update
            commit_id: Commit id to store, '' for no commit
        """
        self.branch_path(branch_name).write_text(commit_id)
        logger.debug("refs/heads/%s -> %s", branch_name, commit_id or '(none)')

    def branch_exists(self, branch_name: str) -> bool:
        return self.branch_path(branch_name).is_file()

    def create_branch(self, branch_name: str, commit_id: str) -> None:
        """
        Create a new branch.

        Args:
            branch_name: Branch name
            commit_id: Commit id to point to

        Raises:
            BranchExistsError: If the branch already exists
            InvalidBranchNameError: If the name is not usable
        """
        if self.branch_exists(branch_name):
            raise BranchExistsError(f"A branch named '{branch_name}' already exists")
        self.set_branch_head(branch_name, commit_id)

    def list_branches(self) -> List[Tuple[str, str]]:
        """
        List all branches.

        Returns:
            List of (branch_name, commit_id) tuples sorted by name
        """
        if not self.heads_dir.is_dir():
            return []

        branches = []
        for branch_file in self.heads_dir.iterdir():
            if branch_file.is_file():
                branches.append((branch_file.name, branch_file.read_text().strip()))

        return sorted(branches, key=lambda x: x[0])
