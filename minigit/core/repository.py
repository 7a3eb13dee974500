"""Repository management for mini-git."""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from .errors import RepositoryExistsError
from .index import Stage, StagingIndex
from .objects import Blob, Commit
from .refs import DEFAULT_BRANCH, RefStore
from .store import ObjectStore
from .worktree import WorkTreeScanner

logger = logging.getLogger(__name__)

METADATA_DIR = '.mini-git'


class Repository:
    """
    Represents a mini-git repository.

    The repository owns the .mini-git directory layout and is the only
    component that decides where things live on disk. The object store,
    index, refs and scanner are handed their paths from here.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to the working tree (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.git_dir = self.work_tree / METADATA_DIR
        self.objects_dir = self.git_dir / 'objects'
        self.index_file = self.git_dir / 'index'
        self.refs_dir = self.git_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.head_file = self.git_dir / 'HEAD'

        self.store = ObjectStore(self.objects_dir)
        self.index = StagingIndex(self.index_file)
        self.refs = RefStore(self.heads_dir, self.head_file)
        self.scanner = WorkTreeScanner(self.work_tree, METADATA_DIR)

    def exists(self) -> bool:
        """
        Check that the repository directories are all present.

        Returns:
            bool: True if .mini-git, objects, refs and refs/heads are directories
        """
        return all(
            d.is_dir() for d in (self.git_dir, self.objects_dir, self.refs_dir, self.heads_dir)
        )

    def init(self) -> str:
        """
        Initialize a new repository.

        Creates the .mini-git directory structure:
        .mini-git/
        ├── objects/       # Blobs and commits
        ├── refs/
        │   └── heads/     # Branch references
        │       └── master # Empty until the first commit
        └── HEAD           # ref: refs/heads/master

        The index file is created by the first add.

        Returns:
            str: Name of the current branch

        Raises:
            RepositoryExistsError: If the repository already exists
        """
        if self.exists():
            raise RepositoryExistsError(f"Repository already exists at {self.git_dir}")

        for directory in (self.git_dir, self.objects_dir, self.refs_dir, self.heads_dir):
            directory.mkdir(exist_ok=True)

        self.refs.write_head_pointer(DEFAULT_BRANCH)
        if not self.refs.branch_exists(DEFAULT_BRANCH):
            self.refs.set_branch_head(DEFAULT_BRANCH, '')

        logger.debug("Initialized repository at %s", self.git_dir)
        return DEFAULT_BRANCH

    def initialize_branch_state(self) -> str:
        """
        Work out which branch is checked out.

        Returns:
            str: Branch named by HEAD, the default branch if HEAD is absent,
                or '' when there is no repository

        Raises:
            MalformedHeadError: If HEAD exists but cannot be decoded
        """
        if not self.exists():
            return ''
        return self.refs.current_branch()

    def blob_id_if_stored(self, filename: str, content: bytes) -> str:
        """
        Look up the blob for a file without writing it.

        Returns:
            str: Blob id if already stored, '' otherwise
        """
        blob = Blob.create(filename, content)
        return blob.id if self.store.exists(blob.id) else ''

    def stage_file(self, filename: str, content: bytes) -> str:
        """
        Write a file's blob immediately and return its id.

        Blobs are written at staging time, so the store may hold blobs
        that are never committed.

        Args:
            filename: '/'-separated path relative to the working tree
            content: Raw file content

        Returns:
            str: Blob id
        """
        existing = self.blob_id_if_stored(filename, content)
        if existing:
            return existing
        return self.store.put(Blob.create(filename, content))

    def load_stage(self) -> Stage:
        return self.index.load()

    def save_stage(self, stage: Stage) -> None:
        self.index.save(stage)

    def head_commit_id(self, branch: str) -> str:
        """Commit id of a branch, '' if it has none."""
        return self.refs.head_commit_id(branch)

    def head_commit(self, branch: str) -> Optional[Commit]:
        """
        Get the commit a branch points at.

        Args:
            branch: Branch name

        Returns:
            Commit, or None if the branch has no commit yet

        Raises:
            ObjectNotFoundError: If the branch names a commit that is not stored
        """
        commit_id = self.head_commit_id(branch)
        if not commit_id:
            return None
        return self.resolve_commit(commit_id)

    def commit_snapshot(
        self,
        message: str,
        parent_id: str,
        tree: Dict[str, str],
        branch: str
    ) -> str:
        """
        Record a snapshot and advance a branch to it.

        Args:
            message: Commit message
            parent_id: Parent commit id, '' for a root commit
            tree: Complete filename to blob id mapping
            branch: Branch to advance

        Returns:
            str: New commit id
        """
        commit = Commit.create(message=message, parent_id=parent_id, tree=tree)
        commit_id = self.store.put(commit)
        self.refs.set_branch_head(branch, commit_id)
        logger.debug("Committed %s on %s", commit_id, branch)
        return commit_id

    def resolve_commit(self, commit_id: str) -> Commit:
        """
        Read a commit by id.

        Raises:
            ObjectNotFoundError: If the commit is not stored
            CorruptObjectError: If the object is not a commit
        """
        return self.store.get(commit_id, Commit)

    def resolve_blob(self, blob_id: str) -> Blob:
        return self.store.get(blob_id, Blob)

    def history(self, branch: str) -> List[Commit]:
        """
        Follow parent links from a branch's head.

        Args:
            branch: Branch name

        Returns:
            List of commits, newest first
        """
        commits = []
        commit_id = self.head_commit_id(branch)

        while commit_id:
            commit = self.resolve_commit(commit_id)
            commits.append(commit)
            commit_id = commit.parent_id

        return commits

    def current_snapshot(self) -> Dict[str, str]:
        """Blob ids for every file in the working tree."""
        return self.scanner.current_snapshot()

    def relative_name(self, path: str) -> Optional[str]:
        """
        Convert a user-supplied path into a logical filename.

        Args:
            path: Absolute path, or path relative to the working tree

        Returns:
            '/'-separated path relative to the working tree, or None if the
            path lies outside it or inside the metadata directory

        Symlinks are not followed, so a link is named by its own path.
        """
        full_path = os.path.normpath(os.path.join(self.work_tree, path))
        rel_path = os.path.relpath(full_path, self.work_tree)

        parts = Path(rel_path).parts
        if rel_path == os.curdir or parts[0] in (os.pardir, METADATA_DIR):
            return None
        return '/'.join(parts)

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
