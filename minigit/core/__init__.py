"""Core functionality for mini-git.

This module contains the repository layer:
- Objects (Blob, Commit) and their record encoding
- Content-addressed object store
- Index/staging area
- Branch and HEAD references
- Working tree scanning
- Configuration and errors

Command handlers live in minigit.commands, dispatching in minigit.engine.
"""

from minigit.core.objects import MiniGitObject, Blob, Commit
from minigit.core.repository import Repository, METADATA_DIR
from minigit.core.hash import hash_object, fingerprint, fingerprint_file
from minigit.core.store import ObjectStore
from minigit.core.index import Stage, StagingIndex
from minigit.core.refs import (RefStore, DEFAULT_BRANCH, encode_head_pointer,
                               decode_head_pointer, validate_branch_name)
from minigit.core.worktree import WorkTreeScanner
from minigit.core.config import Config, get_config
from minigit.core.errors import (MiniGitError, ObjectNotFoundError, CorruptObjectError,
                                 CorruptIndexError, MalformedHeadError, RepositoryExistsError,
                                 BranchExistsError, InvalidBranchNameError)

__all__ = [
    'MiniGitObject',
    'Blob',
    'Commit',
    'Repository',
    'METADATA_DIR',
    'hash_object',
    'fingerprint',
    'fingerprint_file',
    'ObjectStore',
    'Stage',
    'StagingIndex',
    'RefStore',
    'DEFAULT_BRANCH',
    'encode_head_pointer',
    'decode_head_pointer',
    'validate_branch_name',
    'WorkTreeScanner',
    'Config',
    'get_config',
    'MiniGitError',
    'ObjectNotFoundError',
    'CorruptObjectError',
    'CorruptIndexError',
    'MalformedHeadError',
    'RepositoryExistsError',
    'BranchExistsError',
    'InvalidBranchNameError',
]
