"""Typed outcomes returned by command handlers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class ResponseKind(Enum):
    """Every outcome a command can produce."""

    NONE_MESSAGE = 'none_message'
    UNKNOWN_COMMAND = 'unknown_command'
    NOT_INIT = 'not_init'
    ALREADY_INIT = 'already_init'
    MISSING_ARGUMENT = 'missing_argument'
    INIT_SUCCESS = 'init_success'
    ADD_SUCCESS = 'add_success'
    FILE_NOT_FOUND = 'file_not_found'
    INVALID_PATH = 'invalid_path'
    COMMIT_SUCCESS = 'commit_success'
    NOTHING_TO_COMMIT = 'nothing_to_commit'
    STATUS = 'status'
    RM_SUCCESS = 'rm_success'
    NO_REASON_TO_REMOVE = 'no_reason_to_remove'
    LOG = 'log'
    BRANCH_CREATED = 'branch_created'
    BRANCH_EXISTS = 'branch_exists'
    BRANCH_LIST = 'branch_list'
    INVALID_BRANCH_NAME = 'invalid_branch_name'
    NO_COMMITS = 'no_commits'
    NOT_SUPPORTED = 'not_supported'


SUCCESS_KINDS = frozenset({
    ResponseKind.NONE_MESSAGE,
    ResponseKind.INIT_SUCCESS,
    ResponseKind.ADD_SUCCESS,
    ResponseKind.COMMIT_SUCCESS,
    ResponseKind.STATUS,
    ResponseKind.RM_SUCCESS,
    ResponseKind.LOG,
    ResponseKind.BRANCH_CREATED,
    ResponseKind.BRANCH_LIST,
})


@dataclass
class Response:
    """
    Result of one command.

    kind says what happened; payload carries the command-specific data
    the display layer needs. No user-facing text is built here.
    """
    kind: ResponseKind
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, kind: ResponseKind, **payload: Any) -> 'Response':
        return cls(kind, payload)

    @property
    def ok(self) -> bool:
        return self.kind in SUCCESS_KINDS

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]
