"""Index (staging area) implementation."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Set

from .errors import CorruptIndexError, CorruptObjectError
from .objects import RecordReader, RecordWriter

logger = logging.getLogger(__name__)

INDEX_MAGIC = b'MGIX'
INDEX_VERSION = 1


@dataclass
class Stage:
    """
    Pending changes for the next commit.

    additions maps filenames to the blob ids they were staged with;
    removals holds filenames to drop from the next snapshot. A filename
    is never in both at once.
    """
    additions: Dict[str, str] = field(default_factory=dict)
    removals: Set[str] = field(default_factory=set)

    def stage_addition(self, filename: str, blob_id: str) -> None:
        """Stage a file's blob, cancelling any pending removal."""
        self.removals.discard(filename)
        self.additions[filename] = blob_id

    def stage_removal(self, filename: str) -> None:
        """Mark a file for removal, cancelling any pending addition."""
        self.additions.pop(filename, None)
        self.removals.add(filename)

    def clear_entry(self, filename: str) -> None:
        """Forget anything staged for a file."""
        self.additions.pop(filename, None)
        self.removals.discard(filename)

    def is_empty(self) -> bool:
        return not self.additions and not self.removals

    def entries(self) -> Set[str]:
        """All filenames with a pending change."""
        return set(self.additions) | self.removals

    def apply_to(self, tree: Dict[str, str]) -> Dict[str, str]:
        """
        Build the next snapshot from a parent tree.

        Args:
            tree: Parent commit's filename to blob id mapping

        Returns:
            New mapping with additions applied and removals dropped
        """
        snapshot = dict(tree)
        snapshot.update(self.additions)
        for filename in self.removals:
            snapshot.pop(filename, None)
        return snapshot

    def __len__(self) -> int:
        return len(self.additions) + len(self.removals)


class StagingIndex:
    """
    Reads and writes the Stage record in .mini-git/index.

    Format:
    - Header: 'MGIX' + version (1 byte)
    - Additions: count (4 bytes), then (filename, blob id) pairs sorted by filename
    - Removals: count (4 bytes), then filenames sorted
    Strings are length-prefixed UTF-8.
    """

    def __init__(self, index_file: Path):
        self.index_file = index_file

    def load(self) -> Stage:
        """
        Read the stage from disk.

        Returns:
            Stage: Stored stage, or an empty one if no index file exists

        Raises:
            CorruptIndexError: If the index file cannot be decoded
        """
        if not self.index_file.exists():
            return Stage()

        data = self.index_file.read_bytes()
        if data[:4] != INDEX_MAGIC or len(data) < 5:
            raise CorruptIndexError(f"Invalid index signature: {data[:4]!r}")
        if data[4] != INDEX_VERSION:
            raise CorruptIndexError(f"Unsupported index version: {data[4]}")

        reader = RecordReader(data, 5)
        try:
            additions = reader.read_mapping()
            count = reader.read_count()
            removals = {reader.read_str() for _ in range(count)}
        except CorruptObjectError as e:
            raise CorruptIndexError(str(e))
        if not reader.at_end():
            raise CorruptIndexError("Trailing data in index")

        return Stage(additions=additions, removals=removals)

    def save(self, stage: Stage) -> None:
        """
        Write the stage to disk.

        Args:
            stage: Stage to persist
        """
        writer = RecordWriter()
        writer.write_mapping(stage.additions)
        writer.write_count(len(stage.removals))
        for filename in sorted(stage.removals):
            writer.write_str(filename)

        content = INDEX_MAGIC + bytes([INDEX_VERSION]) + writer.getvalue()
        self.index_file.write_bytes(content)
        logger.debug(
            "Saved index: %d addition(s), %d removal(s)",
            len(stage.additions), len(stage.removals)
        )
