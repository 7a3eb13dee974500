"""Working tree scanning."""

import logging
import os
from pathlib import Path
from typing import Dict

from .hash import fingerprint_file

logger = logging.getLogger(__name__)


class WorkTreeScanner:
    """
    Computes blob ids for every file in the working tree.

    Nothing is written to the object store; the result is only used to
    compare the working tree against the stage and the head commit.
    """

    def __init__(self, work_tree: Path, metadata_dir_name: str):
        """
        Initialize scanner.

        Args:
            work_tree: Root of the working tree
            metadata_dir_name: Top-level directory to skip (.mini-git)
        """
        self.work_tree = work_tree
        self.metadata_dir_name = metadata_dir_name

    def current_snapshot(self) -> Dict[str, str]:
        """
        Walk the working tree.

        Returns:
            Mapping of '/'-separated relative filename to blob id
        """
        files = {}

        for dirpath, dirnames, filenames in os.walk(self.work_tree):
            rel_dir = Path(dirpath).relative_to(self.work_tree)
            prefix = '/'.join(rel_dir.parts)
            logger.debug("Scanning %s", prefix or '.')

            if not prefix and self.metadata_dir_name in dirnames:
                dirnames.remove(self.metadata_dir_name)

            for name in filenames:
                path = Path(dirpath) / name
                if not path.is_file():
                    continue
                filename = f"{prefix}/{name}" if prefix else name
                try:
                    files[filename] = fingerprint_file(filename, path)
                except FileNotFoundError:
                    logger.debug("%s disappeared during scan", filename)

        return files
