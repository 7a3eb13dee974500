"""Content-addressed object store."""

import logging
from pathlib import Path
from typing import Optional, Type, TypeVar

from .errors import CorruptObjectError, ObjectNotFoundError
from .objects import MiniGitObject, deserialize

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=MiniGitObject)


class ObjectStore:
    """
    Stores blobs and commits under objects/<id>.

    Objects are write-once: an id that already has a file on disk is
    assumed to hold identical content and is never rewritten.
    """

    def __init__(self, objects_dir: Path):
        """
        Initialize object store.

        Args:
            objects_dir: Directory holding one file per object
        """
        self.objects_dir = objects_dir

    def object_path(self, object_id: str) -> Path:
        """
        Get filesystem path for an object.

        Args:
            object_id: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / object_id

    def exists(self, object_id: str) -> bool:
        """Check if object exists in the store."""
        if not object_id:
            return False
        return self.object_path(object_id).is_file()

    def put(self, obj: MiniGitObject) -> str:
        """
        Write object to the store.

        Args:
            obj: Blob or Commit with its id assigned

        Returns:
            str: Object id
        """
        path = self.object_path(obj.id)

        if path.exists():
            logger.debug("Object %s already stored, skipping write", obj.id)
            return obj.id

        path.write_bytes(obj.serialize())
        logger.debug("Wrote %s %s", obj.type, obj.id)
        return obj.id

    def get(self, object_id: str, expected: Optional[Type[T]] = None) -> T:
        """
        Read object from the store.

        Args:
            object_id: 40-character SHA-1 hash
            expected: Object class the caller requires (Blob or Commit)

        Returns:
            The decoded object

        Raises:
            ObjectNotFoundError: If no object is stored under the id
            CorruptObjectError: If the record is unreadable or of the wrong kind
        """
        path = self.object_path(object_id)

        if not object_id or not path.is_file():
            raise ObjectNotFoundError(object_id)

        obj = deserialize(path.read_bytes())

        if expected is not None and not isinstance(obj, expected):
            raise CorruptObjectError(
                f"Object {object_id} is a {obj.type}, expected {expected.__name__.lower()}"
            )
        if obj.id != object_id:
            raise CorruptObjectError(f"Object {object_id} records id {obj.id}")

        return obj
