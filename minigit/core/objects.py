"""Blob and commit objects for mini-git."""

import struct
import time
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .errors import CorruptObjectError
from .hash import fingerprint, hash_object

MAGIC = b'MGIT'
FORMAT_VERSION = 1

KIND_BLOB = 1
KIND_COMMIT = 2

# magic, version, kind
HEADER = struct.Struct('>4sBB')


class RecordWriter:
    """Builds a length-prefixed binary record."""

    def __init__(self):
        self.buffer = bytearray()

    def write_bytes(self, value: bytes) -> None:
        self.buffer.extend(struct.pack('>I', len(value)))
        self.buffer.extend(value)

    def write_str(self, value: str) -> None:
        self.write_bytes(value.encode('utf-8'))

    def write_int(self, value: int) -> None:
        self.buffer.extend(struct.pack('>q', value))

    def write_count(self, value: int) -> None:
        self.buffer.extend(struct.pack('>I', value))

    def write_mapping(self, mapping: Dict[str, str]) -> None:
        self.write_count(len(mapping))
        for key in sorted(mapping):
            self.write_str(key)
            self.write_str(mapping[key])

    def getvalue(self) -> bytes:
        return bytes(self.buffer)


class RecordReader:
    """Reads fields written by RecordWriter, in the same order."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset

    def _take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise CorruptObjectError("Record truncated")
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def read_bytes(self) -> bytes:
        (length,) = struct.unpack('>I', self._take(4))
        return self._take(length)

    def read_str(self) -> str:
        try:
            return self.read_bytes().decode('utf-8')
        except UnicodeDecodeError as e:
            raise CorruptObjectError(f"Invalid string field: {e}")

    def read_int(self) -> int:
        (value,) = struct.unpack('>q', self._take(8))
        return value

    def read_count(self) -> int:
        (value,) = struct.unpack('>I', self._take(4))
        return value

    def read_mapping(self) -> Dict[str, str]:
        count = self.read_count()
        mapping = {}
        for _ in range(count):
            key = self.read_str()
            mapping[key] = self.read_str()
        return mapping

    def at_end(self) -> bool:
        return self.offset == len(self.data)


class MiniGitObject(ABC):
    """Base class for stored objects."""

    kind: int = 0

    def __init__(self):
        self.id: str = ''

    @abstractmethod
    def write_fields(self, writer: RecordWriter) -> None:
        """Write the object's fields, id first."""
        pass

    @abstractmethod
    def read_fields(self, reader: RecordReader) -> None:
        """Read the object's fields in the order write_fields wrote them."""
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def serialize(self) -> bytes:
        """
        Serialize object to its on-disk record.

        Format: MGIT magic, version byte, kind byte, then the fields.

        Returns:
            bytes: Serialized record
        """
        writer = RecordWriter()
        self.write_fields(writer)
        return HEADER.pack(MAGIC, FORMAT_VERSION, self.kind) + writer.getvalue()


def deserialize(data: bytes) -> MiniGitObject:
    """
    Decode an on-disk record into a Blob or Commit.

    Args:
        data: Record bytes as written by MiniGitObject.serialize

    Returns:
        The decoded object

    Raises:
        CorruptObjectError: If the header, version, kind or fields are invalid
    """
    if len(data) < HEADER.size:
        raise CorruptObjectError("Record too short")

    magic, version, kind = HEADER.unpack_from(data)
    if magic != MAGIC:
        raise CorruptObjectError(f"Invalid object signature: {magic!r}")
    if version != FORMAT_VERSION:
        raise CorruptObjectError(f"Unsupported object version: {version}")

    if kind == KIND_BLOB:
        obj = Blob()
    elif kind == KIND_COMMIT:
        obj = Commit()
    else:
        raise CorruptObjectError(f"Unknown object kind: {kind}")

    reader = RecordReader(data, HEADER.size)
    try:
        obj.read_fields(reader)
    except struct.error as e:
        raise CorruptObjectError(f"Malformed record: {e}")
    if not reader.at_end():
        raise CorruptObjectError("Trailing data after record")
    return obj


class Blob(MiniGitObject):
    """
    Represents file content at staging time.

    Unlike git, the id of a blob covers the filename the content was
    staged under, so a renamed file is a new blob.
    """

    kind = KIND_BLOB

    def __init__(self, content: Optional[bytes] = None):
        super().__init__()
        self.content = content or b''

    @classmethod
    def create(cls, filename: str, content: bytes) -> 'Blob':
        """
        Create a blob whose id is derived from filename and content.

        Args:
            filename: Path relative to the working tree
            content: Raw file content

        Returns:
            Blob: New blob
        """
        blob = cls(content)
        blob.id = fingerprint(filename, content)
        return blob

    def write_fields(self, writer: RecordWriter) -> None:
        writer.write_str(self.id)
        writer.write_bytes(self.content)

    def read_fields(self, reader: RecordReader) -> None:
        self.id = reader.read_str()
        self.content = reader.read_bytes()

    def __repr__(self) -> str:
        return f"Blob(id={self.id[:7]}, size={len(self.content)})"


class Commit(MiniGitObject):
    """
    Represents a snapshot of the working tree.

    A commit captures:
    - The full mapping of filenames to blob ids (not a delta)
    - The parent commit id, empty for the root commit
    - A timestamp in Unix seconds
    - The commit message
    """

    kind = KIND_COMMIT

    def __init__(self):
        super().__init__()
        self.message: str = ''
        self.timestamp: int = 0
        self.parent_id: str = ''
        self.tree: Dict[str, str] = {}

    def body(self) -> bytes:
        """
        Serialize the hashed part of the commit.

        The id is assigned from this body, so it does not include the id.

        Returns:
            bytes: Encoded message, timestamp, parent id and tree
        """
        writer = RecordWriter()
        self._write_body(writer)
        return writer.getvalue()

    def _write_body(self, writer: RecordWriter) -> None:
        writer.write_str(self.message)
        writer.write_int(self.timestamp)
        writer.write_str(self.parent_id)
        writer.write_mapping(self.tree)

    def compute_id(self) -> str:
        return hash_object(self.body())

    def write_fields(self, writer: RecordWriter) -> None:
        writer.write_str(self.id)
        self._write_body(writer)

    def read_fields(self, reader: RecordReader) -> None:
        self.id = reader.read_str()
        self.message = reader.read_str()
        self.timestamp = reader.read_int()
        self.parent_id = reader.read_str()
        self.tree = reader.read_mapping()

    @classmethod
    def create(
        cls,
        message: str,
        parent_id: str,
        tree: Dict[str, str],
        timestamp: Optional[int] = None
    ) -> 'Commit':
        """
        Create a new commit and assign its id.

        Args:
            message: Commit message
            parent_id: Parent commit id, or '' for a root commit
            tree: Mapping of filename to blob id
            timestamp: Unix timestamp (defaults to current time)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.parent_id = parent_id or ''
        commit.tree = dict(tree)

        if timestamp is None:
            timestamp = int(time.time())
        commit.timestamp = timestamp

        commit.id = commit.compute_id()
        return commit

    def __repr__(self) -> str:
        parent_info = f", parent={self.parent_id[:7]}" if self.parent_id else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(id={self.id[:7]}{parent_info}, msg='{msg_preview}')"
