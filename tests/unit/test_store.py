"""Object store tests."""

import logging

import pytest

from minigit.core.errors import CorruptObjectError, ObjectNotFoundError
from minigit.core.objects import Blob, Commit
from minigit.core.store import ObjectStore


@pytest.fixture
def store(repo):
    return ObjectStore(repo.objects_dir)


def test_put_and_get_blob(store):
    blob = Blob.create('a.txt', b'hi')
    assert store.put(blob) == blob.id
    assert store.exists(blob.id)

    read = store.get(blob.id, Blob)
    assert read.content == b'hi'


def test_object_path_is_flat(store):
    blob = Blob.create('a.txt', b'hi')
    store.put(blob)
    assert store.object_path(blob.id) == store.objects_dir / blob.id
    assert store.object_path(blob.id).is_file()


def test_put_never_overwrites(store):
    """An existing object file is trusted and left alone."""
    blob = Blob.create('a.txt', b'hi')
    path = store.object_path(blob.id)
    path.write_bytes(b'sentinel')

    store.put(blob)

    assert path.read_bytes() == b'sentinel'


def test_put_twice_leaves_one_file(store):
    store.put(Blob.create('a.txt', b'hi'))
    store.put(Blob.create('a.txt', b'hi'))
    assert len(list(store.objects_dir.iterdir())) == 1


def test_distinct_inputs_distinct_objects(store):
    ids = {
        store.put(Blob.create('a.txt', b'hi')),
        store.put(Blob.create('b.txt', b'hi')),
        store.put(Blob.create('a.txt', b'ho')),
    }
    assert len(ids) == 3


def test_exists_false_for_missing_or_empty_id(store):
    assert store.exists('0' * 40) is False
    assert store.exists('') is False


def test_get_missing_raises(store):
    with pytest.raises(ObjectNotFoundError) as exc:
        store.get('0' * 40)
    assert exc.value.object_id == '0' * 40


def test_get_empty_id_raises(store):
    with pytest.raises(ObjectNotFoundError):
        store.get('')


def test_get_wrong_kind_raises(store):
    blob = Blob.create('a.txt', b'hi')
    store.put(blob)
    with pytest.raises(CorruptObjectError, match="expected commit"):
        store.get(blob.id, Commit)


def test_get_id_mismatch_raises(store):
    blob = Blob.create('a.txt', b'hi')
    store.object_path('e' * 40).write_bytes(blob.serialize())
    with pytest.raises(CorruptObjectError):
        store.get('e' * 40)


def test_put_logs_writes(store, caplog):
    blob = Blob.create('a.txt', b'hi')
    with caplog.at_level(logging.DEBUG, logger='minigit.core.store'):
        store.put(blob)
        store.put(blob)
    assert f"Wrote blob {blob.id}" in caplog.text
    assert "already stored" in caplog.text
