"""Repository facade tests."""

import os
import shutil

import pytest

from minigit.core.errors import (MalformedHeadError, ObjectNotFoundError,
                                 RepositoryExistsError)
from minigit.core.hash import fingerprint
from minigit.core.repository import Repository


def test_repository_init(temp_dir):
    """Test repository initialization creates structure."""
    repo = Repository(str(temp_dir))
    assert repo.exists() is False

    branch = repo.init()

    assert branch == 'master'
    assert repo.exists() is True
    assert repo.git_dir == temp_dir / '.mini-git'
    assert repo.objects_dir.is_dir()
    assert repo.heads_dir.is_dir()
    assert repo.head_file.is_file()
    assert not repo.index_file.exists()


def test_repository_head_content(repo):
    """HEAD points at master, without a trailing newline."""
    assert repo.head_file.read_text() == 'ref: refs/heads/master'


def test_init_creates_master_without_commit(repo):
    assert (repo.heads_dir / 'master').read_text() == ''
    assert repo.head_commit_id('master') == ''
    assert repo.head_commit('master') is None
    assert list(repo.objects_dir.iterdir()) == []


def test_init_twice_raises_and_writes_nothing(repo):
    repo.head_file.write_text('ref: refs/heads/dev')
    with pytest.raises(RepositoryExistsError, match="already exists"):
        repo.init()
    assert repo.head_file.read_text() == 'ref: refs/heads/dev'


def test_exists_requires_all_directories(repo):
    shutil.rmtree(repo.heads_dir)
    assert repo.exists() is False


def test_initialize_branch_state_without_repository(temp_dir):
    assert Repository(str(temp_dir)).initialize_branch_state() == ''


def test_initialize_branch_state_reads_head(repo):
    repo.head_file.write_text('ref: refs/heads/feature\n')
    assert repo.initialize_branch_state() == 'feature'


def test_initialize_branch_state_defaults_to_master(repo):
    repo.head_file.unlink()
    assert repo.initialize_branch_state() == 'master'


def test_initialize_branch_state_malformed_head(repo):
    repo.head_file.write_text('a' * 40)
    with pytest.raises(MalformedHeadError):
        repo.initialize_branch_state()


def test_stage_file_writes_blob_immediately(repo, object_files):
    blob_id = repo.stage_file('a.txt', b'hi')

    assert blob_id == fingerprint('a.txt', b'hi')
    assert object_files(repo) == [blob_id]
    assert repo.resolve_blob(blob_id).content == b'hi'


def test_stage_file_is_idempotent(repo, object_files):
    first = repo.stage_file('a.txt', b'hi')
    second = repo.stage_file('a.txt', b'hi')

    assert first == second
    assert object_files(repo) == [first]


def test_blob_id_if_stored(repo):
    assert repo.blob_id_if_stored('a.txt', b'hi') == ''
    blob_id = repo.stage_file('a.txt', b'hi')
    assert repo.blob_id_if_stored('a.txt', b'hi') == blob_id
    assert repo.blob_id_if_stored('b.txt', b'hi') == ''


def test_commit_snapshot_advances_branch(repo):
    blob_id = repo.stage_file('a.txt', b'hi')
    commit_id = repo.commit_snapshot('first', '', {'a.txt': blob_id}, 'master')

    assert repo.head_commit_id('master') == commit_id
    assert (repo.heads_dir / 'master').read_text() == commit_id

    commit = repo.resolve_commit(commit_id)
    assert commit.message == 'first'
    assert commit.parent_id == ''
    assert commit.tree == {'a.txt': blob_id}


def test_commit_snapshot_leaves_other_branches(repo):
    first = repo.commit_snapshot('first', '', {}, 'master')
    repo.refs.create_branch('feature', first)

    second = repo.commit_snapshot('second', first, {}, 'master')

    assert repo.head_commit_id('master') == second
    assert repo.head_commit_id('feature') == first


def test_committed_snapshot_is_immutable(repo):
    first = repo.commit_snapshot('first', '', {'a.txt': 'a' * 40}, 'master')
    before = (repo.objects_dir / first).read_bytes()

    repo.commit_snapshot('second', first, {'b.txt': 'b' * 40}, 'master')

    assert (repo.objects_dir / first).read_bytes() == before
    assert repo.resolve_commit(first).tree == {'a.txt': 'a' * 40}


def test_resolve_commit_missing(repo):
    with pytest.raises(ObjectNotFoundError):
        repo.resolve_commit('f' * 40)


def test_head_commit_with_dangling_ref(repo):
    """A branch naming a missing commit is corruption, not absence."""
    repo.refs.set_branch_head('master', 'f' * 40)
    with pytest.raises(ObjectNotFoundError):
        repo.head_commit('master')


def test_history_newest_first(repo):
    first = repo.commit_snapshot('first', '', {}, 'master')
    second = repo.commit_snapshot('second', first, {}, 'master')

    history = repo.history('master')
    assert [c.id for c in history] == [second, first]


def test_history_empty_without_commits(repo):
    assert repo.history('master') == []


def test_relative_name(repo):
    assert repo.relative_name('a.txt') == 'a.txt'
    assert repo.relative_name('dir/b.txt') == 'dir/b.txt'
    assert repo.relative_name(str(repo.work_tree / 'c.txt')) == 'c.txt'


def test_relative_name_rejects_outside_and_metadata(repo):
    assert repo.relative_name('../outside.txt') is None
    assert repo.relative_name('.mini-git/HEAD') is None
    assert repo.relative_name('.') is None


def test_relative_name_normalizes_dots(repo):
    assert repo.relative_name('dir/../a.txt') == 'a.txt'
    assert repo.relative_name('./dir/b.txt') == 'dir/b.txt'
    assert repo.relative_name('dir/..') is None


def test_relative_name_keeps_symlink_path(repo, write_file):
    write_file('a.txt', 'hi')
    os.symlink('a.txt', repo.work_tree / 'alias.txt')

    assert repo.relative_name('alias.txt') == 'alias.txt'


def test_load_stage_empty_after_init(repo):
    stage = repo.load_stage()
    assert stage.is_empty()
