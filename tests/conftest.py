"""Shared pytest fixtures for mini-git tests."""

import shutil
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from minigit.core.repository import Repository
from minigit.engine import Engine


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def engine(temp_dir):
    """Engine whose working tree has already been initialized."""
    engine = Engine(str(temp_dir))
    engine.respond('git init')
    return engine


@pytest.fixture
def write_file(temp_dir):
    """Write a file below the working tree, creating directories as needed."""
    def _write(name, content):
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path
    return _write


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def object_files():
    """Function listing the names of all files in an object store."""
    def _list(repo):
        return sorted(p.name for p in repo.objects_dir.iterdir())
    return _list
