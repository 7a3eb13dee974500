"""Dispatcher tests."""

import pytest

from minigit.core.errors import MalformedHeadError
from minigit.engine import Engine, ResponseKind


@pytest.fixture
def fresh_engine(temp_dir):
    """Engine over a directory with no repository."""
    return Engine(str(temp_dir))


@pytest.mark.parametrize('line', ['', '   '])
def test_empty_input(fresh_engine, line):
    assert fresh_engine.respond(line).kind == ResponseKind.NONE_MESSAGE


@pytest.mark.parametrize('line', ['git', 'hg init', 'status', 'git frobnicate'])
def test_unknown_command(fresh_engine, line):
    response = fresh_engine.respond(line)
    assert response.kind == ResponseKind.UNKNOWN_COMMAND
    assert not response.ok


@pytest.mark.parametrize('line', [
    'git add a.txt', 'git commit msg', 'git status', 'git rm a.txt',
    'git log', 'git branch dev', 'git checkout dev',
])
def test_commands_require_repository(fresh_engine, temp_dir, line):
    response = fresh_engine.respond(line)
    assert response.kind == ResponseKind.NOT_INIT
    assert not (temp_dir / '.mini-git').exists()


def test_init(fresh_engine, temp_dir):
    assert fresh_engine.branch == ''

    response = fresh_engine.respond('git init')

    assert response.kind == ResponseKind.INIT_SUCCESS
    assert response['branch'] == 'master'
    assert fresh_engine.branch == 'master'
    assert (temp_dir / '.mini-git' / 'HEAD').read_text() == 'ref: refs/heads/master'


def test_init_twice(engine, temp_dir):
    head = temp_dir / '.mini-git' / 'HEAD'
    before = head.stat().st_mtime_ns

    response = engine.respond('git init')

    assert response.kind == ResponseKind.ALREADY_INIT
    assert head.stat().st_mtime_ns == before
    assert list((temp_dir / '.mini-git' / 'objects').iterdir()) == []


def test_checkout_not_supported(engine, temp_dir):
    response = engine.respond('git checkout dev')

    assert response.kind == ResponseKind.NOT_SUPPORTED
    assert response['command'] == 'checkout'
    assert engine.branch == 'master'
    assert (temp_dir / '.mini-git' / 'HEAD').read_text() == 'ref: refs/heads/master'


def test_execute_pretokenized(engine):
    assert engine.execute('status', []).kind == ResponseKind.STATUS
    assert engine.execute('push', []).kind == ResponseKind.UNKNOWN_COMMAND


def test_branch_derived_from_head(engine, temp_dir):
    (temp_dir / '.mini-git' / 'HEAD').write_text('ref: refs/heads/dev')
    assert Engine(str(temp_dir)).branch == 'dev'


def test_malformed_head_is_fatal(engine, temp_dir):
    (temp_dir / '.mini-git' / 'HEAD').write_text('garbage')
    with pytest.raises(MalformedHeadError):
        Engine(str(temp_dir))


def test_prompt(fresh_engine, temp_dir):
    assert fresh_engine.prompt() == str(temp_dir)
    fresh_engine.respond('git init')
    assert fresh_engine.prompt() == f"{temp_dir}(master)"
