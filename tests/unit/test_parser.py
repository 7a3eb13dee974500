"""Command line tokenizer tests."""

from minigit.engine.parser import tokenize


def test_plain_words():
    assert tokenize('git add a.txt') == ['git', 'add', 'a.txt']


def test_quoted_run_is_one_token():
    assert tokenize('git commit "first commit"') == ['git', 'commit', 'first commit']


def test_quotes_inside_word():
    assert tokenize('git add my" "file.txt') == ['git', 'add', 'my file.txt']


def test_unterminated_quote_closes_at_end():
    assert tokenize('git commit "open message') == ['git', 'commit', 'open message']


def test_repeated_spaces_produce_no_empty_tokens():
    assert tokenize('git   status ') == ['git', 'status']


def test_empty_quotes_produce_empty_token():
    assert tokenize('git commit ""') == ['git', 'commit', '']


def test_empty_line():
    assert tokenize('') == []
