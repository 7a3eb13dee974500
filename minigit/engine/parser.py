"""Command line tokenizer."""

from typing import List


def tokenize(line: str) -> List[str]:
    """
    Split a command line into tokens.

    Tokens are separated by spaces. A double-quoted run is a single token
    with the quotes removed, so "first commit" keeps its space. An empty
    pair of quotes gives an empty token, and a quote left open at the end
    of the line is closed there.

    Args:
        line: Raw command line

    Returns:
        List of tokens
    """
    tokens = []
    current = []
    in_quotes = False
    quoted = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
            quoted = True
        elif char == ' ' and not in_quotes:
            if current or quoted:
                tokens.append(''.join(current))
            current = []
            quoted = False
        else:
            current.append(char)

    if current or quoted:
        tokens.append(''.join(current))

    return tokens
