"""
Font selection parsing.

The operator answers with space-separated 1-based numbers, e.g. ``1 3 4``,
or ``q`` to quit.  Anything that is not a number in range is ignored.
"""

from __future__ import annotations

QUIT = "q"


def is_quit(answer: str) -> bool:
    return answer.strip().lower() == QUIT


def parse_selection(answer: str, count: int) -> list[int]:
    """Zero-based indices selected by ``answer`` out of ``count`` entries.

    Order of first appearance is kept; repeats are dropped.

    >>> parse_selection("1 3", 5)
    [0, 2]
    >>> parse_selection("9 x 2 2", 5)
    [1]
    """
    indices: list[int] = []
    for token in answer.split():
        if not (token.isascii() and token.isdigit()):
            continue
        number = int(token)
        if 1 <= number <= count and number - 1 not in indices:
            indices.append(number - 1)
    return indices
