# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeWalker - depth-first traversal of a children list.

Every entry is visited with a correlation path built from the keys along
the way, joined by '_'. Nested lists are visited themselves and then
descended into, so the walk of::

    {0: 'x', 1: ['y']}

visits ('0', 'x'), ('1', ['y']) and ('1_0', 'y'), in that order.

Paths are passed explicitly through every call; the walker keeps no
traversal state between entries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator

from .node import is_nested

VisitCallback = Callable[[Any, str], Any]


def _entries(children: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (key, value) pairs of a children list in insertion order."""
    if isinstance(children, Mapping):
        return iter(children.items())
    return enumerate(children)


def child_path(base_path: str, key: Any) -> str:
    """Join a key onto a base path ('' base means the key alone)."""
    return f"{base_path}_{key}" if base_path else str(key)


def walk_children(
    children: Any, base_path: str = ''
) -> Iterator[tuple[str, Any]]:
    """Iterate (path, value) over a children tree, depth-first.

    Example:
        >>> list(walk_children(['a', ['b']]))
        [('0', 'a'), ('1', ['b']), ('1_0', 'b')]
    """
    for key, value in _entries(children):
        path = child_path(base_path, key)
        yield path, value
        if is_nested(value):
            yield from walk_children(value, path)


class TreeWalker:
    """Invoke a callback for each entry of a children tree.

    Args:
        callback: Called as callback(value, path) for every entry,
            nested lists included.

    Example:
        >>> seen = []
        >>> TreeWalker(lambda v, p: seen.append(p)).walk({0: 'x', 1: ['y']})
        >>> seen
        ['0', '1', '1_0']
    """

    __slots__ = ('callback',)

    def __init__(self, callback: VisitCallback) -> None:
        self.callback = callback

    def walk(self, children: Any, base_path: str = '') -> None:
        """Walk children, calling the callback before descending."""
        for key, value in _entries(children):
            path = child_path(base_path, key)
            self.callback(value, path)
            if is_nested(value):
                self.walk(value, path)

    def iter(self, children: Any, base_path: str = '') -> Iterator[tuple[str, Any]]:
        """Iterate (path, value) without invoking the callback."""
        return walk_children(children, base_path)
