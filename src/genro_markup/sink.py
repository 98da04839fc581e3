# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Output sinks, ambient write and output capture.

A sink is any object with a write(str) method. Each render call owns one
sink; while a deferred procedure runs, that sink is the "ambient" sink,
reachable with current_sink() and written to with echo().

The ambient sink lives in a ContextVar, set before and reset after every
procedure call, so nested or concurrent renders never see each other's
output.

Example:
    >>> def greet():
    ...     echo('Hello, ')
    ...     return 'World'
    >>> capture(greet)
    'Hello, World'
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, Protocol, TextIO


class Sink(Protocol):
    """Anything rendered text can be written to."""

    def write(self, text: str) -> Any: ...


class BufferSink:
    """In-memory sink accumulating everything written to it."""

    __slots__ = ('_parts',)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def __repr__(self) -> str:
        return f"BufferSink({len(self._parts)} parts)"

    def write(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def getvalue(self) -> str:
        """Return the concatenation of everything written."""
        return ''.join(self._parts)


class StreamSink:
    """Sink forwarding to a text stream (sys.stdout when omitted)."""

    __slots__ = ('stream',)

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def __repr__(self) -> str:
        return f"StreamSink({self.stream!r})"

    def write(self, text: str) -> None:
        if text:
            self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()


_ambient_sink: ContextVar[Sink | None] = ContextVar(
    'genro_markup_ambient_sink', default=None
)


def current_sink() -> Sink | None:
    """Return the ambient sink of the running render call, if any."""
    return _ambient_sink.get()


@contextmanager
def use_sink(sink: Sink) -> Iterator[Sink]:
    """Make sink the ambient sink for the duration of the block."""
    token = _ambient_sink.set(sink)
    try:
        yield sink
    finally:
        _ambient_sink.reset(token)


def default_sink() -> Sink:
    """The ambient sink, or a StreamSink on sys.stdout outside any render."""
    sink = _ambient_sink.get()
    if sink is None:
        return StreamSink(sys.stdout)
    return sink


def echo(*parts: str) -> None:
    """Append text to the current output stream."""
    default_sink().write(''.join(parts))


def run_procedure(procedure: Callable[[], Any], sink: Sink) -> None:
    """Invoke procedure with sink as the ambient sink.

    Text the procedure writes through echo() lands in sink; a string it
    returns is written after that. Exceptions propagate unchanged.
    """
    with use_sink(sink):
        result = procedure()
    if isinstance(result, str):
        sink.write(result)


def capture(procedure: Callable[[], Any]) -> str:
    """Run a zero-argument procedure and return everything it wrote."""
    buffer = BufferSink()
    run_procedure(procedure, buffer)
    return buffer.getvalue()
