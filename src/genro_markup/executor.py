# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""RenderExecutor - one render pass over one Component.

The executor writes the wrapper opener, walks the children dispatching each
entry by kind, then writes the wrapper closer:

    IDLE -> OPENING -> WALKING_CHILDREN -> CLOSING -> DONE

Everything a pass needs travels in a RenderContext: the sink receiving the
output, the mode, and the correlation path of the component being rendered.
Child components get a context with their own path and the same sink and
mode, so one mode applies to a whole subtree for one call.

Buffered mode writes to a BufferSink that render() returns the content of;
streaming mode writes straight to the caller's sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from .node import NodeKind, classify
from .sink import Sink, capture, run_procedure
from .template import (
    children_closer,
    children_opener,
    wrapper_closer,
    wrapper_opener,
)
from .walker import TreeWalker

if TYPE_CHECKING:
    from .component import Component

log = logging.getLogger(__name__)


class RenderState(Enum):
    IDLE = 'idle'
    OPENING = 'opening'
    WALKING_CHILDREN = 'walking_children'
    CLOSING = 'closing'
    DONE = 'done'


@dataclass(frozen=True)
class RenderContext:
    """Per-call render state.

    Attributes:
        sink: Where output is written.
        streaming: True for print(), False for render().
        path: Correlation path of the element being rendered.
    """

    sink: Sink
    streaming: bool = False
    path: str = ''

    def at(self, path: str) -> RenderContext:
        """Return a copy of this context positioned at path."""
        return replace(self, path=path)


class RenderExecutor:
    """Render a Component into the sink of a RenderContext."""

    __slots__ = ('component', 'ctx', 'state')

    def __init__(self, component: Component, ctx: RenderContext) -> None:
        self.component = component
        self.ctx = ctx
        self.state = RenderState.IDLE

    def __repr__(self) -> str:
        return f"RenderExecutor({self.component!r}, state={self.state.name})"

    def execute(self) -> None:
        """Run the pass. Exceptions from procedures propagate unchanged."""
        component = self.component
        sink = self.ctx.sink
        log.debug(
            "render %r streaming=%s path=%r",
            component, self.ctx.streaming, self.ctx.path,
        )

        self.state = RenderState.OPENING
        sink.write(wrapper_opener(
            component.wrapper, component.classes, component.attributes
        ))

        self.state = RenderState.WALKING_CHILDREN
        TreeWalker(self._dispatch).walk(component.children, self.ctx.path)

        self.state = RenderState.CLOSING
        sink.write(wrapper_closer(component.wrapper))

        self.state = RenderState.DONE

    def _dispatch(self, value: Any, path: str) -> None:
        """Handle one visited child entry."""
        kind = classify(value)
        ctx = self.ctx.at(path)

        if kind is NodeKind.SLOT:
            # the slot owns its wrapper, children markers don't apply
            self.component.slot_registry.resolve(value, ctx, self.emit)
            return

        template = self.component.children_wrapper
        ctx.sink.write(children_opener(template))
        self.emit(value, ctx, kind)
        ctx.sink.write(children_closer(template))

    def emit(
        self, value: Any, ctx: RenderContext, kind: NodeKind | None = None
    ) -> None:
        """Write the output of a single non-slot value."""
        if kind is None:
            kind = classify(value)

        if kind is NodeKind.COMPONENT:
            RenderExecutor(value, ctx).execute()
        elif kind is NodeKind.PROCEDURE:
            if ctx.streaming:
                run_procedure(value, ctx.sink)
            else:
                ctx.sink.write(capture(value))
        elif kind is NodeKind.LITERAL:
            ctx.sink.write(value)
        elif kind is NodeKind.UNSUPPORTED:
            log.debug("ignoring %s child at %s", type(value).__name__, ctx.path)
