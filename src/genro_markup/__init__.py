# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - Markup trees from wrappers, children and slots.

A lightweight, zero-dependency library that renders tree-structured markup
either to a string (render) or incrementally to a sink (print).
"""

import logging

__version__ = "0.1.0"

from .component import Component
from .exceptions import MarkupError, UnknownSlotError
from .executor import RenderContext, RenderExecutor, RenderState
from .node import NodeKind, Slot, classify
from .sink import BufferSink, StreamSink, capture, current_sink, echo
from .slots import SlotRegistry
from .walker import TreeWalker, walk_children

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "Component",
    "Slot",
    # Engine
    "NodeKind",
    "classify",
    "TreeWalker",
    "walk_children",
    "SlotRegistry",
    "RenderContext",
    "RenderExecutor",
    "RenderState",
    # Output
    "BufferSink",
    "StreamSink",
    "capture",
    "current_sink",
    "echo",
    # Exceptions
    "MarkupError",
    "UnknownSlotError",
]
