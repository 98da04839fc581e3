# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node model: the kinds of value a children list can hold, and Slot."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class NodeKind(Enum):
    """Closed set of child kinds understood by the render engine.

    Values that are none of the renderable kinds classify as UNSUPPORTED
    and produce no output.
    """

    LITERAL = 'literal'
    COMPONENT = 'component'
    PROCEDURE = 'procedure'
    SLOT = 'slot'
    NESTED = 'nested'
    UNSUPPORTED = 'unsupported'


def is_nested(value: Any) -> bool:
    """True if value is a nested children list (list, tuple or mapping)."""
    return isinstance(value, (list, tuple, Mapping))


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of a child value.

    Example:
        >>> classify('hello')
        <NodeKind.LITERAL: 'literal'>
        >>> classify(Slot('footer'))
        <NodeKind.SLOT: 'slot'>
        >>> classify(42)
        <NodeKind.UNSUPPORTED: 'unsupported'>
    """
    from .component import Component

    if isinstance(value, Slot):
        return NodeKind.SLOT
    if isinstance(value, Component):
        return NodeKind.COMPONENT
    if isinstance(value, str):
        return NodeKind.LITERAL
    if is_nested(value):
        return NodeKind.NESTED
    if callable(value):
        return NodeKind.PROCEDURE
    return NodeKind.UNSUPPORTED


class Slot:
    """A named placeholder whose content is supplied separately.

    Placing a Slot among a Component's children declares it and marks the
    position where its content renders. Content is supplied with
    Component.fill(), before or after the declaration.

    Attributes:
        name: Identifier, unique within the declaring Component.
        wrapper: Optional template with a '%slot%' marker around the content.
        description: Informational text, never rendered.

    Example:
        >>> sidebar = Slot('sidebar', '<aside>%slot%</aside>').set_preserve()
        >>> sidebar.preserved
        True
    """

    __slots__ = ('_name', 'wrapper', 'description', '_preserve')

    def __init__(
        self,
        name: str,
        wrapper: str = '',
        description: str = '',
        preserve: bool = False,
    ) -> None:
        """Initialize a Slot.

        Args:
            name: The slot name.
            wrapper: Template with a '%slot%' marker. Default: no wrapper.
            description: Free text describing the slot's purpose.
            preserve: If True, the wrapper renders even with no content.

        Raises:
            TypeError: If name is not a string.
        """
        self.name = name
        self.wrapper = wrapper
        self.description = description
        self._preserve = bool(preserve)

    def __repr__(self) -> str:
        return f"Slot({self._name!r}, wrapper={self.wrapper!r})"

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(
                f"Slot name must be a string, not {type(name).__name__}"
            )
        self._name = name

    @property
    def preserved(self) -> bool:
        """True if the wrapper renders even when the slot is empty."""
        return self._preserve

    def set_preserve(self, preserve: bool = True) -> Slot:
        """Set the preserve flag and return self for chaining."""
        self._preserve = bool(preserve)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the slot metadata as a plain dict."""
        return {
            'name': self._name,
            'description': self.description,
            'wrapper': self.wrapper,
            'preserve': self._preserve,
        }
