# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Component - the renderable unit of markup.

A Component combines:

- wrapper: template around the children, split on '%children%'; its
  opener may use '%classes%' and '%attributes%'
- classes: ordered list of unique CSS class names
- attributes: insertion-ordered name -> value map
- children_wrapper: template applied to every non-slot child, split on
  '%child%'
- children: literal strings, Components, zero-argument callables, Slots and
  nested lists of those
- slots: declared Slots and the content filled into them

Every mutator returns the component itself for chaining. Bulk setters
(set_classes, set_attributes, set_children) replace; add_class, add, fill
accumulate.

Example:
    >>> card = Component('<div class="%classes%">%children%</div>',
    ...                  classes=['card'])
    >>> card.add('<h2>Title</h2>', Slot('body', '<p>%slot%</p>'))
    Component('<div class="%classes%">%children%</div>', children=2)
    >>> card.fill('body', 'Hello')
    Component('<div class="%classes%">%children%</div>', children=2)
    >>> card.render()
    '<div class="card"><h2>Title</h2><p>Hello</p></div>'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator

from .executor import RenderContext, RenderExecutor
from .node import Slot
from .sink import BufferSink, Sink, default_sink
from .slots import SlotRegistry
from .walker import walk_children


def _split_classes(values: Iterable[str]) -> list[str]:
    """Split space separated class strings, keeping first occurrences."""
    result: list[str] = []
    for value in values:
        for name in value.split():
            if name not in result:
                result.append(name)
    return result


class Component:
    """A tree node with a wrapper template and ordered children."""

    __slots__ = (
        '_wrapper', '_classes', '_attributes', '_children_wrapper',
        '_children', '_slots',
    )

    def __init__(
        self,
        wrapper: str = '',
        classes: Iterable[str] | str | None = None,
        attributes: Mapping[str, Any] | None = None,
        children_wrapper: str = '',
        children: Iterable[Any] | Mapping[Any, Any] | None = None,
    ) -> None:
        """Initialize a Component.

        Args:
            wrapper: Template with a '%children%' marker.
            classes: Class names, as an iterable or a space separated string.
            attributes: Attribute map rendered in place of '%attributes%'.
            children_wrapper: Template with a '%child%' marker.
            children: Initial children, a sequence or a mapping; Slots
                among them are declared.
        """
        self._wrapper = wrapper
        self._classes: list[str] = []
        self._attributes: dict[str, Any] = {}
        self._children_wrapper = children_wrapper
        self._children: list[Any] | dict[Any, Any] = []
        self._slots = SlotRegistry()

        if classes:
            self.set_classes(*([classes] if isinstance(classes, str) else classes))
        if attributes:
            self.set_attributes(attributes)
        if children is not None:
            self.set_children(children)

    def __repr__(self) -> str:
        return f"Component({self._wrapper!r}, children={len(self._children)})"

    def __str__(self) -> str:
        return self.render()

    # ==================== Rendering ====================

    def render(self) -> str:
        """Render in buffered mode and return the markup."""
        buffer = BufferSink()
        RenderExecutor(self, RenderContext(buffer, streaming=False)).execute()
        return buffer.getvalue()

    def print(self, sink: Sink | None = None) -> None:
        """Render in streaming mode, writing to sink as output is produced.

        Args:
            sink: Object with a write(str) method. Defaults to the ambient
                sink when called from inside a render, else sys.stdout.
        """
        if sink is None:
            sink = default_sink()
        RenderExecutor(self, RenderContext(sink, streaming=True)).execute()

    def walk(self) -> Iterator[tuple[str, Any]]:
        """Iterate (path, value) over the children tree.

        Example:
            >>> list(Component(children=['a', ['b']]).walk())
            [('0', 'a'), ('1', ['b']), ('1_0', 'b')]
        """
        return walk_children(self._children)

    # ==================== Templates ====================

    @property
    def wrapper(self) -> str:
        return self._wrapper

    def set_wrapper(self, wrapper: str) -> Component:
        self._wrapper = wrapper
        return self

    @property
    def children_wrapper(self) -> str:
        return self._children_wrapper

    def set_children_wrapper(self, children_wrapper: str) -> Component:
        self._children_wrapper = children_wrapper
        return self

    # ==================== Classes ====================

    @property
    def classes(self) -> list[str]:
        """Copy of the class list."""
        return list(self._classes)

    def set_classes(self, *classes: str) -> Component:
        """Replace the class list."""
        self._classes = _split_classes(classes)
        return self

    def add_class(self, *classes: str) -> Component:
        """Append classes not already present."""
        for name in _split_classes(classes):
            if name not in self._classes:
                self._classes.append(name)
        return self

    def remove_class(self, *classes: str) -> Component:
        removed = set(_split_classes(classes))
        self._classes = [name for name in self._classes if name not in removed]
        return self

    def has_class(self, name: str) -> bool:
        return name in self._classes

    # ==================== Attributes ====================

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the attribute map."""
        return dict(self._attributes)

    def set_attributes(
        self, _attributes: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Component:
        """Replace the attribute map.

        Args:
            _attributes: Mapping of attributes.
            **kwargs: Additional attributes, applied after _attributes.
        """
        attributes: dict[str, Any] = {}
        if _attributes:
            attributes.update(_attributes)
        attributes.update(kwargs)
        self._attributes = attributes
        return self

    def set_attribute(self, name: str, value: Any) -> Component:
        """Add or overwrite one attribute, keeping its original position."""
        self._attributes[name] = value
        return self

    def remove_attribute(self, *names: str) -> Component:
        for name in names:
            self._attributes.pop(name, None)
        return self

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    # ==================== Children ====================

    @property
    def children(self) -> list[Any] | dict[Any, Any]:
        """Copy of the top level children (a dict if set from a mapping)."""
        if isinstance(self._children, dict):
            return dict(self._children)
        return list(self._children)

    def add(self, *children: Any) -> Component:
        """Append children, declaring any Slot found among them.

        When the children were set from a mapping, each new child gets the
        first free integer key.
        """
        self._declare_slots(children)
        if isinstance(self._children, dict):
            for child in children:
                key = 0
                while key in self._children:
                    key += 1
                self._children[key] = child
        else:
            self._children.extend(children)
        return self

    def set_children(self, children: Iterable[Any] | Mapping[Any, Any]) -> Component:
        """Replace the children.

        A mapping is kept as is, its keys becoming the walk path keys.
        Slots declared by the previous children stay declared.
        """
        if isinstance(children, Mapping):
            self._declare_slots(children.values())
            self._children = dict(children)
            return self
        self._children = []
        return self.add(*children)

    def when(self, condition: Any, *children: Any) -> Component:
        """Append children only if condition holds.

        A callable condition is called now, with no arguments.
        """
        if callable(condition):
            condition = condition()
        if condition:
            self.add(*children)
        return self

    def each(
        self,
        items: Iterable[Any] | Mapping[Any, Any],
        factory: Callable[..., Any],
    ) -> Component:
        """Append factory(item) for every item.

        For a mapping, factory is called as factory(key, value).

        Example:
            >>> ul = Component('<ul>%children%</ul>', children_wrapper='<li>%child%</li>')
            >>> ul.each(['a', 'b'], str.upper).render()
            '<ul><li>A</li><li>B</li></ul>'
        """
        if not callable(factory):
            raise TypeError(
                f"factory must be callable, not {type(factory).__name__}"
            )
        if isinstance(items, Mapping):
            produced = [factory(key, value) for key, value in items.items()]
        else:
            produced = [factory(item) for item in items]
        return self.add(*produced)

    def _declare_slots(self, children: Iterable[Any]) -> None:
        for _, value in walk_children(list(children)):
            if isinstance(value, Slot):
                self._slots.declare(value)

    # ==================== Slots ====================

    @property
    def slot_registry(self) -> SlotRegistry:
        return self._slots

    @property
    def slots(self) -> list[Slot]:
        """Declared slots, in declaration order."""
        return self._slots.declared()

    def declare_slot(self, slot: Slot) -> Component:
        """Declare slot without placing it among the children.

        Useful to set the wrapper or preserve flag of a slot placed
        elsewhere under the same name.
        """
        self._slots.declare(slot)
        return self

    def fill(self, name: str, *items: Any) -> Component:
        """Append content items to slot name.

        Example:
            >>> page = Component(children=[Slot('main', '<main>%slot%</main>')])
            >>> page.fill('main', 'a').fill('main', 'b').render()
            '<main>ab</main>'
        """
        self._slots.fill(name, items)
        return self

    def get_slot(self, name: str) -> Slot:
        """Return the declared Slot name; raises UnknownSlotError."""
        return self._slots.get(name)

    def slot_content(self, name: str) -> list[Any]:
        return self._slots.content(name)

    def describe_slots(self) -> list[dict[str, Any]]:
        return self._slots.describe()
