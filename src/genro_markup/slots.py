# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SlotRegistry - per-component slot declarations and content.

Declarations and content are independent:

- declare() stores the Slot by name, the last declaration wins and
  replaces only the metadata (wrapper, preserve, description);
- fill() appends content items to a name, declared or not;
- resolve() renders the content of a slot at its position in the tree.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable

from .exceptions import UnknownSlotError
from .node import NodeKind, Slot, classify
from .template import slot_closer, slot_opener
from .walker import child_path

if TYPE_CHECKING:
    from .executor import RenderContext

log = logging.getLogger(__name__)

ItemRenderer = Callable[[Any, 'RenderContext'], None]


class SlotRegistry:
    """Declared slots and accumulated slot content of one Component.

    Example:
        >>> registry = SlotRegistry()
        >>> registry.fill('footer', ['a', 'b'])
        >>> registry.declare(Slot('footer', '<footer>%slot%</footer>'))
        >>> registry.content('footer')
        ['a', 'b']
    """

    __slots__ = ('_declared', '_content')

    def __init__(self) -> None:
        self._declared: dict[str, Slot] = {}
        self._content: dict[str, list[Any]] = {}

    def __repr__(self) -> str:
        return f"SlotRegistry({list(self._declared.keys())})"

    def __contains__(self, name: str) -> bool:
        return name in self._declared

    def declare(self, slot: Slot) -> None:
        """Register slot under its name, replacing a previous declaration."""
        if slot.name in self._declared and self._declared[slot.name] is not slot:
            log.debug("slot '%s' redeclared, last declaration wins", slot.name)
        self._declared[slot.name] = slot

    def fill(self, name: str, items: Iterable[Any]) -> None:
        """Append items, in order, to the content of slot name."""
        self._content.setdefault(name, []).extend(items)

    def get(self, name: str) -> Slot:
        """Return the declared Slot called name.

        Raises:
            UnknownSlotError: If no slot with that name was declared.
        """
        try:
            return self._declared[name]
        except KeyError:
            raise UnknownSlotError(name) from None

    def content(self, name: str) -> list[Any]:
        """Return a copy of the content accumulated for name."""
        return list(self._content.get(name, ()))

    def declared(self) -> list[Slot]:
        """Return the declared slots in declaration order."""
        return list(self._declared.values())

    def describe(self) -> list[dict[str, Any]]:
        return [slot.to_dict() for slot in self._declared.values()]

    def resolve(
        self,
        slot_ref: Slot,
        ctx: RenderContext,
        render_item: ItemRenderer,
    ) -> None:
        """Write the content of slot_ref, inside its wrapper, to ctx.sink.

        The declared slot of the same name provides the wrapper and the
        preserve flag; an undeclared reference uses its own. Empty content
        writes nothing unless the slot is preserved. Content items are
        written back to back with no separator: nested slot references are
        resolved here, every other item goes to render_item.
        """
        self._resolve(slot_ref, ctx, render_item, ())

    def _resolve(
        self,
        slot_ref: Slot,
        ctx: RenderContext,
        render_item: ItemRenderer,
        active: tuple[str, ...],
    ) -> None:
        name = slot_ref.name
        if name in active:
            # a slot whose content reaches itself renders once
            log.debug("slot '%s' skipped, already resolving at %s", name, ctx.path)
            return

        slot = self._declared.get(name, slot_ref)
        items = tuple(self._content.get(name, ()))
        if not items and not slot.preserved:
            log.debug("slot '%s' empty, wrapper omitted", name)
            return

        ctx.sink.write(slot_opener(slot.wrapper))
        for index, item in enumerate(items):
            item_ctx = ctx.at(child_path(ctx.path, index))
            if classify(item) is NodeKind.SLOT:
                self._resolve(item, item_ctx, render_item, active + (name,))
            else:
                render_item(item, item_ctx)
        ctx.sink.write(slot_closer(slot.wrapper))
