# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Card - Example component with slots.

A didactic example showing a reusable component whose header and footer
are slots filled by the caller, rendered both to a string and streamed.
"""

from __future__ import annotations

import sys
from datetime import date

from genro_markup import Component, Slot, echo
from genro_markup.builders import HtmlBuilder

html = HtmlBuilder()


class Card(Component):
    """A card with a title, a body and optional header/footer slots.

    Example:
        >>> card = Card('News', classes='wide')
        >>> card = card.fill('footer', 'Read more').add('<p>Body text</p>')
        >>> print(card.render())
    """

    __slots__ = ()

    def __init__(self, title: str, **kwargs):
        super().__init__(
            '<article class="%classes%"%attributes%>%children%</article>',
            children=[
                Slot('header', '<header>%slot%</header>', 'Above the title'),
                html.h2(title),
                Slot('footer', '<footer>%slot%</footer>', 'Below the body'),
            ],
            **kwargs,
        )
        self.set_classes('card', *self.classes)

    def add(self, *children):
        """Insert body children before the footer slot."""
        footer = None
        if self._ends_with_footer():
            footer = self._children.pop()
        super().add(*children)
        if footer is not None:
            self._children.append(footer)
        return self

    def _ends_with_footer(self) -> bool:
        children = self._children
        return (
            isinstance(children, list)
            and bool(children)
            and isinstance(children[-1], Slot)
            and children[-1].name == 'footer'
        )


def today():
    echo('<time>', date.today().isoformat(), '</time>')


if __name__ == '__main__':
    card = Card('Release notes', attributes={'id': 'notes'})
    card.add(html.list_of('ul', ['Slots', 'Streaming output']))
    card.fill('header', today)
    card.fill('footer', html.a('Changelog', href='/changelog'))

    print(card.render())
    card.print(sys.stdout)
    print()
