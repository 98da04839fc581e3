# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - Components for HTML5 elements.

Every HTML5 tag is available as a method returning a Component whose
wrapper is the tag itself, with '%classes%' and '%attributes%' in the
opener. Void elements (br, img, meta, ...) have no closing tag.

Example:
    Creating a small document::

        from genro_markup.builders import HtmlBuilder, HtmlPage

        html = HtmlBuilder()
        page = HtmlPage(lang='en')
        page.fill('head', html.title('Welcome'), html.meta(charset='utf-8'))
        page.fill('body', html.div(
            html.h1('Welcome'),
            html.list_of('ul', ['Item 1', 'Item 2']),
            classes='container',
        ))
        page.render()

References:
    - WHATWG HTML Standard: https://html.spec.whatwg.org/
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable

from ..component import Component
from ..node import Slot

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'source', 'track', 'wbr',
})

ALL_TAGS = VOID_ELEMENTS | frozenset({
    'a', 'abbr', 'address', 'article', 'aside', 'audio', 'b', 'bdi', 'bdo',
    'blockquote', 'body', 'button', 'canvas', 'caption', 'cite', 'code',
    'colgroup', 'data', 'datalist', 'dd', 'del', 'details', 'dfn', 'dialog',
    'div', 'dl', 'dt', 'em', 'fieldset', 'figcaption', 'figure', 'footer',
    'form', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'hgroup',
    'html', 'i', 'iframe', 'ins', 'kbd', 'label', 'legend', 'li', 'main',
    'map', 'mark', 'menu', 'meter', 'nav', 'noscript', 'object', 'ol',
    'optgroup', 'option', 'output', 'p', 'picture', 'pre', 'progress', 'q',
    'rp', 'rt', 'ruby', 's', 'samp', 'script', 'search', 'section', 'select',
    'slot', 'small', 'span', 'strong', 'style', 'sub', 'summary', 'sup',
    'table', 'tbody', 'td', 'template', 'textarea', 'tfoot', 'th', 'thead',
    'time', 'title', 'tr', 'u', 'ul', 'var', 'video',
})


def attribute_name(name: str) -> str:
    """Map a Python keyword name to an HTML attribute name.

    One trailing underscore is dropped, remaining underscores become dashes.

    Example:
        >>> attribute_name('for_')
        'for'
        >>> attribute_name('data_user_id')
        'data-user-id'
    """
    if name.endswith('_'):
        name = name[:-1]
    return name.replace('_', '-')


def tag_wrapper(tag: str) -> str:
    """Wrapper template for tag, without closer for void elements."""
    opener = f'<{tag} class="%classes%"%attributes%>'
    if tag in VOID_ELEMENTS:
        return opener
    return f'{opener}%children%</{tag}>'


class HtmlBuilder:
    """Factory of Components for HTML5 tags.

    Usage:
        >>> html = HtmlBuilder()
        >>> html.a('Home', href='/').render()
        '<a href="/">Home</a>'
        >>> html.input(type='text', data_role='search').render()
        '<input type="text" data-role="search">'

    Attributes:
        VOID_ELEMENTS: Set of void (self-closing) element names.
        ALL_TAGS: Set of all valid HTML5 element names.
    """

    VOID_ELEMENTS = VOID_ELEMENTS
    ALL_TAGS = ALL_TAGS

    def __getattr__(self, name: str) -> Callable[..., Component]:
        """Dynamic method for any HTML tag.

        Raises:
            AttributeError: If name is not a valid HTML tag.
        """
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        if name in ALL_TAGS:
            return self._make_tag_method(name)

        raise AttributeError(f"'{name}' is not a valid HTML tag")

    def _make_tag_method(self, name: str) -> Callable[..., Component]:
        """Create a method for a specific tag."""

        def tag_method(
            *children: Any,
            classes: Iterable[str] | str | None = None,
            children_wrapper: str = '',
            **attr: Any,
        ) -> Component:
            return self.element(
                name, *children,
                classes=classes, children_wrapper=children_wrapper, **attr
            )

        tag_method.__name__ = name
        return tag_method

    def element(
        self,
        tag: str,
        *children: Any,
        classes: Iterable[str] | str | None = None,
        children_wrapper: str = '',
        **attr: Any,
    ) -> Component:
        """Create a Component for tag, known to HTML5 or not (custom elements).

        Args:
            tag: Element name.
            *children: Initial children.
            classes: CSS classes.
            children_wrapper: Template applied to each child.
            **attr: Attributes, names mapped with attribute_name().
        """
        attributes = {attribute_name(key): value for key, value in attr.items()}
        return Component(
            tag_wrapper(tag),
            classes=classes,
            attributes=attributes,
            children_wrapper=children_wrapper,
            children=children,
        )

    def list_of(
        self,
        tag: str,
        items: Iterable[Any],
        item_tag: str = 'li',
        **attr: Any,
    ) -> Component:
        """Create a list element whose children are each wrapped in item_tag.

        Example:
            >>> HtmlBuilder().list_of('ol', ['a', 'b']).render()
            '<ol><li>a</li><li>b</li></ol>'
        """
        return self.element(
            tag, *items,
            children_wrapper=f'<{item_tag}>%child%</{item_tag}>', **attr
        )


class HtmlPage(Component):
    """HTML document with 'head' and 'body' slots.

    Usage:
        >>> page = HtmlPage(lang='en')
        >>> page = page.fill('head', '<title>My Page</title>').fill(
        ...     'body', '<p>Hello World</p>')
        >>> html = page.to_html()
    """

    __slots__ = ()

    def __init__(self, **attr: Any) -> None:
        """Initialize the page; attr go on the <html> element."""
        super().__init__(
            '<!DOCTYPE html>\n<html%attributes%>%children%\n</html>\n',
            attributes={attribute_name(key): value for key, value in attr.items()},
            children=[
                Slot('head', '\n<head>%slot%</head>', 'Metadata content').set_preserve(),
                Slot('body', '\n<body>%slot%</body>', 'Flow content').set_preserve(),
            ],
        )

    def to_html(self, filename: str | None = None, output_dir: str | None = None) -> str:
        """Generate the complete document.

        Args:
            filename: If provided, save to output_dir/filename
            output_dir: Directory to save to (default: current directory)

        Returns:
            HTML string, or path if filename was provided
        """
        html_content = self.render()

        if filename:
            if output_dir is None:
                directory = Path.cwd()
            else:
                directory = Path(output_dir)
            directory.mkdir(exist_ok=True)
            output_path = directory / filename
            output_path.write_text(html_content)
            return str(output_path)

        return html_content
