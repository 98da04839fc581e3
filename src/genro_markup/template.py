# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TemplateEngine - marker based wrapper templates.

A template is split on the FIRST occurrence of its marker: the text before
it is the opener, the text after it the closer. Further occurrences of the
same marker stay in the closer as literal text. A template without the
marker has an empty closer.

Markers:
    %children%    wrapper template split point
    %child%       children-wrapper split point, applied to every child
    %slot%        slot wrapper split point
    %classes%     space-joined class list (wrapper opener only)
    %attributes%  ' name="value"' fragments (wrapper opener only)

Example:
    >>> wrapper_opener('<a class="%classes%"%attributes%>%children%</a>',
    ...                [], {'href': '/x'})
    '<a href="/x">'
    >>> wrapper_closer('<a>%children%</a>')
    '</a>'

No substitution escapes anything: values are inserted as given.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

CHILDREN_MARKER = '%children%'
CHILD_MARKER = '%child%'
SLOT_MARKER = '%slot%'
CLASSES_MARKER = '%classes%'
ATTRIBUTES_MARKER = '%attributes%'

_EMPTY_ATTRIBUTE = re.compile(r'(?<![\w-])(?:class|id)=""')
_WHITESPACE_RUN = re.compile(r'\s{2,}')
_SPACE_BEFORE_CLOSE = re.compile(r'\s+>')


def split_template(template: str, marker: str) -> tuple[str, str]:
    """Split template on the first occurrence of marker.

    Returns:
        Tuple of (opener, closer); closer is '' if the marker is absent.
    """
    opener, _, closer = (template or '').partition(marker)
    return opener, closer


def format_classes(classes: Iterable[str]) -> str:
    """Join class names with single spaces."""
    return ' '.join(classes)


def attribute_value(value: Any) -> str:
    """Convert an attribute value to text.

    None and False give '', True gives '1', anything else str(value).
    """
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    return str(value)


def format_attributes(attributes: Mapping[str, Any]) -> str:
    """Render attributes as ' name="value" ...' or '' when empty."""
    fragments = [
        f'{name}="{attribute_value(value)}"' for name, value in attributes.items()
    ]
    if not fragments:
        return ''
    return ' ' + ' '.join(fragments)


def _cleanup(opener: str) -> str:
    """Drop empty class/id attributes and tidy whitespace."""
    opener = _EMPTY_ATTRIBUTE.sub('', opener)
    opener = _WHITESPACE_RUN.sub(' ', opener)
    return _SPACE_BEFORE_CLOSE.sub('>', opener)


def wrapper_opener(
    template: str,
    classes: Iterable[str] = (),
    attributes: Mapping[str, Any] | None = None,
) -> str:
    """Opening segment of a wrapper with classes and attributes substituted."""
    opener, _ = split_template(template, CHILDREN_MARKER)
    opener = opener.replace(CLASSES_MARKER, format_classes(classes))
    opener = opener.replace(ATTRIBUTES_MARKER, format_attributes(attributes or {}))
    return _cleanup(opener)


def wrapper_closer(template: str) -> str:
    return split_template(template, CHILDREN_MARKER)[1]


def children_opener(template: str) -> str:
    return split_template(template, CHILD_MARKER)[0]


def children_closer(template: str) -> str:
    return split_template(template, CHILD_MARKER)[1]


def slot_opener(template: str) -> str:
    return split_template(template, SLOT_MARKER)[0]


def slot_closer(template: str) -> str:
    return split_template(template, SLOT_MARKER)[1]
