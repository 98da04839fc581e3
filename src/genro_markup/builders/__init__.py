# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders producing ready-made Components."""

from .html import HtmlBuilder, HtmlPage, attribute_name, tag_wrapper

__all__ = [
    'HtmlBuilder',
    'HtmlPage',
    'attribute_name',
    'tag_wrapper',
]
