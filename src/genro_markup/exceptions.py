# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup exceptions.

The render engine itself is permissive and raises nothing of its own:
these exceptions belong to the builder surface.
"""

from __future__ import annotations


class MarkupError(Exception):
    """Base exception for genro-markup errors."""

    pass


class UnknownSlotError(MarkupError, KeyError):
    """Raised when a slot is looked up by a name that was never declared."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Slot '{self.name}' is not declared"
