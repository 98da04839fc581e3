# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the example components under examples/."""

import importlib.util
from pathlib import Path

import pytest

from genro_markup import Slot

CARD_FILE = Path(__file__).parent.parent / 'examples' / 'card_component' / 'card.py'


@pytest.fixture
def card_module():
    spec = importlib.util.spec_from_file_location('card_example', CARD_FILE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCard:
    """Tests for the Card example."""

    def test_body_goes_before_footer(self, card_module):
        """Test added children land before the footer slot."""
        card = card_module.Card('News')
        card.add('<p>Body</p>').fill('footer', 'More')
        assert card.render() == (
            '<article class="card"><h2>News</h2><p>Body</p>'
            '<footer>More</footer></article>'
        )

    def test_add_without_footer_appends(self, card_module):
        """Test add appends when the last child is not the footer slot."""
        card = card_module.Card('News')
        card.set_children(['a', 'b'])
        card.add('c')
        assert card.children == ['a', 'b', 'c']

    def test_add_keeps_other_slots_in_place(self, card_module):
        """Test a trailing slot with another name is not moved."""
        card = card_module.Card('News')
        side = Slot('side')
        card.set_children(['a', side])
        card.add('b')
        assert card.children == ['a', side, 'b']
