# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for HtmlBuilder and HtmlPage."""

import pytest

from genro_markup import BufferSink, Component, Slot
from genro_markup.builders import HtmlBuilder, HtmlPage, attribute_name, tag_wrapper


@pytest.fixture
def html():
    return HtmlBuilder()


class TestAttributeName:
    """Tests for attribute_name()."""

    def test_trailing_underscore(self):
        """Test keyword-safe names lose their trailing underscore."""
        assert attribute_name('class_') == 'class'
        assert attribute_name('for_') == 'for'

    def test_dashes(self):
        """Test inner underscores become dashes."""
        assert attribute_name('data_user_id') == 'data-user-id'
        assert attribute_name('aria_label') == 'aria-label'
        assert attribute_name('href') == 'href'


class TestHtmlBuilder:
    """Tests for HtmlBuilder tag methods."""

    def test_tag_wrapper(self):
        """Test wrappers of normal and void tags."""
        assert tag_wrapper('div') == '<div class="%classes%"%attributes%>%children%</div>'
        assert tag_wrapper('br') == '<br class="%classes%"%attributes%>'

    def test_simple_tag(self, html):
        """Test a tag with text and attributes."""
        assert html.a('Home', href='/').render() == '<a href="/">Home</a>'

    def test_tag_returns_component(self, html):
        """Test tag methods create Components."""
        div = html.div()
        assert isinstance(div, Component)
        assert div.render() == '<div></div>'

    def test_classes(self, html):
        """Test classes keyword fills the class attribute."""
        button = html.button('Ok', classes='btn primary')
        assert button.render() == '<button class="btn primary">Ok</button>'
        button.remove_class('primary')
        assert button.render() == '<button class="btn">Ok</button>'

    def test_void_element(self, html):
        """Test void elements have no closing tag."""
        assert html.br().render() == '<br>'
        assert html.input(type='text', data_role='search').render() == (
            '<input type="text" data-role="search">'
        )

    def test_nested_tags(self, html):
        """Test tags nest as children."""
        page = html.div(html.h1('Title'), html.p('Text'), id='main')
        assert page.render() == '<div id="main"><h1>Title</h1><p>Text</p></div>'

    def test_children_wrapper(self, html):
        """Test children_wrapper keyword."""
        row = html.tr('a', 'b', children_wrapper='<td>%child%</td>')
        assert row.render() == '<tr><td>a</td><td>b</td></tr>'

    def test_unknown_tag(self, html):
        """Test unknown tags raise AttributeError."""
        with pytest.raises(AttributeError, match="not a valid HTML tag"):
            html.blink()

    def test_private_name(self, html):
        """Test underscore names are not tags."""
        with pytest.raises(AttributeError):
            html._secret

    def test_custom_element(self, html):
        """Test element() accepts any tag name."""
        assert html.element('my-widget', 'x', size=2).render() == (
            '<my-widget size="2">x</my-widget>'
        )

    def test_list_of(self, html):
        """Test list_of wraps each item."""
        assert html.list_of('ul', ['a', 'b'], classes='menu').render() == (
            '<ul class="menu"><li>a</li><li>b</li></ul>'
        )

    def test_slot_in_tag(self, html):
        """Test slots placed in a tag component."""
        card = html.section(html.h2('Card'), Slot('body', '<p>%slot%</p>'))
        assert card.render() == '<section><h2>Card</h2></section>'
        card.fill('body', 'Hello')
        assert card.render() == '<section><h2>Card</h2><p>Hello</p></section>'

    def test_sets(self):
        """Test the tag sets."""
        assert 'img' in HtmlBuilder.VOID_ELEMENTS
        assert 'div' in HtmlBuilder.ALL_TAGS
        assert HtmlBuilder.VOID_ELEMENTS <= HtmlBuilder.ALL_TAGS


class TestHtmlPage:
    """Tests for HtmlPage."""

    def test_empty_page(self):
        """Test an empty page keeps head and body."""
        assert HtmlPage().render() == (
            '<!DOCTYPE html>\n<html>\n<head></head>\n<body></body>\n</html>\n'
        )

    def test_filled_page(self, html):
        """Test head and body slots."""
        page = HtmlPage(lang='en')
        page.fill('head', html.title('My Page'), html.meta(charset='utf-8'))
        page.fill('body', html.p('Hello'))
        assert page.render() == (
            '<!DOCTYPE html>\n<html lang="en">\n'
            '<head><title>My Page</title><meta charset="utf-8"></head>\n'
            '<body><p>Hello</p></body>\n</html>\n'
        )

    def test_page_slots(self):
        """Test the page declares its slots."""
        assert [slot.name for slot in HtmlPage().slots] == ['head', 'body']

    def test_fill_chains(self):
        """Test fill returns the page so calls chain."""
        page = HtmlPage()
        assert page.fill('head', '<title>T</title>').fill('body', 'B') is page
        assert '<head><title>T</title></head>' in page.to_html()

    def test_streaming_matches(self, html):
        """Test printing a page writes what render returns."""
        page = HtmlPage()
        page.fill('body', html.div('x'))
        sink = BufferSink()
        page.print(sink)
        assert sink.getvalue() == page.render()

    def test_to_html_string(self):
        """Test to_html without filename returns the document."""
        page = HtmlPage()
        assert page.to_html() == page.render()

    def test_to_html_file(self, tmp_path):
        """Test to_html writes the document to a file."""
        page = HtmlPage()
        page.fill('body', 'Hi')
        path = page.to_html('index.html', output_dir=str(tmp_path / 'out'))
        assert path == str(tmp_path / 'out' / 'index.html')
        assert (tmp_path / 'out' / 'index.html').read_text() == page.render()
