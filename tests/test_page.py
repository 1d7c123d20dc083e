"""Tests for hydrator.page.PageBinder."""

import pytest
from bs4 import BeautifulSoup

from hydrator.errors import UnmappedTarget
from hydrator.page import PageBinder


def _soup(binder):
    return BeautifulSoup(binder.html(), "html.parser")


class TestBind:
    def test_replaces_target_content(self, small_page):
        binder = PageBinder(small_page)
        binder.bind("a-content", "a.txt", "<h1>Title</h1>\n<p>Body</p>")

        target = _soup(binder).find(id="a-content")
        assert target.h1.get_text() == "Title"
        assert "Placeholder" not in target.get_text()

    def test_settles_container(self, small_page):
        binder = PageBinder(small_page)
        binder.bind("a-content", "a.txt", "<p>x</p>")

        container = _soup(binder).find(id="a-content").parent
        assert "onclick" not in container.attrs
        assert container["style"] == "cursor: default"
        assert container["title"] == "Content loaded from content/a.txt"
        assert container.find(class_="edit-notice")["style"] == "display: none"

    def test_other_containers_untouched(self, small_page):
        binder = PageBinder(small_page)
        binder.bind("a-content", "a.txt", "<p>x</p>")

        other = _soup(binder).find(id="b-content").parent
        assert other["onclick"] == "editContent()"
        assert "title" not in other.attrs

    def test_existing_style_properties_kept(self):
        page = (
            '<div class="content-file-preview" style="cursor: pointer; color: red">'
            '<div id="t"></div></div>'
        )
        binder = PageBinder(page)
        binder.bind("t", "t.txt", "<p>x</p>")

        assert _soup(binder).find(class_="content-file-preview")["style"] == "cursor: default; color: red"

    def test_missing_target_raises(self, small_page):
        binder = PageBinder(small_page)
        with pytest.raises(UnmappedTarget):
            binder.bind("nowhere", "n.txt", "<p>x</p>")

    def test_target_without_container(self):
        binder = PageBinder('<div id="t">old</div>')
        binder.bind("t", "t.txt", "<p>new</p>")
        assert binder.html() == '<div id="t"><p>new</p></div>'

    def test_custom_classes(self):
        page = '<section class="slot"><div id="t"></div><em class="hint">edit</em></section>'
        binder = PageBinder(page, container_class="slot", notice_class="hint")
        binder.bind("t", "t.txt", "<p>x</p>")

        soup = _soup(binder)
        assert soup.find(class_="slot")["title"] == "Content loaded from content/t.txt"
        assert soup.find(class_="hint")["style"] == "display: none"


class TestBindPlain:
    def test_keeps_content_and_settles(self, small_page):
        binder = PageBinder(small_page)
        binder.bind_plain("b-content", "b.txt")

        target = _soup(binder).find(id="b-content")
        assert target.get_text() == "Placeholder"
        assert target.parent["title"] == "Content loaded from content/b.txt"

    def test_missing_target_raises(self, small_page):
        with pytest.raises(UnmappedTarget):
            PageBinder(small_page).bind_plain("nowhere", "n.txt")
