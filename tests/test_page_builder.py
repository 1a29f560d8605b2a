"""Tests for the page builder."""

import asyncio

import pytest

from ir_site.backend.page_builder import PageBuilder, available_layouts
from ir_site.errors import UnknownLayoutError

from .helpers import StaticPreparer, make_company


def test_available_layouts():
    assert available_layouts() == ["institutional-pillar"]


def test_build_full_document():
    builder = PageBuilder(StaticPreparer())
    html = asyncio.run(builder.build("institutional-pillar", make_company(name="A&B Holdings")))
    assert html.startswith("<!DOCTYPE html>")
    assert html.rstrip().endswith("</html>")
    assert "<title>A&amp;B Holdings - Investor Relations</title>" in html
    assert 'class="ir-site institutional-pillar"' in html


def test_unknown_layout():
    builder = PageBuilder(StaticPreparer())
    with pytest.raises(UnknownLayoutError):
        asyncio.run(builder.build("nope", make_company()))
