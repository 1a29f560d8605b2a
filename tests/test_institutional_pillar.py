"""Tests for the Institutional Pillar layout."""

import asyncio
import re

import pytest

from ir_site.backend.institutional_pillar import InstitutionalPillarLayout, render_institutional_pillar
from ir_site.errors import CMSFetchError
from ir_site.models import KPI, ComponentData

from .helpers import FailingPreparer, StaticPreparer, make_company


def _render(company, template=None, theme=None, preparer=None) -> str:
    layout = InstitutionalPillarLayout(preparer or StaticPreparer())
    return asyncio.run(layout.render(company, template, theme))


def _kpi_labels(html: str) -> list[str]:
    return re.findall(r'data-kpi="([^"]*)"', html)


def test_renders_default_kpis_without_cms_data():
    html = _render(make_company())
    assert _kpi_labels(html) == ["Revenue", "EBITDA", "Free Cash Flow", "EPS"]
    assert "$31.6B" in html
    assert "Non-GAAP: $2.58" in html


def test_renders_cms_kpis_verbatim():
    data = ComponentData(
        company_name="Acme Corp",
        kpis=[KPI(label="Backlog", gaap_value="$12B", trend="up")],
    )
    html = _render(make_company(), preparer=StaticPreparer(data))
    assert _kpi_labels(html) == ["Backlog"]
    assert "EBITDA" not in html


def test_prepares_data_once_with_cms():
    preparer = StaticPreparer()
    company = make_company()
    _render(company, preparer=preparer)
    assert preparer.calls == [(company, True)]


def test_css_custom_properties_on_root():
    html = _render(make_company(primary_color="#123456"))
    assert ":root {" in html
    assert "--primary-color: #123456;" in html
    assert "--accent-color: #3B82F6;" in html
    assert "--background-color: #FFFFFF;" in html
    assert "--text-color: #1F2937;" in html
    assert "--primary-font: Inter;" in html
    assert "--secondary-font: Inter;" in html


def test_wrapper_uses_resolved_theme():
    theme = {"colors": {"background": "#000000", "text": "#EEEEEE"}, "typography": {"primaryFont": "Lato"}}
    html = _render(make_company(), theme=theme)
    assert html.startswith('<div class="ir-site institutional-pillar" style="background-color: #000000; color: #EEEEEE; font-family: Lato;')


def test_header_nav_links_always_present():
    html = _render(make_company())
    for anchor in ("#about", "#investors", "#governance", "#contact"):
        assert f'href="{anchor}"' in html
    assert "<header" in html


def test_no_logo_without_logo_url():
    html = _render(make_company())
    assert "<img" not in html


def test_single_logo_with_logo_url():
    html = _render(make_company(logo_url="https://cdn.test/acme.svg"))
    images = re.findall(r'<img src="([^"]*)"', html)
    assert images == ["https://cdn.test/acme.svg"]
    assert 'alt="Acme Corp Logo"' in html


def test_no_ticker_badge_without_ticker():
    html = _render(make_company())
    assert "ticker-badge" not in html


def test_ticker_badge_text():
    html = _render(make_company(ticker_symbol="ACME"))
    badges = re.findall(r'<span class="ticker-badge[^"]*"[^>]*>([^<]*)</span>', html)
    assert badges == ["ACME"]
    assert "background-color: #3B82F620;" in html


def test_company_name_is_escaped():
    html = _render(make_company(name="Smith & <Sons>"))
    assert "Smith &amp; &lt;Sons&gt;" in html
    assert "<Sons>" not in html


def test_preparer_failure_propagates():
    layout = InstitutionalPillarLayout(FailingPreparer(CMSFetchError("database unavailable")))
    with pytest.raises(CMSFetchError, match="database unavailable"):
        asyncio.run(layout.render(make_company(), None, None))


def test_convenience_coroutine():
    html = asyncio.run(render_institutional_pillar(make_company(), None, None, preparer=StaticPreparer()))
    assert 'class="ir-content"' in html


@pytest.mark.parametrize("theme", [
    {"colors": "dark"},
    {"colors": {"primary": None}, "typography": ["Inter"]},
    "classic",
])
def test_malformed_theme_falls_through_to_company(theme):
    html = _render(make_company(primary_color="#123456"), theme=theme)
    assert "--primary-color: #123456;" in html


def test_numeric_theme_color_is_rendered():
    html = _render(make_company(primary_color="#123456"), theme={"colors": {"primary": 123}})
    assert "--primary-color: 123;" in html


def test_color_cannot_break_out_of_style_block():
    html = _render(make_company(primary_color="red;}</style><script>alert(1)</script>"))
    assert "<script>" not in html
    assert html.count("</style>") == 1
