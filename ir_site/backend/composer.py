"""
Component Composer

Renders an ordered list of ComponentSpecs into the content region of an IR
page. Styling reads the CSS custom properties the layout declares on
:root (--primary-color, --accent-color, ...), so the composer never needs
the resolved theme itself.
"""

import html as html_lib
import logging
from typing import Any, Callable, Dict, List, Optional

from ..models import (
    Company,
    ContactInfo,
    EarningsEvent,
    Filing,
    GovernanceDocument,
    KPI,
    Leader,
    Pillar,
    PressRelease,
    Template,
    Theme,
)
from .component_config import ComponentSpec

logger = logging.getLogger(__name__)


def esc(value: Any) -> str:
    return html_lib.escape("" if value is None else str(value), quote=True)


def _link(url: Optional[str], text: str) -> str:
    if not url:
        return esc(text)
    return f'<a href="{esc(url)}" style="color: var(--accent-color);">{esc(text)}</a>'


# ============================================
# SECTION RENDERERS
# ============================================

def render_hero(props: Dict[str, Any]) -> str:
    ticker = props.get("ticker_symbol")
    ceo: Optional[Leader] = props.get("ceo")
    tagline = props.get("tagline") or "Delivering durable, long-term value for our shareholders."

    ticker_html = (
        f'<p class="hero-ticker">Listed as <strong>{esc(ticker)}</strong></p>' if ticker else ""
    )
    ceo_html = ""
    if ceo:
        bio = f'<p class="hero-ceo-bio">{esc(ceo.bio)}</p>' if ceo.bio else ""
        ceo_html = f"""
        <div class="hero-ceo">
            <p class="hero-ceo-name" style="font-family: var(--secondary-font);">{esc(ceo.name)}</p>
            <p class="hero-ceo-title">{esc(ceo.title)}</p>
            {bio}
        </div>"""

    return f"""
    <div class="container mx-auto px-4 py-16">
        <h2 class="text-4xl font-bold" style="color: var(--primary-color); font-family: var(--secondary-font);">{esc(props.get("company_name"))}</h2>
        <p class="hero-tagline">{esc(tagline)}</p>
        {ticker_html}{ceo_html}
    </div>"""


def render_pillars(props: Dict[str, Any]) -> str:
    pillars: List[Pillar] = props.get("pillars", [])
    cards = ""
    for pillar in pillars:
        highlights = "".join(f"<li>{esc(h)}</li>" for h in pillar.highlights)
        cards += f"""
        <div class="pillar" data-pillar="{esc(pillar.id)}" style="border-top: 4px solid var(--accent-color);">
            <h3 style="color: var(--primary-color);">{esc(pillar.title)}</h3>
            <p>{esc(pillar.description)}</p>
            <ul>{highlights}</ul>
        </div>"""
    return f'<div class="container mx-auto px-4 py-12 grid grid-cols-3 gap-8">{cards}\n    </div>'


def render_kpi_dashboard(props: Dict[str, Any]) -> str:
    kpis: List[KPI] = props.get("kpis", [])
    arrows = {"up": "▲", "down": "▼", "flat": "■"}
    cards = ""
    for kpi in kpis:
        non_gaap = (
            f'<p class="kpi-non-gaap">Non-GAAP: {esc(kpi.non_gaap_value)}</p>' if kpi.non_gaap_value else ""
        )
        change = ""
        if kpi.change:
            trend_class = f" trend-{esc(kpi.trend)}" if kpi.trend else ""
            arrow = arrows.get(kpi.trend, "")
            change = f'<p class="kpi-change{trend_class}">{arrow} {esc(kpi.change)}</p>'
        period = f'<p class="kpi-period">{esc(kpi.period)}</p>' if kpi.period else ""
        cards += f"""
        <div class="kpi" data-kpi="{esc(kpi.label)}">
            <p class="kpi-label">{esc(kpi.label)}</p>
            <p class="kpi-value" style="color: var(--primary-color);">{esc(kpi.gaap_value)}</p>
            {non_gaap}{change}{period}
        </div>"""
    return f"""
    <div class="container mx-auto px-4 py-12">
        <h2 style="color: var(--primary-color);">Key Performance Indicators</h2>
        <div class="kpi-grid grid grid-cols-4 gap-6">{cards}
        </div>
    </div>"""


def _render_table(title: str, headers: List[str], rows: List[List[str]]) -> str:
    """Rows are pre-escaped HTML cells."""
    head = "".join(f"<th>{esc(h)}</th>" for h in headers)
    body = "".join("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows)
    return f"""
    <div class="container mx-auto px-4 py-12">
        <h2 style="color: var(--primary-color);">{esc(title)}</h2>
        <table>
            <thead><tr>{head}</tr></thead>
            <tbody>{body}</tbody>
        </table>
    </div>"""


def render_sec_filings(props: Dict[str, Any]) -> str:
    filings: List[Filing] = props.get("filings", [])
    rows = [
        [esc(f.form_type), _link(f.url, f.title or f.form_type), esc(f.filed_at)]
        for f in filings
    ]
    return _render_table("SEC Filings", ["Form", "Description", "Filed"], rows)


def render_earnings(props: Dict[str, Any]) -> str:
    events: List[EarningsEvent] = props.get("events", [])
    rows = [
        [esc(e.period), esc(e.title), esc(e.date), _link(e.webcast_url, "Webcast") if e.webcast_url else ""]
        for e in events
    ]
    return _render_table("Earnings", ["Period", "Event", "Date", ""], rows)


def render_press_releases(props: Dict[str, Any]) -> str:
    releases: List[PressRelease] = props.get("releases", [])
    items = ""
    for release in releases:
        if not release.title:
            continue
        date = f'<time>{esc(release.published_at)}</time> ' if release.published_at else ""
        summary = f"<p>{esc(release.summary)}</p>" if release.summary else ""
        items += f"\n            <li>{date}{_link(release.url, release.title)}{summary}</li>"
    return f"""
    <div class="container mx-auto px-4 py-12">
        <h2 style="color: var(--primary-color);">Press Releases</h2>
        <ul class="press-releases">{items}
        </ul>
    </div>"""


def render_leadership(props: Dict[str, Any]) -> str:
    leaders: List[Leader] = props.get("leaders", [])
    cards = ""
    for leader in leaders:
        photo = (
            f'<img src="{esc(leader.photo_url)}" alt="{esc(leader.name)}" class="leader-photo">'
            if leader.photo_url else ""
        )
        bio = f"<p>{esc(leader.bio)}</p>" if leader.bio else ""
        cards += f"""
        <div class="leader">
            {photo}
            <h3 style="color: var(--primary-color);">{esc(leader.name)}</h3>
            <p class="leader-title">{esc(leader.title)}</p>
            {bio}
        </div>"""
    return f"""
    <div class="container mx-auto px-4 py-12">
        <h2 style="color: var(--primary-color);">Leadership</h2>
        <div class="grid grid-cols-3 gap-8">{cards}
        </div>
    </div>"""


def render_governance_documents(props: Dict[str, Any]) -> str:
    documents: List[GovernanceDocument] = props.get("documents", [])
    rows = [[_link(d.url, d.title), esc(d.category)] for d in documents]
    return _render_table("Corporate Governance", ["Document", "Category"], rows)


def render_contact(props: Dict[str, Any]) -> str:
    contact: Optional[ContactInfo] = props.get("contact")
    lines = ""
    if contact:
        if contact.name:
            lines += f"<p>{esc(contact.name)}</p>"
        if contact.email:
            lines += f'<p><a href="mailto:{esc(contact.email)}" style="color: var(--accent-color);">{esc(contact.email)}</a></p>'
        if contact.phone:
            lines += f"<p>{esc(contact.phone)}</p>"
        if contact.address:
            lines += f"<address>{esc(contact.address)}</address>"
    if not lines:
        lines = f"<p>For investor inquiries, please contact {esc(props.get('company_name'))} Investor Relations.</p>"
    return f"""
    <div class="container mx-auto px-4 py-12">
        <h2 style="color: var(--primary-color);">Investor Contact</h2>
        {lines}
    </div>"""


RENDERERS: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "hero": render_hero,
    "pillars": render_pillars,
    "kpi-dashboard": render_kpi_dashboard,
    "sec-filings": render_sec_filings,
    "earnings": render_earnings,
    "press-releases": render_press_releases,
    "leadership": render_leadership,
    "governance-documents": render_governance_documents,
    "contact": render_contact,
}


# ============================================
# COMPOSER
# ============================================

class ComponentComposer:
    """
    Renders a resolved component list.

    Example:
        composer = ComponentComposer(template=None, theme=None, company=company, components=components)
        html = composer.render()
    """

    def __init__(
        self,
        template: Optional[Template],
        theme: Optional[Theme],
        company: Company,
        components: List[ComponentSpec],
    ):
        self.template = template
        self.theme = theme
        self.company = company
        self.components = components

    def render(self) -> str:
        seen_sections = set()
        sections = []

        for component in self.components:
            renderer = RENDERERS.get(component.type)
            if renderer is None:
                logger.warning(f"No renderer for component type '{component.type}', skipping")
                continue

            # The first component in a section carries its anchor id
            id_attr = ""
            if component.section_id not in seen_sections:
                seen_sections.add(component.section_id)
                id_attr = f' id="{esc(component.section_id)}"'

            sections.append(
                f'<section{id_attr} class="ir-component ir-{esc(component.type)}">'
                f"{renderer(component.props)}\n</section>"
            )

        template_name = self.template.get("name") if isinstance(self.template, dict) else None
        template_attr = f' data-template="{esc(template_name)}"' if template_name else ""
        return f'<main class="ir-content"{template_attr}>\n' + "\n".join(sections) + "\n</main>"
