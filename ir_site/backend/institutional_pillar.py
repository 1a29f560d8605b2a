"""
Institutional Pillar Layout

Fortune 500, conservative, legacy enterprise.
Structure: CEO credibility + stock ticker, three pillars, compliance-first.

Usage:
    layout = InstitutionalPillarLayout(preparer)
    html = await layout.render(company, template=None, theme=None)
"""

import html as html_lib
import logging
from typing import Any, Dict, Optional, Union

from ..models import Company, Template, Theme
from .component_config import get_cluster
from .component_data import ComponentDataPreparer, DataPreparer, merge_template_data
from .composer import ComponentComposer
from .theme_params import ResolvedTheme, resolve_theme, with_alpha

logger = logging.getLogger(__name__)

NAV_LINKS = (
    ("#about", "About"),
    ("#investors", "Investors"),
    ("#governance", "Governance"),
    ("#contact", "Contact"),
)


def _attr(value: str) -> str:
    return html_lib.escape(value, quote=True)


class InstitutionalPillarLayout:
    """Renders the Institutional Pillar page for one company."""

    key = "institutional-pillar"

    def __init__(self, preparer: Optional[DataPreparer] = None):
        self.preparer = preparer or ComponentDataPreparer.from_settings()

    async def render(
        self,
        company: Company,
        template: Optional[Template] = None,
        theme: Optional[Union[Theme, Dict[str, Any]]] = None,
    ) -> str:
        """
        Render the page structure.

        Errors from the data preparer are not caught; a failed fetch fails
        the render rather than producing partial markup.
        """
        theme = Theme.coerce(theme)

        # Prepare base component data from company (with CMS integration)
        base_data = await self.preparer.prepare(company, True)
        component_data = merge_template_data(base_data)

        components = get_cluster(self.key)(component_data)
        resolved = resolve_theme(company, theme)

        content = ComponentComposer(
            template=template,
            theme=theme,
            company=company,
            components=components,
        ).render()

        logger.info(
            f"Rendered {self.key} for '{company.name}': {len(components)} components, "
            f"{len(component_data.kpis or [])} KPIs"
        )

        return f"""<div class="ir-site institutional-pillar" style="background-color: {_attr(resolved.background_color)}; color: {_attr(resolved.text_color)}; font-family: {_attr(resolved.primary_font)}; min-height: 100vh;">
<style>
{resolved.to_css_block()}
</style>
{self.render_header(company, resolved)}
{content}
</div>"""

    def render_header(self, company: Company, resolved: ResolvedTheme) -> str:
        name = html_lib.escape(company.name)

        logo = ""
        if company.logo_url:
            logo = f'\n                <img src="{_attr(company.logo_url)}" alt="{_attr(company.name)} Logo" class="h-12">'

        ticker = ""
        if company.ticker_symbol:
            badge_style = (
                f"background-color: {with_alpha(resolved.accent_color, '20')}; "
                f"color: {resolved.accent_color};"
            )
            ticker = (
                f'\n                <span class="ticker-badge text-sm px-2 py-1 rounded" '
                f'style="{_attr(badge_style)}">{html_lib.escape(company.ticker_symbol)}</span>'
            )

        links = "".join(
            f'\n                    <li><a href="{href}" class="hover:underline" '
            f'style="color: {_attr(resolved.text_color)};">{label}</a></li>'
            for href, label in NAV_LINKS
        )

        header_style = (
            f"border-color: {with_alpha(resolved.primary_color, '20')}; "
            f"background-color: {resolved.background_color};"
        )
        return f"""<header class="border-b sticky top-0 z-50 bg-white" style="{_attr(header_style)}">
    <div class="container mx-auto px-4 py-4">
        <div class="flex items-center justify-between">
            <div class="flex items-center gap-4">{logo}
                <h1 class="text-2xl font-bold" style="color: {_attr(resolved.primary_color)};">{name}</h1>{ticker}
            </div>
            <nav>
                <ul class="flex items-center gap-6">{links}
                </ul>
            </nav>
        </div>
    </div>
</header>"""


async def render_institutional_pillar(
    company: Company,
    template: Optional[Template] = None,
    theme: Optional[Union[Theme, Dict[str, Any]]] = None,
    preparer: Optional[DataPreparer] = None,
) -> str:
    """Render the Institutional Pillar layout."""
    layout = InstitutionalPillarLayout(preparer=preparer)
    return await layout.render(company, template, theme)
