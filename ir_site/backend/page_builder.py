"""
Page Builder

Single entry point for rendering a complete IR page document from a layout
key. Layouts produce the page body; the builder wraps it in a standalone
HTML document.

Usage:
    builder = PageBuilder(preparer)
    html = await builder.build("institutional-pillar", company, template, theme)
"""

import html as html_lib
import logging
from typing import Any, Dict, List, Optional, Union

from ..errors import UnknownLayoutError
from ..models import Company, Template, Theme
from .component_data import ComponentDataPreparer, DataPreparer
from .institutional_pillar import InstitutionalPillarLayout

logger = logging.getLogger(__name__)


LAYOUTS = {
    InstitutionalPillarLayout.key: InstitutionalPillarLayout,
}


def available_layouts() -> List[str]:
    return sorted(LAYOUTS)


def render_document(title: str, body: str) -> str:
    """Wrap rendered layout markup in a standalone HTML document."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html_lib.escape(title)}</title>
    <style>
        * {{ box-sizing: border-box; margin: 0; padding: 0; }}
        body {{ line-height: 1.5; }}
        h1, h2, h3 {{ font-family: var(--secondary-font); }}
        table {{ width: 100%; border-collapse: collapse; }}
        th, td {{ padding: 6px 10px; border-bottom: 1px solid #e5e7eb; text-align: left; }}
        .kpi-change.trend-up {{ color: #059669; }}
        .kpi-change.trend-down {{ color: #DC2626; }}
    </style>
</head>
<body>
{body}
</body>
</html>"""


class PageBuilder:
    """
    Renders full IR page documents.

    Example:
        builder = PageBuilder()
        html = await builder.build("institutional-pillar", company)
    """

    def __init__(self, preparer: Optional[DataPreparer] = None):
        self.preparer = preparer or ComponentDataPreparer.from_settings()

    def get_layout(self, key: str):
        layout_cls = LAYOUTS.get(key)
        if layout_cls is None:
            raise UnknownLayoutError(key)
        return layout_cls(preparer=self.preparer)

    async def build(
        self,
        layout: str,
        company: Company,
        template: Optional[Template] = None,
        theme: Optional[Union[Theme, Dict[str, Any]]] = None,
    ) -> str:
        body = await self.get_layout(layout).render(company, template, theme)
        return render_document(f"{company.name} - Investor Relations", body)
