"""
Component data preparation.

Builds the request-scoped ComponentData a layout hands to its component
cluster: base data from the company record, CMS content overlaid on top,
then the layout's own defaults (pillars, fallback KPIs).
"""

from __future__ import annotations

import abc
import logging
from typing import Any

from pydantic import ValidationError

from ..cms.client import CMSClient
from ..config import Settings
from ..errors import CMSFetchError
from ..models import KPI, Company, ComponentData, Pillar

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Static defaults
# ---------------------------------------------------------------------------

DEFAULT_KPIS: tuple[KPI, ...] = (
    KPI(
        label="Revenue",
        gaap_value="$31.6B",
        non_gaap_value="$32.1B",
        change="+15%",
        change_percent="15.2",
        period="FY 2024",
        trend="up",
    ),
    KPI(
        label="EBITDA",
        gaap_value="$8.2B",
        change="+12%",
        change_percent="12.5",
        period="FY 2024",
        trend="up",
    ),
    KPI(
        label="Free Cash Flow",
        gaap_value="$5.1B",
        change="+8%",
        change_percent="8.3",
        period="FY 2024",
        trend="up",
    ),
    KPI(
        label="EPS",
        gaap_value="$2.45",
        non_gaap_value="$2.58",
        change="+10%",
        change_percent="10.2",
        period="FY 2024",
        trend="up",
    ),
)

_DEFAULT_PILLARS: tuple[Pillar, ...] = (
    Pillar(
        id="financial-strength",
        title="Financial Strength",
        description="A resilient balance sheet and disciplined capital allocation.",
        highlights=[
            "Investment-grade credit profile",
            "Consistent dividend growth",
            "Strong free cash flow conversion",
        ],
    ),
    Pillar(
        id="operational-excellence",
        title="Operational Excellence",
        description="Scale, efficiency and execution across every business line.",
        highlights=[
            "Global operating footprint",
            "Margin expansion through productivity",
            "Long-standing customer relationships",
        ],
    ),
    Pillar(
        id="governance-trust",
        title="Governance & Trust",
        description="Independent oversight and a compliance-first culture.",
        highlights=[
            "Majority-independent board",
            "Transparent executive compensation",
            "Comprehensive ethics and compliance program",
        ],
    ),
)


def default_kpis() -> list[KPI]:
    """Fresh copies of the four fallback KPIs."""
    return [kpi.model_copy() for kpi in DEFAULT_KPIS]


def get_default_pillars() -> list[Pillar]:
    """The three pillars shown on the Institutional Pillar layout."""
    return [pillar.model_copy(deep=True) for pillar in _DEFAULT_PILLARS]


def merge_template_data(base: ComponentData) -> ComponentData:
    """
    Layer the Institutional Pillar defaults over prepared base data.

    KPIs are all-or-nothing: a non-empty CMS list is used verbatim,
    otherwise the four defaults replace it entirely.
    """
    kpis = base.kpis if base.kpis else default_kpis()
    return base.model_copy(update={"pillars": get_default_pillars(), "kpis": kpis})


# ---------------------------------------------------------------------------
# Preparers
# ---------------------------------------------------------------------------


class DataPreparer(abc.ABC):
    """Produces base ComponentData for a company."""

    @abc.abstractmethod
    async def prepare(self, company: Company, include_cms: bool = True) -> ComponentData:
        ...


class ComponentDataPreparer(DataPreparer):
    """Builds base data from the company record, overlaid with CMS content."""

    def __init__(self, cms_client: CMSClient | None = None) -> None:
        self.cms_client = cms_client

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ComponentDataPreparer:
        settings = settings or Settings.from_env()
        return cls(cms_client=CMSClient.from_settings(settings))

    def base_data(self, company: Company) -> dict[str, Any]:
        # Keyed by alias so camelCase CMS keys override these
        return {
            "companyName": company.name,
            "tickerSymbol": company.ticker_symbol,
            "pressReleases": list(company.press_releases or []),
        }

    async def prepare(self, company: Company, include_cms: bool = True) -> ComponentData:
        data = self.base_data(company)

        if include_cms and self.cms_client is not None:
            if company.id:
                content = await self.cms_client.get_company_content(company.id)
                data.update(content)
            else:
                logger.warning(f"Company '{company.name}' has no id; skipping CMS content")

        try:
            return ComponentData.model_validate(data)
        except ValidationError as e:
            raise CMSFetchError(f"CMS content for '{company.name}' failed validation: {e}") from e


async def prepare_component_data(
    company: Company,
    include_cms: bool = True,
    preparer: DataPreparer | None = None,
) -> ComponentData:
    """Convenience wrapper using a preparer configured from the environment."""
    preparer = preparer or ComponentDataPreparer.from_settings()
    return await preparer.prepare(company, include_cms)
