"""
Component clusters.

A cluster maps merged ComponentData to the ordered list of components a
layout displays. Clusters are pure functions of their input.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..errors import UnknownClusterError
from ..models import ComponentData, Leader


@dataclass
class ComponentSpec:
    """One display component: its renderer key, anchor section, and props."""
    type: str
    section_id: str
    props: Dict[str, Any] = field(default_factory=dict)


def _find_ceo(leaders: List[Leader]) -> Optional[Leader]:
    for leader in leaders:
        title = leader.title.lower()
        if "chief executive" in title or title == "ceo" or title.startswith("ceo"):
            return leader
    return None


class ComponentClusters:
    """Registry of per-layout component clusters."""

    @staticmethod
    def institutional_pillar(data: ComponentData) -> List[ComponentSpec]:
        """CEO credibility and stock ticker, three pillars, compliance-first."""
        components = [
            ComponentSpec(
                type="hero",
                section_id="about",
                props={
                    "company_name": data.company_name,
                    "ticker_symbol": data.ticker_symbol,
                    "ceo": _find_ceo(data.leaders),
                    "tagline": (data.model_extra or {}).get("tagline"),
                },
            ),
            ComponentSpec(type="pillars", section_id="about", props={"pillars": data.pillars}),
            ComponentSpec(type="kpi-dashboard", section_id="investors", props={"kpis": data.kpis or []}),
        ]

        if data.filings:
            components.append(
                ComponentSpec(type="sec-filings", section_id="investors", props={"filings": data.filings})
            )
        if data.earnings:
            components.append(
                ComponentSpec(type="earnings", section_id="investors", props={"events": data.earnings})
            )
        if data.press_releases:
            components.append(
                ComponentSpec(
                    type="press-releases",
                    section_id="investors",
                    props={"releases": data.press_releases},
                )
            )
        if data.leaders:
            components.append(
                ComponentSpec(type="leadership", section_id="governance", props={"leaders": data.leaders})
            )
        if data.governance:
            components.append(
                ComponentSpec(
                    type="governance-documents",
                    section_id="governance",
                    props={"documents": data.governance},
                )
            )

        components.append(
            ComponentSpec(
                type="contact",
                section_id="contact",
                props={"company_name": data.company_name, "contact": data.contact},
            )
        )
        return components


CLUSTERS: Dict[str, Callable[[ComponentData], List[ComponentSpec]]] = {
    "institutional-pillar": ComponentClusters.institutional_pillar,
}


def get_cluster(name: str) -> Callable[[ComponentData], List[ComponentSpec]]:
    try:
        return CLUSTERS[name]
    except KeyError:
        raise UnknownClusterError(name) from None
