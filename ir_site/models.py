"""
Data models for the IR site renderer.

Company records, theme descriptors and CMS content arrive as camelCase JSON
from the hosting app and the CMS; every model accepts both the camelCase
alias and the snake_case field name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class IRModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------


class PressRelease(IRModel):
    title: str | None = None
    published_at: str | None = None
    summary: str | None = None
    url: str | None = None


class Company(IRModel):
    """Company record owned by the persistence layer. Read-only here."""

    id: str | None = None
    name: str
    logo_url: str | None = None
    ticker_symbol: str | None = None
    primary_color: str | None = None
    accent_color: str | None = None
    primary_font_family: str | None = None
    secondary_font_family: str | None = None
    press_releases: list[PressRelease] | None = None


# ---------------------------------------------------------------------------
# Theme / template descriptors
# ---------------------------------------------------------------------------


def _scalar_or_none(value: Any) -> Any:
    # Theme values land in inline styles as text; anything that isn't a
    # string or number reads as absent
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    return value


def _mapping_or_none(value: Any) -> Any:
    if isinstance(value, (Mapping, BaseModel)):
        return value
    return None


class ThemeColors(IRModel):
    model_config = {**IRModel.model_config, "extra": "allow", "coerce_numbers_to_str": True}

    primary: str | None = None
    accent: str | None = None
    background: str | None = None
    text: str | None = None

    drop_malformed = field_validator("primary", "accent", "background", "text", mode="before")(_scalar_or_none)


class ThemeTypography(IRModel):
    model_config = {**IRModel.model_config, "extra": "allow", "coerce_numbers_to_str": True}

    primary_font: str | None = None
    secondary_font: str | None = None

    drop_malformed = field_validator("primary_font", "secondary_font", mode="before")(_scalar_or_none)


class Theme(IRModel):
    """
    Optional color/typography override bundle. Every field may be absent.

    Malformed sections are read as absent rather than rejected, so their
    values fall through to the company branding and the defaults.
    """

    model_config = {**IRModel.model_config, "extra": "allow", "coerce_numbers_to_str": True}

    name: str | None = None
    colors: ThemeColors | None = None
    typography: ThemeTypography | None = None

    drop_malformed_name = field_validator("name", mode="before")(_scalar_or_none)
    drop_malformed_sections = field_validator("colors", "typography", mode="before")(_mapping_or_none)

    @classmethod
    def coerce(cls, value: Any) -> Theme | None:
        if isinstance(value, Theme):
            return value
        if not isinstance(value, Mapping):
            return None
        return cls.model_validate(value)


# Templates are opaque until the upstream schema settles.
Template = dict[str, Any]


# ---------------------------------------------------------------------------
# Component data
# ---------------------------------------------------------------------------


class KPI(IRModel):
    """
    One KPI card. CMS entries are kept as sent: unknown keys stay as extras
    and ``trend`` is free text (the dashboard draws arrows for up/down/flat).
    """

    # CMS exports sometimes send changePercent as a number
    model_config = {**IRModel.model_config, "extra": "allow", "coerce_numbers_to_str": True}

    label: str
    gaap_value: str
    non_gaap_value: str | None = None
    change: str | None = None
    change_percent: str | None = None
    period: str | None = None
    trend: str | None = None


class Pillar(IRModel):
    id: str
    title: str
    description: str
    highlights: list[str] = Field(default_factory=list)


class Filing(IRModel):
    form_type: str
    title: str | None = None
    filed_at: str | None = None
    url: str | None = None


class EarningsEvent(IRModel):
    period: str
    date: str | None = None
    title: str | None = None
    webcast_url: str | None = None


class Leader(IRModel):
    name: str
    title: str
    bio: str | None = None
    photo_url: str | None = None


class GovernanceDocument(IRModel):
    title: str
    url: str | None = None
    category: str | None = None


class ContactInfo(IRModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None


class ComponentData(IRModel):
    """
    Request-scoped data handed to the component clusters.

    Unknown CMS keys are kept as extras so downstream components can read
    them without a schema change.
    """

    model_config = {**IRModel.model_config, "extra": "allow"}

    company_name: str
    ticker_symbol: str | None = None
    kpis: list[KPI] | None = None
    pillars: list[Pillar] = Field(default_factory=list)
    filings: list[Filing] = Field(default_factory=list)
    earnings: list[EarningsEvent] = Field(default_factory=list)
    leaders: list[Leader] = Field(default_factory=list)
    governance: list[GovernanceDocument] = Field(default_factory=list)
    press_releases: list[PressRelease] = Field(default_factory=list)
    contact: ContactInfo | None = None
