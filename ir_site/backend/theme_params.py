"""
Resolved Theme Values for IR Site Layouts

Each value is picked from an ordered list of sources:
theme override -> company branding -> hardcoded default.
No validation or normalization is applied; whatever string wins ends up in
inline styles and CSS custom properties as-is, except that "<" is
escaped inside the <style> block.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from ..models import Company, Theme


DEFAULT_PRIMARY_COLOR = "#0F172A"
DEFAULT_ACCENT_COLOR = "#3B82F6"
DEFAULT_BACKGROUND_COLOR = "#FFFFFF"
DEFAULT_TEXT_COLOR = "#1F2937"
DEFAULT_PRIMARY_FONT = "Inter"

# CSS custom property name -> ResolvedTheme attribute
CSS_VARIABLES = {
    "--primary-color": "primary_color",
    "--accent-color": "accent_color",
    "--background-color": "background_color",
    "--text-color": "text_color",
    "--primary-font": "primary_font",
    "--secondary-font": "secondary_font",
}


def first_present(*candidates: Optional[str]) -> Optional[str]:
    """Return the first candidate that is set and non-empty."""
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def css_text(value: str) -> str:
    return value.replace("<", "\\3C ")


def with_alpha(color: str, alpha: str) -> str:
    """Append a hex alpha suffix, e.g. ``#3B82F6`` + ``20``."""
    return f"{color}{alpha}"


@dataclass
class ResolvedTheme:
    """The six scalar style values a layout renders with."""

    primary_color: str = DEFAULT_PRIMARY_COLOR
    accent_color: str = DEFAULT_ACCENT_COLOR
    background_color: str = DEFAULT_BACKGROUND_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    primary_font: str = DEFAULT_PRIMARY_FONT
    secondary_font: str = DEFAULT_PRIMARY_FONT

    def css_variables(self) -> Dict[str, str]:
        return {name: getattr(self, attr) for name, attr in CSS_VARIABLES.items()}

    def to_css_block(self, selector: str = ":root") -> str:
        lines = "\n".join(
            f"  {name}: {css_text(value)};" for name, value in self.css_variables().items()
        )
        return f"{selector} {{\n{lines}\n}}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def resolve_theme(company: Company, theme: Optional[Theme] = None) -> ResolvedTheme:
    """Resolve theme values for one render."""
    colors = theme.colors if theme and theme.colors else None
    typography = theme.typography if theme and theme.typography else None

    primary_font = first_present(
        typography and typography.primary_font,
        company.primary_font_family,
        DEFAULT_PRIMARY_FONT,
    )
    return ResolvedTheme(
        primary_color=first_present(
            colors and colors.primary,
            company.primary_color,
            DEFAULT_PRIMARY_COLOR,
        ),
        accent_color=first_present(
            colors and colors.accent,
            company.accent_color,
            DEFAULT_ACCENT_COLOR,
        ),
        background_color=first_present(colors and colors.background, DEFAULT_BACKGROUND_COLOR),
        text_color=first_present(colors and colors.text, DEFAULT_TEXT_COLOR),
        primary_font=primary_font,
        # Secondary font falls back to the resolved primary, not to a constant
        secondary_font=first_present(
            typography and typography.secondary_font,
            company.secondary_font_family,
            primary_font,
        ),
    )
