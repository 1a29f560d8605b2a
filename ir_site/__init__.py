"""IR Site: themed investor-relations page layouts backed by a headless CMS."""

__version__ = "0.1.0"

from ir_site.backend.institutional_pillar import (  # noqa: F401
    InstitutionalPillarLayout,
    render_institutional_pillar,
)
from ir_site.backend.page_builder import PageBuilder  # noqa: F401
from ir_site.backend.theme_params import ResolvedTheme, resolve_theme  # noqa: F401
from ir_site.models import Company, ComponentData, Theme  # noqa: F401
