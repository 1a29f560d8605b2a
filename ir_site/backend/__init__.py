from .component_config import ComponentClusters, ComponentSpec, get_cluster  # noqa: F401
from .component_data import (  # noqa: F401
    ComponentDataPreparer,
    DataPreparer,
    get_default_pillars,
    merge_template_data,
    prepare_component_data,
)
from .composer import ComponentComposer  # noqa: F401
from .institutional_pillar import InstitutionalPillarLayout, render_institutional_pillar  # noqa: F401
from .page_builder import LAYOUTS, PageBuilder, available_layouts  # noqa: F401
from .theme_params import ResolvedTheme, resolve_theme  # noqa: F401
