"""
UI Package

Page rendering for the connector guide.

- wizard_steps: question steps 1-4 and wizard navigation
- progress: step indicator
- results: step 5 result renderer
- connector_card: connector cards and grids
- catalog: catalog browse page with search and facet filters
- detail: connector detail page
- terminals: terminal catalog page
- installation: installation guide page
- i18n: language toggle
"""

from connector_guide.ui.catalog import CatalogFilters, filter_connectors, render_catalog_page
from connector_guide.ui.connector_card import render_connector_card, render_connector_grid
from connector_guide.ui.detail import render_connector_detail
from connector_guide.ui.i18n import render_language_toggle_compact, switch_language
from connector_guide.ui.installation import render_installation_page
from connector_guide.ui.progress import render_progress_bar
from connector_guide.ui.results import build_results_view, render_results, results_to_frame
from connector_guide.ui.terminals import render_terminals_page
from connector_guide.ui.wizard_steps import render_current_step, render_navigation, reset_wizard

__all__ = [
    "CatalogFilters",
    "build_results_view",
    "filter_connectors",
    "render_catalog_page",
    "render_connector_card",
    "render_connector_detail",
    "render_connector_grid",
    "render_current_step",
    "render_installation_page",
    "render_language_toggle_compact",
    "render_navigation",
    "render_progress_bar",
    "render_results",
    "render_terminals_page",
    "reset_wizard",
    "results_to_frame",
    "switch_language",
]
