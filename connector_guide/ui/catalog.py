"""
Catalog Page

Browse every connector in the catalog, smallest pole count first, narrowed
by a free-text search and facet filters. The filters live in the query
string so a filtered view can be bookmarked or shared:

    ?page=catalog&search=mx&gender=Female&gender=Male&poles=4&special=true

Facets combine with AND; values within one facet combine with OR.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

import streamlit as st

from connector_guide.app.routing import PAGE_CATALOG
from connector_guide.catalog.base import ConnectorCatalog
from connector_guide.errors import CatalogQueryError
from connector_guide.i18n import translate
from connector_guide.ui.connector_card import render_connector_grid
from connector_guide.wizard.models import ConnectorRecord

logger = logging.getLogger(__name__)

# Query parameters owned by this page
FILTER_PARAMS = ("search", "gender", "poles", "orientation", "category", "special")

# Widget keys, cleared by the "clear filters" button
_WIDGET_KEYS = (
    "catalog_search",
    "catalog_gender",
    "catalog_poles",
    "catalog_orientation",
    "catalog_category",
    "catalog_special",
)


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    return [str(item).strip() for item in value if str(item).strip()]


def _unique(values: Iterable) -> Tuple:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return tuple(seen)


@dataclass(frozen=True)
class CatalogFilters:
    """Search text and facet selections for the catalog page."""
    search: str = ""
    genders: Tuple[str, ...] = ()
    poles: Tuple[int, ...] = ()
    orientations: Tuple[str, ...] = ()
    categories: Tuple[str, ...] = ()
    special_only: bool = False

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "CatalogFilters":
        """
        Read filters from query parameters.

        Values may be single strings or lists (repeated parameters).
        Pole counts that are not integers are ignored.
        """
        search = _as_list(params.get("search"))
        poles = []
        for value in _as_list(params.get("poles")):
            if value.isdigit():
                poles.append(int(value))
            else:
                logger.debug(f"Ignoring pole filter {value!r}")
        special = _as_list(params.get("special"))
        return cls(
            search=search[0] if search else "",
            genders=_unique(_as_list(params.get("gender"))),
            poles=_unique(poles),
            orientations=_unique(_as_list(params.get("orientation"))),
            categories=_unique(_as_list(params.get("category"))),
            special_only=bool(special) and special[0].lower() == "true",
        )

    def to_params(self) -> Dict[str, Union[str, List[str]]]:
        """Query parameters for the active filters; inactive ones are left out."""
        params: Dict[str, Union[str, List[str]]] = {}
        if self.search.strip():
            params["search"] = self.search.strip()
        if self.genders:
            params["gender"] = list(self.genders)
        if self.poles:
            params["poles"] = [str(count) for count in self.poles]
        if self.orientations:
            params["orientation"] = list(self.orientations)
        if self.categories:
            params["category"] = list(self.categories)
        if self.special_only:
            params["special"] = "true"
        return params

    @property
    def active_count(self) -> int:
        return (
            (1 if self.search.strip() else 0)
            + len(self.genders)
            + len(self.poles)
            + len(self.orientations)
            + len(self.categories)
            + (1 if self.special_only else 0)
        )

    @property
    def is_active(self) -> bool:
        return self.active_count > 0


def matches(connector: ConnectorRecord, filters: CatalogFilters) -> bool:
    search = filters.search.strip().lower()
    if search:
        names = [connector.model, connector.display_name or ""]
        if not any(search in name.lower() for name in names):
            return False
    if filters.genders and connector.gender not in filters.genders:
        return False
    if filters.poles and connector.pole_count not in filters.poles:
        return False
    # A connector without an orientation never matches an orientation filter
    if filters.orientations and connector.orientation not in filters.orientations:
        return False
    if filters.categories and connector.category not in filters.categories:
        return False
    if filters.special_only and not connector.is_special_version:
        return False
    return True


def filter_connectors(
    connectors: Sequence[ConnectorRecord],
    filters: CatalogFilters,
) -> List[ConnectorRecord]:
    """Connectors passing every filter, in their original order."""
    return [connector for connector in connectors if matches(connector, filters)]


def facet_options(connectors: Sequence[ConnectorRecord]) -> Dict[str, List]:
    """Sorted distinct values offered by each facet."""
    return {
        "gender": sorted({c.gender for c in connectors if c.gender}),
        "poles": sorted({c.pole_count for c in connectors}),
        "orientation": sorted({c.orientation for c in connectors if c.orientation}),
        "category": sorted({c.category for c in connectors if c.category}),
    }


def load_connectors(catalog: ConnectorCatalog) -> List[ConnectorRecord]:
    """All connectors, smallest pole count first."""
    return catalog.find_connectors({}, order_by="pole_count")


# ============================================================================
# RENDERING
# ============================================================================

def _read_query_filters() -> CatalogFilters:
    return CatalogFilters.from_params({name: st.query_params.get_all(name) for name in FILTER_PARAMS})


def _write_query_filters(filters: CatalogFilters, lang: str) -> None:
    st.query_params.from_dict({"page": PAGE_CATALOG, "lang": lang, **filters.to_params()})


def _selected(values: Sequence, options: Sequence) -> List:
    # Multiselect defaults must be valid options
    return [value for value in values if value in options]


def _render_filters(current: CatalogFilters, options: Dict[str, List], lang: str) -> CatalogFilters:
    """Render search box, facet selectors and special toggle; return the chosen filters."""
    search = st.text_input(
        translate(lang, "catalog.search"),
        value=current.search,
        placeholder=translate(lang, "catalog.search_placeholder"),
        key="catalog_search",
    )

    gender_col, poles_col, orientation_col, category_col = st.columns(4)
    with gender_col:
        genders = st.multiselect(
            translate(lang, "catalog.filters.gender"),
            options=options["gender"],
            default=_selected(current.genders, options["gender"]),
            key="catalog_gender",
        )
    with poles_col:
        poles = st.multiselect(
            translate(lang, "catalog.filters.poles"),
            options=options["poles"],
            default=_selected(current.poles, options["poles"]),
            key="catalog_poles",
        )
    with orientation_col:
        orientations = st.multiselect(
            translate(lang, "catalog.filters.orientation"),
            options=options["orientation"],
            default=_selected(current.orientations, options["orientation"]),
            key="catalog_orientation",
        )
    with category_col:
        categories = st.multiselect(
            translate(lang, "catalog.filters.category"),
            options=options["category"],
            default=_selected(current.categories, options["category"]),
            key="catalog_category",
        )

    special_only = st.checkbox(
        translate(lang, "catalog.filters.special_version"),
        value=current.special_only,
        key="catalog_special",
    )

    return CatalogFilters(
        search=search.strip(),
        genders=tuple(genders),
        poles=tuple(poles),
        orientations=tuple(orientations),
        categories=tuple(categories),
        special_only=special_only,
    )


def render_catalog_page(catalog: ConnectorCatalog, lang: str) -> None:
    """Render the catalog browse page with its filter bar and connector grid."""
    st.title(translate(lang, "catalog.title"))
    st.caption(translate(lang, "catalog.description"))

    try:
        connectors = load_connectors(catalog)
    except CatalogQueryError as e:
        logger.error(f"Could not load connector catalog: {e}")
        st.error(f"**{translate(lang, 'catalog.error')}**\n\n{e}")
        return

    if not connectors:
        st.info(f"**{translate(lang, 'catalog.empty.title')}**\n\n{translate(lang, 'catalog.empty.description')}")
        return

    from_url = _read_query_filters()

    if from_url.is_active and st.button(
        f"✕ {translate(lang, 'catalog.clear_filters', count=from_url.active_count)}"
    ):
        for key in _WIDGET_KEYS:
            st.session_state.pop(key, None)
        _write_query_filters(CatalogFilters(), lang)
        st.rerun()

    with st.container(border=True):
        filters = _render_filters(from_url, facet_options(connectors), lang)

    if filters != from_url:
        _write_query_filters(filters, lang)

    shown = filter_connectors(connectors, filters)
    logger.debug(f"Catalog shows {len(shown)} of {len(connectors)} connectors ({filters.to_params()})")

    if not shown:
        st.warning(
            f"**{translate(lang, 'catalog.no_matches.title')}**\n\n"
            f"{translate(lang, 'catalog.no_matches.description')}"
        )
        return

    heading = "catalog.all_connectors" if len(shown) == len(connectors) else "catalog.filtered_results"
    st.subheader(translate(lang, heading))
    st.caption(translate(lang, "catalog.count", shown=len(shown), total=len(connectors)))

    render_connector_grid(shown, lang, show_video=False)
