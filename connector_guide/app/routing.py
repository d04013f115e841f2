"""
Routing

Pages are addressed with query parameters:

    ?page=connector-guide&lang=en
    ?page=catalog&gender=Female&poles=4
    ?page=terminals&lang=de
    ?page=installation
    ?page=connector&id=<connector id>&lang=en

Unknown pages fall back to the connector guide, unknown languages to the
default language. A connector page without an id also falls back to the
guide. Catalog filter parameters are read by the catalog page itself.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlencode

from connector_guide.i18n import normalize_language

PAGE_CONNECTOR_GUIDE = "connector-guide"
PAGE_CATALOG = "catalog"
PAGE_TERMINALS = "terminals"
PAGE_INSTALLATION = "installation"
PAGE_CONNECTOR = "connector"

# Pages shown in the sidebar navigation (the detail page is reached from cards)
NAV_PAGES = (PAGE_CONNECTOR_GUIDE, PAGE_CATALOG, PAGE_TERMINALS, PAGE_INSTALLATION)
PAGES = NAV_PAGES + (PAGE_CONNECTOR,)


@dataclass(frozen=True)
class Route:
    page: str
    lang: str
    connector_id: Optional[str] = None


def _first(params: Mapping, name: str) -> Optional[str]:
    value = params.get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def resolve_route(params: Mapping, default_lang: Optional[str] = None) -> Route:
    """Resolve query parameters to a Route."""
    lang = normalize_language(_first(params, "lang") or default_lang)
    page = _first(params, "page") or PAGE_CONNECTOR_GUIDE
    connector_id = _first(params, "id")

    if page not in PAGES:
        page = PAGE_CONNECTOR_GUIDE
    if page == PAGE_CONNECTOR and connector_id is None:
        page = PAGE_CONNECTOR_GUIDE
    if page != PAGE_CONNECTOR:
        connector_id = None

    return Route(page=page, lang=lang, connector_id=connector_id)


def connector_url(connector_id: str, lang: str) -> str:
    """Relative link to a connector detail page."""
    return "?" + urlencode({"page": PAGE_CONNECTOR, "id": connector_id, "lang": lang})


def page_url(page: str, lang: str) -> str:
    return "?" + urlencode({"page": page, "lang": lang})
