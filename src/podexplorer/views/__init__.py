"""View-layer state containers for the listing and detail screens."""

from podexplorer.views.catalog_view import CATALOG_ERROR_PREFIX, CatalogView
from podexplorer.views.detail_view import ShowDetailView
from podexplorer.views.state import ViewState, ViewStatus

__all__ = [
    "CATALOG_ERROR_PREFIX",
    "CatalogView",
    "ShowDetailView",
    "ViewState",
    "ViewStatus",
]
