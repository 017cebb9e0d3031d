"""Catalog listing view: fetches previews once and serves listing pages."""

import logging

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.listing import ListingOptions, Page, apply_listing
from podexplorer.catalog.models import ShowPreview
from podexplorer.views.state import ViewState, ViewStatus

logger = logging.getLogger(__name__)

CATALOG_ERROR_PREFIX = "Error occurred while fetching podcasts: "


class CatalogView:
    """Owns the show-preview list for the listing screen."""

    def __init__(self, client: CatalogClient) -> None:
        self.client = client
        self.state: ViewState[list[ShowPreview]] = ViewState()
        self._request_token = 0

    @property
    def shows(self) -> list[ShowPreview]:
        return self.state.data or []

    @property
    def error_message(self) -> str | None:
        """Message shown in place of the listing when the fetch failed."""
        if self.state.error is None:
            return None
        return f"{CATALOG_ERROR_PREFIX}{self.state.error}"

    async def load(self) -> ViewState[list[ShowPreview]]:
        """Fetch the catalog unless it is already loaded."""
        if self.state.status is ViewStatus.LOADED:
            return self.state
        return await self.refresh()

    async def refresh(self) -> ViewState[list[ShowPreview]]:
        """Refetch the catalog and replace the list wholesale."""
        self._request_token += 1
        token = self._request_token
        self.state.begin()

        result = await self.client.fetch_catalog()
        if token != self._request_token:
            logger.debug("Discarding superseded catalog response")
            return self.state

        if result.ok:
            self.state.resolve(result.data)
        else:
            self.state.fail(result.message)
        return self.state

    def page(self, options: ListingOptions | None = None) -> Page:
        """Apply listing controls to the loaded previews."""
        return apply_listing(self.shows, options or ListingOptions())
