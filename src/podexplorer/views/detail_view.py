"""Show detail view with stale-response suppression.

Each call to :meth:`ShowDetailView.load` takes a new request token. When a
fetch completes, its result is applied only if no newer load has started
since, so rapid navigation between shows can never leave an older show's
detail on screen regardless of completion order.
"""

import logging
from collections.abc import Sequence

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.derive import genre_labels, selected_season, total_episode_count
from podexplorer.catalog.models import Genre, Season, ShowDetail
from podexplorer.views.state import ViewState

logger = logging.getLogger(__name__)


class ShowDetailView:
    """Owns the current show id, its detail and the selected season."""

    def __init__(self, client: CatalogClient, genres: Sequence[Genre]) -> None:
        self.client = client
        self.genres = list(genres)
        self.state: ViewState[ShowDetail] = ViewState()
        self.show_id: str | None = None
        self.selected_season_index = 0
        self._request_token = 0

    @property
    def detail(self) -> ShowDetail | None:
        return self.state.data

    @property
    def genre_labels(self) -> list[str]:
        return genre_labels(self.detail, self.genres)

    @property
    def total_episodes(self) -> int:
        return total_episode_count(self.detail)

    @property
    def current_season(self) -> Season | None:
        return selected_season(self.detail, self.selected_season_index)

    async def load(self, show_id: str) -> ViewState[ShowDetail]:
        """Fetch and apply the detail for ``show_id``.

        Args:
            show_id: Show to navigate to

        Returns:
            The view state after this load (unchanged if superseded)
        """
        self._request_token += 1
        token = self._request_token
        self.show_id = show_id
        self.selected_season_index = 0
        self.state.begin()

        result = await self.client.fetch_show_detail(show_id)

        if token != self._request_token:
            logger.debug(
                "Discarding stale response for show %s (current: %s)", show_id, self.show_id
            )
            return self.state

        if result.ok:
            self.state.resolve(result.data)
            self.selected_season_index = 0
        else:
            self.state.fail(result.message)
        return self.state

    def select_season(self, index: int) -> Season:
        """Change the selected season.

        Raises:
            ValueError: If no detail is loaded or index is out of range
        """
        season = selected_season(self.detail, index)
        if season is None:
            count = len(self.detail.seasons) if self.detail else 0
            raise ValueError(f"Season index {index} out of range (show has {count} seasons)")
        self.selected_season_index = index
        return season

    def leave(self) -> None:
        """Discard the current detail and ignore any pending load."""
        self._request_token += 1
        self.show_id = None
        self.selected_season_index = 0
        self.state.reset()
