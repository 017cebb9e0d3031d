"""Podcast catalog access: models, API client, genres and derived data."""

from podexplorer.catalog.client import DEFAULT_BASE_URL, CatalogClient, FetchResult
from podexplorer.catalog.derive import (
    episode_summary,
    genre_labels,
    selected_season,
    total_episode_count,
)
from podexplorer.catalog.genres import DEFAULT_GENRES, load_genres
from podexplorer.catalog.listing import ListingOptions, Page, SortOrder, apply_listing
from podexplorer.catalog.models import Episode, Genre, Season, ShowDetail, ShowPreview

__all__ = [
    "CatalogClient",
    "DEFAULT_BASE_URL",
    "FetchResult",
    "Episode",
    "Genre",
    "Season",
    "ShowDetail",
    "ShowPreview",
    "DEFAULT_GENRES",
    "load_genres",
    "genre_labels",
    "total_episode_count",
    "selected_season",
    "episode_summary",
    "ListingOptions",
    "Page",
    "SortOrder",
    "apply_listing",
]
