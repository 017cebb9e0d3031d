"""Search, genre filtering, sorting and pagination over show previews."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from podexplorer.catalog.models import ShowPreview

DEFAULT_PAGE_SIZE = 12


class SortOrder(str, Enum):
    """Available listing orders."""

    NEWEST = "newest"
    OLDEST = "oldest"
    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"


@dataclass(frozen=True)
class ListingOptions:
    """User-selected listing controls."""

    query: str = ""
    genre_id: int | None = None
    sort: SortOrder = SortOrder.NEWEST
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class Page:
    """One page of a listing."""

    items: list[ShowPreview] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    total_items: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def search_shows(shows: Sequence[ShowPreview], query: str) -> list[ShowPreview]:
    """Case-insensitive title match. An empty query keeps everything."""
    needle = query.strip().lower()
    if not needle:
        return list(shows)
    return [show for show in shows if needle in show.title.lower()]


def filter_by_genre(shows: Sequence[ShowPreview], genre_id: int | None) -> list[ShowPreview]:
    if genre_id is None:
        return list(shows)
    return [show for show in shows if genre_id in show.genre_ids]


def sort_shows(shows: Sequence[ShowPreview], order: SortOrder = SortOrder.NEWEST) -> list[ShowPreview]:
    """Return a sorted copy of ``shows``."""
    order = SortOrder(order)
    if order is SortOrder.NEWEST:
        return sorted(shows, key=lambda show: show.updated, reverse=True)
    if order is SortOrder.OLDEST:
        return sorted(shows, key=lambda show: show.updated)
    if order is SortOrder.TITLE_ASC:
        return sorted(shows, key=lambda show: show.title.casefold())
    return sorted(shows, key=lambda show: show.title.casefold(), reverse=True)


def paginate(shows: Sequence[ShowPreview], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """Slice one 1-based page out of ``shows``.

    Pages beyond the end clamp to the last page; pages below 1 clamp to 1.

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total_items = len(shows)
    total_pages = max(1, math.ceil(total_items / page_size))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size
    return Page(
        items=list(shows[start : start + page_size]),
        page=page,
        total_pages=total_pages,
        total_items=total_items,
    )


def apply_listing(shows: Sequence[ShowPreview], options: ListingOptions) -> Page:
    """Search, filter, sort and paginate in that order."""
    matched = search_shows(shows, options.query)
    matched = filter_by_genre(matched, options.genre_id)
    matched = sort_shows(matched, options.sort)
    return paginate(matched, options.page, options.page_size)
