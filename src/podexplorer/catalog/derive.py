"""Display-ready aggregates computed from a ShowDetail.

All functions are pure and accept ``None`` for a detail that has not
loaded yet.
"""

from collections.abc import Sequence

from podexplorer.catalog.models import Episode, Genre, GenreRef, Season, ShowDetail

EPISODE_SUMMARY_LENGTH = 150
ELLIPSIS = "..."


def unknown_genre_label(genre_id: GenreRef) -> str:
    return f"Unknown ({genre_id})"


def label_genre_ids(genre_ids: Sequence[GenreRef], reference_genres: Sequence[Genre]) -> list[str]:
    """Map genre ids to reference titles, keeping order and duplicates.

    Ids without a matching reference genre become ``"Unknown (<id>)"``.
    """
    titles: dict[int, str] = {}
    for genre in reference_genres:
        titles.setdefault(genre.id, genre.title)

    labels = []
    for genre_id in genre_ids:
        title = titles.get(genre_id) if isinstance(genre_id, int) else None
        labels.append(title if title is not None else unknown_genre_label(genre_id))
    return labels


def genre_labels(detail: ShowDetail | None, reference_genres: Sequence[Genre]) -> list[str]:
    """Genre titles for a show, in ``detail.genre_ids`` order."""
    if detail is None:
        return []
    return label_genre_ids(detail.genre_ids, reference_genres)


def total_episode_count(detail: ShowDetail | None) -> int:
    """Sum of episodes across all seasons."""
    if detail is None:
        return 0
    return sum(len(season.episodes) for season in detail.seasons)


def selected_season(detail: ShowDetail | None, index: int) -> Season | None:
    """Return the season at ``index``, or None when out of range."""
    if detail is None or not 0 <= index < len(detail.seasons):
        return None
    return detail.seasons[index]


def episode_summary(episode: Episode) -> str:
    """First 150 characters of the description followed by "...".

    The ellipsis is appended even when the description is shorter than
    the limit.
    """
    return episode.description[:EPISODE_SUMMARY_LENGTH] + ELLIPSIS
