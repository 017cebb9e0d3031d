"""Static genre reference data.

Genres are not served by the catalog API. The built-in list can be
replaced by a YAML file holding either a list of ``{id, title}`` mappings
or a mapping with a top-level ``genres`` key.
"""

from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from podexplorer.catalog.models import Genre
from podexplorer.utils.errors import GenreDataError

DEFAULT_GENRES: tuple[Genre, ...] = (
    Genre(id=1, title="Personal Growth"),
    Genre(id=2, title="Investigative Journalism"),
    Genre(id=3, title="History"),
    Genre(id=4, title="Comedy"),
    Genre(id=5, title="Entertainment"),
    Genre(id=6, title="Business"),
    Genre(id=7, title="Fiction"),
    Genre(id=8, title="News"),
    Genre(id=9, title="Kids and Family"),
)

_GENRE_LIST = TypeAdapter(list[Genre])


def load_genres(path: Path | None = None) -> list[Genre]:
    """Load the genre reference list.

    Args:
        path: Optional YAML override. Defaults to the built-in list.

    Returns:
        Genres in file order

    Raises:
        GenreDataError: If the file is missing or malformed
    """
    if path is None:
        return list(DEFAULT_GENRES)

    path = Path(path).expanduser()
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or []
    except (OSError, yaml.YAMLError) as e:
        raise GenreDataError(f"Cannot read genres from {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("genres", [])

    try:
        return _GENRE_LIST.validate_python(data)
    except ValidationError as e:
        raise GenreDataError(f"Invalid genre data in {path}: {e}") from e

