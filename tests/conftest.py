"""Shared fixtures for Podexplorer tests."""

from typing import Any
from unittest.mock import MagicMock, Mock

import pytest

from podexplorer.catalog.models import ShowDetail, ShowPreview


def make_detail_payload(
    show_id: str = "10716",
    title: str = "Something Was Wrong",
    genres: list | None = None,
    episodes_per_season: tuple[int, ...] = (2, 1),
) -> dict[str, Any]:
    """Build a show-detail payload in the catalog API's JSON shape."""
    seasons = []
    for number, count in enumerate(episodes_per_season, 1):
        seasons.append(
            {
                "season": number,
                "title": f"Season {number}",
                "image": f"https://example.com/s{number}.jpg",
                "episodes": [
                    {
                        "title": f"Episode {i}",
                        "description": f"Description of episode {i} in season {number}",
                        "episode": i,
                        "file": f"https://example.com/audio/{number}-{i}.mp3",
                    }
                    for i in range(1, count + 1)
                ],
            }
        )
    return {
        "id": show_id,
        "title": title,
        "description": "A show about things that went wrong.",
        "image": "https://example.com/show.jpg",
        "updated": "2022-11-03T07:00:00.000Z",
        "genres": genres if genres is not None else [1, 2],
        "seasons": seasons,
    }


@pytest.fixture
def preview_payload() -> list[dict[str, Any]]:
    """Catalog listing payload with three shows."""
    return [
        {
            "id": "10716",
            "title": "Something Was Wrong",
            "description": "An award-winning docuseries.",
            "seasons": 14,
            "image": "https://example.com/a.jpg",
            "genres": [1, 2],
            "updated": "2022-11-03T07:00:00.000Z",
        },
        {
            "id": "5675",
            "title": "American History Tellers",
            "description": "History told by the people who lived it.",
            "seasons": 48,
            "image": "https://example.com/b.jpg",
            "genres": [3],
            "updated": "2023-01-10T12:00:00.000Z",
        },
        {
            "id": "9177",
            "title": "Comedy Bang Bang",
            "description": "Comedy.",
            "seasons": 3,
            "image": "https://example.com/c.jpg",
            "genres": [4, 5],
            "updated": "2021-06-01T08:30:00.000Z",
        },
    ]


@pytest.fixture
def previews(preview_payload: list[dict[str, Any]]) -> list[ShowPreview]:
    return [ShowPreview.model_validate(item) for item in preview_payload]


@pytest.fixture
def detail_payload() -> dict[str, Any]:
    return make_detail_payload()


@pytest.fixture
def detail(detail_payload: dict[str, Any]) -> ShowDetail:
    return ShowDetail.model_validate(detail_payload)


@pytest.fixture
def make_response():
    """Factory for mocked ``requests.Response`` objects."""

    def _make(status_code: int = 200, payload: Any = None) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.json = Mock(return_value=payload)
        return response

    return _make


@pytest.fixture
def mock_session() -> MagicMock:
    """Session stand-in; tests set ``get.return_value`` or ``get.side_effect``."""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def make_detail():
    """Factory for ShowDetail instances; accepts make_detail_payload kwargs."""

    def _make(**kwargs: Any) -> ShowDetail:
        return ShowDetail.model_validate(make_detail_payload(**kwargs))

    return _make
