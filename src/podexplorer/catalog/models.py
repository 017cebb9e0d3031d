"""Data models for the remote podcast catalog.

Field aliases map the catalog API's JSON keys onto descriptive Python
names, so ``ShowPreview.model_validate(payload)`` accepts the raw API
response while code reads ``preview.season_count`` instead of
``preview.seasons``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

_API_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

# Reference genres use integer ids; the detail endpoint may also send titles.
GenreRef = int | str


class Genre(BaseModel):
    """Entry in the static genre reference list."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str


class ShowPreview(BaseModel):
    """Summary of a show as returned by the catalog listing."""

    model_config = _API_MODEL_CONFIG

    id: str
    title: str
    image: str
    season_count: int = Field(alias="seasons")
    updated: datetime
    genre_ids: list[GenreRef] = Field(default_factory=list, alias="genres")
    description: str = ""


class Episode(BaseModel):
    """A single episode inside a season."""

    model_config = _API_MODEL_CONFIG

    title: str
    description: str = ""
    audio_file: str = Field(alias="file")
    episode_number: int | None = Field(default=None, alias="episode")


class Season(BaseModel):
    """A season of a show with its ordered episodes."""

    model_config = _API_MODEL_CONFIG

    season_number: int = Field(alias="season")
    title: str
    image: str = ""
    episodes: list[Episode] = Field(default_factory=list)

    @property
    def episode_count(self) -> int:
        return len(self.episodes)


class ShowDetail(BaseModel):
    """Full record for one show, including seasons and episodes."""

    model_config = _API_MODEL_CONFIG

    id: str
    title: str
    description: str = ""
    image: str = ""
    updated: datetime
    genre_ids: list[GenreRef] = Field(default_factory=list, alias="genres")
    seasons: list[Season] = Field(default_factory=list)

    @property
    def season_count(self) -> int:
        return len(self.seasons)
