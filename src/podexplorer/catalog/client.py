"""HTTP client for the remote podcast catalog API.

Both fetch operations return a :class:`FetchResult` instead of raising, so
callers apply the outcome to their own view state. The blocking ``requests``
call runs in the default executor; the event loop only suspends at network
I/O.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import partial
from typing import Generic, TypeVar
from urllib.parse import quote

import requests
from pydantic import TypeAdapter

from podexplorer.catalog.models import ShowDetail, ShowPreview
from podexplorer.utils.errors import (
    CatalogError,
    HttpError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://podcast-api.netlify.app"

T = TypeVar("T")

_PREVIEW_LIST = TypeAdapter(list[ShowPreview])


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a single catalog request: either data or an error."""

    data: T | None = None
    error: CatalogError | None = None

    @classmethod
    def success(cls, data: T) -> "FetchResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: CatalogError) -> "FetchResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Display message of the error, if any."""
        return self.error.message if self.error is not None else None


def _is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


class CatalogClient:
    """Reads show previews and show details from the catalog API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Catalog API root, without trailing slash
            timeout: Request timeout in seconds (None uses the transport default)
            session: Optional pre-configured session (mainly for tests)
        """
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def catalog_url(self) -> str:
        return f"{self.base_url}/shows"

    def show_url(self, show_id: str) -> str:
        return f"{self.base_url}/id/{quote(str(show_id), safe='')}"

    async def _get(self, url: str) -> requests.Response:
        """Issue a GET without blocking the event loop."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None, partial(self.session.get, url, timeout=self.timeout)
        )

    async def fetch_catalog(self) -> FetchResult[list[ShowPreview]]:
        """Fetch the full list of show previews.

        Returns:
            Success with previews in response order, or failure with
            HttpError (non-2xx status) / TransportError (network or parse error)
        """
        url = self.catalog_url()
        logger.debug("Fetching catalog from %s", url)
        try:
            response = await self._get(url)
            if not _is_success(response.status_code):
                raise HttpError(response.status_code)
            previews = _PREVIEW_LIST.validate_python(response.json())
        except CatalogError as e:
            logger.error("Failed to fetch podcasts: %s", e)
            return FetchResult.failure(e)
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch podcasts: %s", e)
            return FetchResult.failure(TransportError(str(e)))

        logger.info("Fetched %d shows", len(previews))
        return FetchResult.success(previews)

    async def fetch_show_detail(self, show_id: str) -> FetchResult[ShowDetail]:
        """Fetch the full record for one show.

        Args:
            show_id: Catalog identifier of the show

        Returns:
            Success with the parsed ShowDetail, or failure with NotFoundError
            (404), HttpError (other non-2xx) or TransportError
        """
        url = self.show_url(show_id)
        logger.debug("Fetching show %s from %s", show_id, url)
        try:
            response = await self._get(url)
            if not _is_success(response.status_code):
                if response.status_code == 404:
                    raise NotFoundError()
                raise HttpError(
                    response.status_code,
                    f"Failed to fetch show details: {response.status_code}",
                )
            detail = ShowDetail.model_validate(response.json())
        except CatalogError as e:
            logger.warning("Failed to fetch show %s details: %s", show_id, e)
            return FetchResult.failure(e)
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch show %s details: %s", show_id, e)
            return FetchResult.failure(TransportError(str(e)))

        return FetchResult.success(detail)
