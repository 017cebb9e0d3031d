"""Loading/error/data state container shared by the views."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ViewStatus(str, Enum):
    """Lifecycle of a view's data."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class ViewState(Generic[T]):
    """Mutable state owned by a single view.

    Transitions: IDLE -> LOADING -> LOADED | FAILED, re-entering LOADING
    whenever a new request starts.
    """

    status: ViewStatus = ViewStatus.IDLE
    data: T | None = None
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is ViewStatus.LOADED

    @property
    def is_failed(self) -> bool:
        return self.status is ViewStatus.FAILED

    def begin(self) -> None:
        self.status = ViewStatus.LOADING
        self.data = None
        self.error = None

    def resolve(self, data: T) -> None:
        self.status = ViewStatus.LOADED
        self.data = data
        self.error = None

    def fail(self, message: str) -> None:
        self.status = ViewStatus.FAILED
        self.data = None
        self.error = message

    def reset(self) -> None:
        self.status = ViewStatus.IDLE
        self.data = None
        self.error = None
