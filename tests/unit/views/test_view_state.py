"""Tests for the ViewState container."""

from podexplorer.views.state import ViewState, ViewStatus


class TestViewState:
    """Tests for ViewState transitions."""

    def test_starts_idle(self) -> None:
        state = ViewState()
        assert state.status is ViewStatus.IDLE
        assert state.data is None
        assert state.error is None

    def test_begin_then_resolve(self) -> None:
        state: ViewState[list[int]] = ViewState()
        state.begin()
        assert state.is_loading

        state.resolve([1, 2])
        assert state.is_loaded
        assert state.data == [1, 2]

    def test_fail_clears_data(self) -> None:
        state: ViewState[list[int]] = ViewState()
        state.resolve([1])
        state.fail("Show not found.")
        assert state.is_failed
        assert state.data is None
        assert state.error == "Show not found."

    def test_begin_is_reenterable(self) -> None:
        """A new request clears the previous outcome."""
        state: ViewState[str] = ViewState()
        state.fail("boom")
        state.begin()
        assert state.is_loading
        assert state.error is None

    def test_reset(self) -> None:
        state: ViewState[str] = ViewState()
        state.resolve("x")
        state.reset()
        assert state.status is ViewStatus.IDLE
        assert state.data is None
