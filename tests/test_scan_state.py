"""
Tests for the per-card scan state machine.
"""
from src.constants import CARD_MARKET, CARD_NEWS
from src.scan_state import CardState, ScanCoordinator, ScanEvent, transition


class TestTransition:

    def test_start_enters_loading_and_clears_error(self):
        state = CardState(phase="error", data=["old"], error="boom", generation=1)
        new_state = transition(state, ScanEvent("start", 2))
        assert new_state.loading
        assert new_state.error is None
        assert new_state.data == ["old"]
        assert new_state.generation == 2

    def test_success_stores_data(self):
        state = transition(CardState(), ScanEvent("start", 1))
        new_state = transition(state, ScanEvent("success", 1, data=[1, 2]))
        assert new_state.phase == "success"
        assert new_state.data == [1, 2]

    def test_failure_keeps_previous_data(self):
        state = CardState(phase="loading", data=["old"], generation=3)
        new_state = transition(state, ScanEvent("failure", 3, error="timeout"))
        assert new_state.phase == "error"
        assert new_state.error == "timeout"
        assert new_state.data == ["old"]

    def test_stale_completion_ignored(self):
        state = CardState(phase="loading", data=None, generation=2)
        assert transition(state, ScanEvent("success", 1, data=["late"])) is state
        assert transition(state, ScanEvent("failure", 1, error="late")) is state


class TestScanCoordinator:

    def test_initial_state_is_idle(self):
        coordinator = ScanCoordinator()
        assert coordinator.state(CARD_MARKET) == CardState()
        assert coordinator.data(CARD_MARKET) is None
        assert not coordinator.is_any_loading()

    def test_begin_issues_increasing_tokens(self):
        coordinator = ScanCoordinator()
        first = coordinator.begin(CARD_MARKET)
        second = coordinator.begin(CARD_MARKET)
        assert second > first
        assert coordinator.is_any_loading()

    def test_latest_request_wins(self):
        coordinator = ScanCoordinator()
        first = coordinator.begin(CARD_NEWS)
        second = coordinator.begin(CARD_NEWS)

        assert coordinator.succeed(CARD_NEWS, second, "new") is True
        assert coordinator.succeed(CARD_NEWS, first, "old") is False
        assert coordinator.data(CARD_NEWS) == "new"
        assert not coordinator.state(CARD_NEWS).loading

    def test_cards_are_independent(self):
        coordinator = ScanCoordinator()
        token = coordinator.begin(CARD_MARKET)
        coordinator.begin(CARD_NEWS)
        coordinator.succeed(CARD_MARKET, token, "market")
        assert coordinator.state(CARD_MARKET).phase == "success"
        assert coordinator.state(CARD_NEWS).loading

    def test_state_lives_in_store(self):
        store = {}
        coordinator = ScanCoordinator(store)
        token = coordinator.begin(CARD_MARKET)
        coordinator.fail(CARD_MARKET, token, "boom")
        assert ScanCoordinator(store).state(CARD_MARKET).error == "boom"

    def test_global_flags(self):
        store = {}
        coordinator = ScanCoordinator(store)
        assert coordinator.global_loading is False
        assert coordinator.global_error is None
        coordinator.global_loading = True
        coordinator.global_error = "failed"
        assert store["global_loading"] is True
        assert store["global_error"] == "failed"
