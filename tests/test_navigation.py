"""Unit tests for NavigationController — WRAP and CLAMP policies."""

import pytest

from src.engine.errors import EmptyCollectionError, InvalidConfigurationError
from src.engine.navigation import (
    Command,
    NavigationController,
    NavigationPolicy,
    zero_direction_advances,
)


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def wrap5() -> NavigationController:
    return NavigationController(5, policy=NavigationPolicy.WRAP)


@pytest.fixture
def clamp5() -> NavigationController:
    return NavigationController(5, policy=NavigationPolicy.CLAMP)


# ── WRAP ─────────────────────────────────────────────────────────────────

class TestWrap:

    @pytest.mark.parametrize("n", [1, 2, 3, 7])
    @pytest.mark.parametrize("start", [0, 1, 2])
    def test_round_trip(self, n, start):
        """n likes from any position return to that position."""
        nav = NavigationController(n, policy="wrap")
        nav.state.position = start % n
        origin = nav.position
        for _ in range(n):
            nav.advance(1, Command.LIKE)
        assert nav.position == origin

    def test_dislike_wraps_to_end(self, wrap5):
        assert wrap5.advance(-1, Command.DISLIKE) == 4

    def test_skip_equals_like(self):
        skip = NavigationController(4, policy="wrap")
        like = NavigationController(4, policy="wrap")
        for _ in range(6):
            skip.advance(0, Command.SKIP)
            like.advance(1, Command.LIKE)
            assert skip.position == like.position

    def test_zero_direction_rule(self):
        assert zero_direction_advances(0) == 1
        assert zero_direction_advances(1) == 1
        assert zero_direction_advances(-1) == -1

    def test_back_defaults_to_forward(self, wrap5):
        """Back carries direction 0, so the card view moves forward."""
        assert wrap5.apply(Command.BACK) == 1

    def test_back_direction_configurable(self):
        nav = NavigationController(5, policy="wrap", back_direction=-1)
        assert nav.apply(Command.BACK) == 4


# ── CLAMP ────────────────────────────────────────────────────────────────

class TestClamp:

    def test_dislike_saturates_at_start(self, clamp5):
        for _ in range(10):
            clamp5.advance(-1, Command.DISLIKE)
            assert clamp5.position == 0

    def test_like_saturates_at_end(self, clamp5):
        for _ in range(10):
            clamp5.advance(1, Command.LIKE)
        assert clamp5.position == 4
        clamp5.advance(1, Command.LIKE)
        assert clamp5.position == 4

    def test_skip_is_no_op(self, clamp5):
        clamp5.advance(1, Command.LIKE)
        assert clamp5.advance(0, Command.SKIP) == 1

    def test_single_bill(self):
        nav = NavigationController(1, policy="clamp")
        for direction, command in [(1, Command.LIKE), (-1, Command.DISLIKE), (0, Command.SKIP)]:
            assert nav.advance(direction, command) == 0


# ── Side effects & errors ────────────────────────────────────────────────

class TestStateAndErrors:

    def test_initial_state(self, wrap5):
        assert wrap5.position == 0
        assert wrap5.state.last_command is None
        assert wrap5.state.last_direction == 0

    def test_records_requested_direction(self, wrap5):
        wrap5.advance(0, Command.SKIP)
        assert wrap5.state.last_command is Command.SKIP
        assert wrap5.state.last_direction == 0  # requested, not effective

    def test_last_command_wins(self, clamp5):
        clamp5.apply(Command.LIKE)
        clamp5.apply(Command.DISLIKE)
        clamp5.apply("like")
        assert clamp5.state.last_command is Command.LIKE
        assert clamp5.state.last_direction == 1
        assert clamp5.position == 1

    @pytest.mark.parametrize("policy", ["wrap", "clamp"])
    def test_empty_collection(self, policy):
        nav = NavigationController(0, policy=policy)
        with pytest.raises(EmptyCollectionError):
            nav.advance(1, Command.LIKE)
        with pytest.raises(EmptyCollectionError):
            nav.apply(Command.SKIP)

    @pytest.mark.parametrize("direction", [2, -2, 5])
    def test_direction_out_of_domain(self, wrap5, direction):
        with pytest.raises(ValueError):
            wrap5.advance(direction, Command.LIKE)
        assert wrap5.position == 0

    @pytest.mark.parametrize("policy", ["wrap", "clamp"])
    def test_unknown_command_leaves_state_untouched(self, policy):
        nav = NavigationController(5, policy=policy)
        nav.apply(Command.LIKE)
        with pytest.raises(ValueError):
            nav.advance(1, "bogus")
        assert nav.position == 1
        assert nav.state.last_command is Command.LIKE
        assert nav.state.last_direction == 1

    def test_unknown_policy(self):
        with pytest.raises(InvalidConfigurationError):
            NavigationController(3, policy="bounce")

    def test_bad_back_direction(self):
        with pytest.raises(InvalidConfigurationError):
            NavigationController(3, back_direction=3)

    def test_policy_parse_is_case_insensitive(self):
        assert NavigationPolicy.parse(" CLAMP ") is NavigationPolicy.CLAMP

    def test_reset(self, wrap5):
        wrap5.apply(Command.LIKE)
        wrap5.reset()
        assert wrap5.position == 0
        assert wrap5.state.last_command is None
