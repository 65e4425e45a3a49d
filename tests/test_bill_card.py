"""Unit tests for BillCardEngine view models and transition effects."""

import pytest

from src.engine.bill_card import (
    ACCENT_DEFAULT,
    ACCENT_DISLIKE,
    ACCENT_LIKE,
    BillCardEngine,
    TransitionEffect,
)
from src.engine.bill_model import Bill, BillCollection, BillStats
from src.engine.errors import EmptyCollectionError, InvalidConfigurationError
from src.engine.navigation import Command, NavigationPolicy
from src.engine.status import Category


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def demo_bills() -> list[Bill]:
    return [
        Bill(
            jurisdiction="California",
            title="Clean Energy Act 2025",
            summary="Require utilities to generate 70% clean energy by 2030.",
            key_issues=("Renewable Energy", "Environment"),
            stats=BillStats(like=120, dislike=10, watch=50),
            status="Senate Floor",
            vote_date="10/01/25",
        ),
        Bill(
            jurisdiction="U.S. Federal",
            title="One Big Beautiful Bill Act (H.R.1)",
            summary="Cuts Medicaid/SNAP, changes tax rules, lifts energy restrictions.",
            key_issues=("Healthcare", "Taxes", "Energy policy", "Social programs"),
            stats=BillStats(like=80, dislike=200, watch=150),
            status="In Committee",
            vote_date="09/22/25",
        ),
    ]


@pytest.fixture
def engine(demo_bills) -> BillCardEngine:
    return BillCardEngine(demo_bills, quota=20, policy=NavigationPolicy.WRAP)


# ── Concrete walkthrough ─────────────────────────────────────────────────

class TestDemoScenario:

    def test_initial_view(self, engine):
        vm = engine.view_model()
        assert vm.position == 0
        assert vm.percent == pytest.approx(5.0)
        assert vm.category is Category.URGENT
        assert vm.advisory_message
        assert vm.is_urgent
        assert vm.last_command is None
        assert vm.last_direction == 0
        assert vm.progress_label == "Daily Progress: 1 / 20 Bills"

    def test_like_twice_wraps(self, engine):
        first = engine.like().view
        assert first.position == 1
        assert first.percent == pytest.approx(10.0)
        assert first.category is Category.INFORMATIONAL
        assert not first.is_urgent

        second = engine.like().view
        assert second.position == 0
        assert second.percent == pytest.approx(5.0)

    def test_advisories_distinct(self, engine):
        urgent = engine.view_model().advisory_message
        info = engine.like().view.advisory_message
        assert urgent and info
        assert urgent != info

    def test_skip_equals_like_under_wrap(self, demo_bills):
        a = BillCardEngine(demo_bills, quota=20, policy="wrap")
        b = BillCardEngine(demo_bills, quota=20, policy="wrap")
        assert a.skip().view.position == b.like().view.position


class TestClampEngine:

    def test_scroll_view_saturates(self, demo_bills):
        engine = BillCardEngine(demo_bills, quota=len(demo_bills), policy="clamp")
        assert engine.dislike().view.position == 0
        assert engine.like().view.position == 1
        vm = engine.like().view
        assert vm.position == 1
        assert vm.percent == pytest.approx(100.0)

    def test_advance_with_explicit_direction(self, demo_bills):
        engine = BillCardEngine(demo_bills, policy="clamp")
        update = engine.advance(1, Command.LIKE)
        assert update.view.position == 1
        assert update.view.last_direction == 1


class TestCategoryNone:

    def test_no_advisory(self):
        bill = Bill("Iowa", "Broadband Act", "Grants.", status="Introduced")
        vm = BillCardEngine([bill]).view_model()
        assert vm.category is Category.NONE
        assert vm.advisory_message == ""
        assert not vm.has_advisory


# ── Transition effects ───────────────────────────────────────────────────

class TestTransitionEffect:

    def test_like_effect(self, engine):
        effect = engine.like().effect
        assert effect.command is Command.LIKE
        assert effect.exit_motion == "swipe_right"
        assert effect.accent == ACCENT_LIKE
        assert effect.enter_offset == 100

    def test_dislike_effect(self, engine):
        effect = engine.dislike().effect
        assert effect.exit_motion == "swipe_left"
        assert effect.accent == ACCENT_DISLIKE
        assert effect.enter_offset == -100

    @pytest.mark.parametrize("command, motion", [
        (Command.SKIP, "drop_down"),
        (Command.BACK, "lift_up"),
    ])
    def test_neutral_effects(self, engine, command, motion):
        effect = engine.apply(command).effect
        assert effect.exit_motion == motion
        assert effect.accent == ACCENT_DEFAULT
        assert effect.enter_offset == 0

    def test_no_command_fades(self):
        effect = TransitionEffect.for_command(None, 0)
        assert effect.exit_motion == "fade"


# ── Errors & collection ──────────────────────────────────────────────────

class TestErrors:

    def test_empty_collection_view(self):
        engine = BillCardEngine([])
        with pytest.raises(EmptyCollectionError):
            engine.view_model()

    def test_empty_collection_navigation(self):
        engine = BillCardEngine(BillCollection())
        with pytest.raises(EmptyCollectionError):
            engine.like()

    def test_bad_quota(self, demo_bills):
        with pytest.raises(InvalidConfigurationError):
            BillCardEngine(demo_bills, quota=0)

    def test_negative_stats_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            BillStats(like=-1)

    def test_unknown_command_keeps_position(self, engine):
        with pytest.raises(ValueError):
            engine.advance(1, "bogus")
        vm = engine.view_model()
        assert vm.position == 0
        assert vm.last_command is None

    def test_reset(self, engine):
        engine.like()
        vm = engine.reset()
        assert vm.position == 0
        assert vm.last_command is None


class TestBillCollection:

    def test_categories_precomputed(self, demo_bills):
        coll = BillCollection(demo_bills)
        assert coll.category_at(0) is Category.URGENT
        assert coll.category_at(1) is Category.INFORMATIONAL
        assert coll.count(Category.URGENT) == 1
        assert len(coll) == 2
        assert list(coll) == demo_bills

    def test_empty_indexing(self):
        coll = BillCollection()
        assert coll.is_empty
        with pytest.raises(EmptyCollectionError):
            coll[0]
        with pytest.raises(EmptyCollectionError):
            coll.category_at(0)

    def test_key_issues_list_frozen_to_tuple(self):
        bill = Bill("Iowa", "Broadband Act", "Grants.", key_issues=["Broadband", "Rural"])
        assert bill.key_issues == ("Broadband", "Rural")
        assert hash(bill) == hash(Bill("Iowa", "Broadband Act", "Grants.", key_issues=("Broadband", "Rural")))

    def test_like_share(self):
        assert BillStats(like=3, dislike=1).like_share == pytest.approx(0.75)
        assert BillStats().like_share == pytest.approx(0.5)
