"""Urgent-focus reviewer — weighs in only where an advisory is shown."""

from __future__ import annotations

from src.engine.navigation import Command
from src.engine.status import Category
from src.envs.bill_feed_env import BillFeedEnv
from src.reviewers.base_reviewer import ReviewerPolicy, action_for


class UrgentFocusReviewer(ReviewerPolicy):
    """Record an opinion on urgent and in-committee bills, skip the rest.

    The opinion follows the crowd: like when the bill has more likes than
    dislikes, dislike otherwise.
    """

    @property
    def name(self) -> str:
        return "UrgentFocus"

    def choose(self, env: BillFeedEnv) -> int:
        view = env.view
        if view.category is Category.NONE:
            return action_for(Command.SKIP)

        stats = view.bill.stats
        if stats.like > stats.dislike:
            return action_for(Command.LIKE)
        return action_for(Command.DISLIKE)
