"""Enthusiast reviewer — likes every bill it is shown."""

from __future__ import annotations

from src.engine.navigation import Command
from src.envs.bill_feed_env import BillFeedEnv
from src.reviewers.base_reviewer import ReviewerPolicy, action_for


class EnthusiastReviewer(ReviewerPolicy):
    """Always like. Upper bound on opinions per step."""

    @property
    def name(self) -> str:
        return "Enthusiast"

    def choose(self, env: BillFeedEnv) -> int:
        return action_for(Command.LIKE)
