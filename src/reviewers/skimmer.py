"""Skimmer reviewer — skips everything, never records an opinion."""

from __future__ import annotations

from src.engine.navigation import Command
from src.envs.bill_feed_env import BillFeedEnv
from src.reviewers.base_reviewer import ReviewerPolicy, action_for


class SkimmerReviewer(ReviewerPolicy):
    """Always skip. Lower-bound reference for engagement."""

    @property
    def name(self) -> str:
        return "Skimmer"

    def choose(self, env: BillFeedEnv) -> int:
        return action_for(Command.SKIP)
