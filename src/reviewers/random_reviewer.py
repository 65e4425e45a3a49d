"""Random reviewer — uniformly random commands for lower-bound reference."""

from __future__ import annotations

import numpy as np

from src.envs.bill_feed_env import BillFeedEnv
from src.reviewers.base_reviewer import ReviewerPolicy


class RandomReviewer(ReviewerPolicy):
    """Pick back, dislike, skip or like uniformly at random."""

    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        return "Random"

    def choose(self, env: BillFeedEnv) -> int:
        return int(self._rng.integers(env.action_space.n))
