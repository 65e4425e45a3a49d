"""Environment wrappers for reviewer simulation."""

from __future__ import annotations

from typing import Any

import gymnasium as gym
import numpy as np

from src.envs.bill_feed_env import BillFeedEnv
from src.envs.collection_sampler import CollectionSampler
from src.envs.reward import RewardConfig
from src.utils.config import SessionConfig


class RandomFeedWrapper(gym.Wrapper):
    """Wraps BillFeedEnv to sample a new bill feed on each reset.

    Lets a reviewer face many collections (sizes, status mixes, quotas)
    instead of one fixed feed. Observation and action space match the inner env.
    """

    def __init__(
        self,
        env: BillFeedEnv,
        sampler: CollectionSampler,
        reward_cfg: RewardConfig | None = None,
    ):
        super().__init__(env)
        self.sampler = sampler
        self.reward_cfg = reward_cfg or env.reward_cfg

    def reset(
        self,
        *,
        seed: int | None = None,
        options: dict[str, Any] | None = None,
    ):
        rng = np.random.default_rng(seed)
        feed: SessionConfig = self.sampler.sample(rng)
        feed.reward = self.reward_cfg
        return self.env.reset(seed=seed, options={"config": feed})
