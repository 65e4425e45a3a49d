"""Abstract base class for scripted reviewer policies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.engine.navigation import Command
from src.engine.status import Category
from src.envs.bill_feed_env import ACTIONS, BillFeedEnv


def action_for(command: Command) -> int:
    """Index of ``command`` in the environment's action space."""
    return ACTIONS.index(command)


class ReviewerPolicy(ABC):
    """Interface for scripted reviewers working through a bill feed.

    Subclasses implement `choose()` which returns an action index for the
    bill currently shown by the environment.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this reviewer."""
        ...

    @abstractmethod
    def choose(self, env: BillFeedEnv) -> int:
        """Decide which command to issue on the current bill.

        Args:
            env: The environment instance (read env.view for the current card).

        Returns:
            Action index compatible with env.action_space.
        """
        ...

    def run_session(
        self,
        env: BillFeedEnv,
        seed: int | None = None,
    ) -> dict:
        """Run a full session using this reviewer.

        Args:
            env: Environment instance.
            seed: Reset seed.

        Returns:
            Dict with session metrics: steps, reviewed, opinions, urgent_seen,
            urgent_opinions, opinions_by_category, quota_met, final_percent,
            total_reward, commands.
        """
        obs, info = env.reset(seed=seed)

        total_reward = 0.0
        urgent_seen = 0

        terminated = truncated = False
        while not (terminated or truncated):
            action = self.choose(env)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            if info["acted_on_category"] == Category.URGENT.value:
                urgent_seen += 1

        counts = info["counts"]
        opinions = counts[Command.LIKE.value] + counts[Command.DISLIKE.value]

        return {
            "reviewer": self.name,
            "steps": info["step"],
            "reviewed": info["reviewed"],
            "opinions": opinions,
            "urgent_seen": urgent_seen,
            "urgent_opinions": info["opinions_by_category"][Category.URGENT.value],
            "quota_met": bool(info.get("quota_met", False)),
            "final_percent": info["percent"],
            "total_reward": total_reward,
            "commands": counts,
            "opinions_by_category": dict(info["opinions_by_category"]),
        }
