"""BillFeedEnv — Gymnasium environment for a daily bill review session.

A reviewer is shown one bill at a time and answers with back, dislike, skip
or like. The session ends once the daily quota of bills has been handled.

Action space:
  - Discrete(4): 0 back, 1 dislike, 2 skip, 3 like

Observation space:
  - Box(7,): position, progress, category one-hot (3), like share, watch share,
    all normalized to [0,1]
"""

from __future__ import annotations

import textwrap
from typing import Any

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from src.engine.bill_card import BillCardEngine, BillCardViewModel, TransitionEffect
from src.engine.navigation import Command
from src.engine.status import Category
from src.envs.collection_sampler import CollectionSampler
from src.envs.reward import compute_step_reward, compute_terminal_reward
from src.utils.config import SessionConfig

ACTIONS: tuple[Command, ...] = (
    Command.BACK,
    Command.DISLIKE,
    Command.SKIP,
    Command.LIKE,
)

_CATEGORY_ORDER = (Category.URGENT, Category.INFORMATIONAL, Category.NONE)


class BillFeedEnv(gym.Env):
    """Gymnasium environment simulating one reviewer working through a bill feed.

    Each step is one command. Likes, dislikes and skips count toward the daily
    quota; back does not.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 1}

    def __init__(
        self,
        config: SessionConfig | None = None,
        render_mode: str | None = None,
    ):
        """Initialize environment from a typed SessionConfig.

        Args:
            config: Session configuration with at least one bill. Defaults to the
                "demo" preset.
            render_mode: "human" for printed output, "ansi" for string return.
        """
        super().__init__()

        self.config = config or CollectionSampler.preset("demo")
        self.render_mode = render_mode
        self.reward_cfg = self.config.reward
        self.max_steps = self.config.max_steps
        self.quota = self.config.quota

        # Fails fast with EmptyCollectionError on an empty feed
        self.engine = self._build_engine(self.config)
        self.engine.view_model()

        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(7,), dtype=np.float32
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

        # ── State variables (set in reset) ────────────────────────────────
        self.steps: int = 0
        self.reviewed: int = 0
        self.counts: dict[str, int] = {c.value: 0 for c in Command}
        self.opinions_by_category: dict[str, int] = {c.value: 0 for c in Category}
        self.last_effect: TransitionEffect | None = None
        self._last_step_info: dict[str, Any] = {}

    @staticmethod
    def _build_engine(config: SessionConfig) -> BillCardEngine:
        return BillCardEngine(
            config.collection(),
            quota=config.quota,
            policy=config.navigation_policy,
            back_direction=config.back_direction,
        )

    @property
    def num_bills(self) -> int:
        return len(self.engine.bills)

    @property
    def view(self) -> BillCardViewModel:
        return self.engine.view_model()

    # ──────────────────────────────────────────────────────────────────────
    # Gymnasium API
    # ──────────────────────────────────────────────────────────────────────

    def reset(
        self,
        seed: int | None = None,
        options: dict[str, Any] | None = None,
    ) -> tuple[np.ndarray, dict[str, Any]]:
        """Start a fresh session at the first bill.

        Args:
            seed: RNG seed for reproducibility.
            options: Optional dict; can contain 'config' to swap in another SessionConfig.

        Returns:
            (observation, info) tuple.
        """
        super().reset(seed=seed)

        if options and "config" in options:
            cfg: SessionConfig = options["config"]
            self.config = cfg
            self.reward_cfg = cfg.reward
            self.max_steps = cfg.max_steps
            self.quota = cfg.quota
            self.engine = self._build_engine(cfg)
        else:
            self.engine.reset()

        self.steps = 0
        self.reviewed = 0
        self.counts = {c.value: 0 for c in Command}
        self.opinions_by_category = {c.value: 0 for c in Category}
        self.last_effect = None
        self._last_step_info = self._build_info()
        return self._get_obs(), self._last_step_info

    def step(
        self, action: int
    ) -> tuple[np.ndarray, float, bool, bool, dict[str, Any]]:
        """Apply one command to the feed.

        Args:
            action: Index into ACTIONS.

        Returns:
            (obs, reward, terminated, truncated, info)
        """
        if not self.action_space.contains(int(action)):
            raise ValueError(f"Invalid action {action!r}; expected 0..{len(ACTIONS) - 1}")
        command = ACTIONS[int(action)]
        acted_on = self.engine.view_model()

        update = self.engine.apply(command)
        self.steps += 1
        self.counts[command.value] += 1
        if command is not Command.BACK:
            self.reviewed += 1
        if command in (Command.LIKE, Command.DISLIKE):
            self.opinions_by_category[acted_on.category.value] += 1
        self.last_effect = update.effect

        reward = compute_step_reward(self.reward_cfg, command, acted_on.category)

        quota_met = self.reviewed >= self.quota
        terminated = quota_met
        truncated = self.steps >= self.max_steps and not terminated
        if terminated or truncated:
            reward += compute_terminal_reward(
                cfg=self.reward_cfg,
                quota_met=quota_met,
                steps_elapsed=self.steps,
                max_steps=self.max_steps,
            )

        info = self._build_info(
            command=command.value,
            acted_on_position=acted_on.position,
            acted_on_category=acted_on.category.value,
            exit_motion=update.effect.exit_motion,
            quota_met=quota_met,
        )
        self._last_step_info = info
        return self._get_obs(), float(reward), terminated, truncated, info

    def render(self) -> str | None:
        """Print or return the current bill card as text."""
        vm = self.engine.view_model()
        bill = vm.bill
        width = 60
        lines = [
            f"\n{'='*width}",
            f"  {vm.progress_label}  ({vm.percent:.0f}%)",
            f"{'='*width}",
            f"  {bill.jurisdiction:<30s}{('[' + bill.status + ']'):>28s}",
            f"  {bill.title}",
        ]
        if bill.key_issues:
            lines.append("  " + " ".join(f"#{issue}" for issue in bill.key_issues))
        lines.extend(
            "  " + line for line in textwrap.wrap(bill.summary, width=width - 4)
        )
        lines.append(f"  {'─'*(width - 4)}")
        if vm.has_advisory:
            lines.append(f"  ! {vm.advisory_message} !")
        cta = "VOICE OPINION (pulsing)" if vm.is_urgent else "Voice Opinion"
        lines.append(f"  [Share]  [{cta}]  [Learn More]")
        if bill.vote_date:
            lines.append(f"  Vote date: {bill.vote_date}")
        lines.append(
            f"  Likes: {bill.stats.like}  Dislikes: {bill.stats.dislike}  "
            f"Watching: {bill.stats.watch}"
        )
        if vm.last_command is not None:
            lines.append(f"  Last: {vm.last_command.value} ({self.last_effect.exit_motion})")
        output = "\n".join(lines)

        if self.render_mode == "human":
            print(output)
            return None
        return output

    # ──────────────────────────────────────────────────────────────────────
    # Internal helpers
    # ──────────────────────────────────────────────────────────────────────

    def _get_obs(self) -> np.ndarray:
        """Build normalized observation vector.

        Features:
            position / (num_bills - 1)
            percent / 100
            one-hot category (urgent, informational, none)
            like share of the current bill's votes
            watchers / total engagement of the current bill
        """
        vm = self.engine.view_model()
        stats = vm.bill.stats
        obs = [
            vm.position / max(self.num_bills - 1, 1),
            vm.percent / 100.0,
        ]
        obs.extend(1.0 if vm.category is c else 0.0 for c in _CATEGORY_ORDER)
        obs.append(stats.like_share)
        obs.append(stats.watch / stats.total if stats.total > 0 else 0.0)

        return np.clip(np.array(obs, dtype=np.float32), 0.0, 1.0)

    def _build_info(self, **kwargs) -> dict[str, Any]:
        """Build info dict for step/reset."""
        vm = self.engine.view_model()
        info: dict[str, Any] = {
            "step": self.steps,
            "position": vm.position,
            "percent": vm.percent,
            "category": vm.category.value,
            "reviewed": self.reviewed,
            "counts": dict(self.counts),
            "opinions_by_category": dict(self.opinions_by_category),
        }
        info.update(kwargs)
        return info
