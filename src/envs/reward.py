"""Reward function for the bill review session environment.

Configurable via RewardConfig dataclass. Computes per-step and terminal rewards.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.engine.navigation import Command
from src.engine.status import Category


@dataclass
class RewardConfig:
    """Reward shaping coefficients."""

    alpha: float = 1.0          # Opinion recorded (like or dislike)
    beta: float = 0.5           # Extra for an opinion on an urgent bill
    beta_info: float = 0.25     # Extra for an opinion on a bill in committee
    gamma_: float = 0.2         # Back penalty (re-navigation without a decision)
    delta: float = 0.05         # Skip penalty
    epsilon: float = 10.0       # Daily quota met terminal bonus
    zeta: float = 1.0           # Time pressure terminal penalty


def compute_step_reward(
    cfg: RewardConfig,
    command: Command,
    category: Category,
) -> float:
    """Compute the reward for one command.

    reward_step = (
        + α × opinion
        + β × opinion × urgent
        + β_info × opinion × informational
        - γ × back
        - δ × skip
    )

    Args:
        cfg: Reward coefficients.
        command: Command the reviewer issued.
        category: Advisory category of the bill the command was issued on.

    Returns:
        Scalar reward for this step.
    """
    if command in (Command.LIKE, Command.DISLIKE):
        reward = cfg.alpha
        if category is Category.URGENT:
            reward += cfg.beta
        elif category is Category.INFORMATIONAL:
            reward += cfg.beta_info
        return reward
    if command is Command.BACK:
        return -cfg.gamma_
    return -cfg.delta


def compute_terminal_reward(
    cfg: RewardConfig,
    quota_met: bool,
    steps_elapsed: int,
    max_steps: int,
) -> float:
    """Compute the end-of-session reward.

    reward_terminal = (
        + ε × (1.0 if quota_met else 0.0)
        - ζ × (steps_elapsed / max_steps)
    )
    """
    completion_bonus = cfg.epsilon * (1.0 if quota_met else 0.0)
    time_penalty = cfg.zeta * (steps_elapsed / max(max_steps, 1))
    return completion_bonus - time_penalty
