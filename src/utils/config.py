"""YAML configuration loader and dataclasses for review sessions."""

from __future__ import annotations

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.engine.bill_model import Bill, BillCollection, BillStats
from src.engine.errors import InvalidConfigurationError
from src.engine.navigation import VALID_DIRECTIONS, NavigationPolicy
from src.envs.reward import RewardConfig


def _resolve_config_path(path: str | Path) -> Path:
    """Resolve a config path, anchoring relative paths to the project root.

    The project root is identified as the nearest ancestor directory that
    contains ``pyproject.toml``.  If the file exists as-is (e.g. an absolute
    path or the CWD happens to be the project root already), it is returned
    unchanged.
    """
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p

    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "pyproject.toml").exists():
            # open() gives the descriptive FileNotFoundError if it is missing
            return parent / p

    return p


@dataclass
class SessionConfig:
    """Full configuration of one review session."""

    bills: list[Bill] = field(default_factory=list)
    quota: int = 20
    policy: str = "wrap"  # "wrap" (card view) or "clamp" (scroll view)
    back_direction: int = 0
    max_steps: int = 100
    reward: RewardConfig = field(default_factory=RewardConfig)

    def __post_init__(self):
        if self.quota <= 0:
            raise InvalidConfigurationError(f"quota must be positive, got {self.quota!r}")
        if self.back_direction not in VALID_DIRECTIONS:
            raise InvalidConfigurationError(
                f"back_direction must be one of {VALID_DIRECTIONS}, got {self.back_direction!r}"
            )
        if self.max_steps <= 0:
            raise InvalidConfigurationError(f"max_steps must be positive, got {self.max_steps!r}")
        # Normalizes the string and rejects unknown policies
        self.policy = NavigationPolicy.parse(self.policy).value

    @property
    def num_bills(self) -> int:
        return len(self.bills)

    @property
    def navigation_policy(self) -> NavigationPolicy:
        return NavigationPolicy(self.policy)

    def collection(self) -> BillCollection:
        return BillCollection(self.bills)


def bill_from_dict(raw: dict[str, Any]) -> Bill:
    """Build a Bill from a YAML/JSON mapping.

    Accepts ``jurisdiction`` or the older ``state`` key, and camelCase
    (``keyIssues``, ``voteDate``) or snake_case field names.
    """
    stats = raw.get("stats") or {}
    vote_date = raw.get("vote_date", raw.get("voteDate"))
    return Bill(
        jurisdiction=str(raw.get("jurisdiction", raw.get("state", ""))),
        title=str(raw.get("title", "")),
        summary=str(raw.get("summary", "")),
        key_issues=tuple(str(k) for k in raw.get("key_issues", raw.get("keyIssues", []))),
        stats=BillStats(
            like=int(stats.get("like", 0)),
            dislike=int(stats.get("dislike", 0)),
            watch=int(stats.get("watch", 0)),
        ),
        status=str(raw.get("status", "")),
        vote_date=str(vote_date) if vote_date is not None else None,
    )


def _load_yaml(path: str | Path) -> Any:
    path = _resolve_config_path(path)
    with open(path, "r") as f:
        return yaml.safe_load(f)


def load_bills(path: str | Path) -> list[Bill]:
    """Load a bill list from a YAML file (a top-level list or a ``bills`` key)."""
    raw = _load_yaml(path) or []
    if isinstance(raw, dict):
        raw = raw.get("bills", [])
    return [bill_from_dict(b) for b in raw]


def load_session_config(path: str | Path) -> SessionConfig:
    """Load a SessionConfig from a YAML file.

    Args:
        path: Path to a YAML config file (e.g., configs/session/default.yaml).

    Returns:
        Populated SessionConfig instance.

    Raises:
        InvalidConfigurationError: If quota, policy or back_direction are invalid.
    """
    raw: dict[str, Any] = _load_yaml(path) or {}

    bills = [bill_from_dict(b) for b in raw.get("bills", [])]
    # A bills_file entry is resolved relative to the project root
    if "bills_file" in raw:
        bills.extend(load_bills(raw["bills_file"]))

    reward_dict = dict(raw.get("reward", {}))
    # YAML uses 'gamma', Python uses 'gamma_' to avoid builtin clash
    if "gamma" in reward_dict:
        reward_dict["gamma_"] = reward_dict.pop("gamma")
    reward_cfg = RewardConfig(**reward_dict)

    quota = raw.get("quota", 20)
    # "auto" ties the quota to the collection length, as the scroll view does
    if quota == "auto":
        quota = max(len(bills), 1)

    return SessionConfig(
        bills=bills,
        quota=int(quota),
        policy=raw.get("policy", "wrap"),
        back_direction=int(raw.get("back_direction", 0)),
        max_steps=int(raw.get("max_steps", 100)),
        reward=reward_cfg,
    )


def load_eval_config(path: str | Path) -> dict[str, Any]:
    """Load evaluation protocol from a YAML file."""
    return _load_yaml(path)
