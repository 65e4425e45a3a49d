"""Daily progress against a configured review quota."""

from __future__ import annotations

from src.engine.errors import InvalidConfigurationError


def compute_percent(position: int, quota: int) -> float:
    """Completion percentage after reaching ``position`` (0-based).

    Formula: clamp((position + 1) / quota × 100, 0, 100)

    The quota is independent of the collection length, so a short collection
    may never reach 100%.

    Args:
        position: Current 0-based index into the collection.
        quota: Daily target number of bills (> 0).

    Returns:
        Percentage in [0, 100].

    Raises:
        InvalidConfigurationError: If quota is not positive.
    """
    if quota <= 0:
        raise InvalidConfigurationError(f"quota must be positive, got {quota!r}")
    percent = (position + 1) / quota * 100.0
    return min(100.0, max(0.0, percent))


def progress_label(position: int, quota: int) -> str:
    """Caption shown above the progress bar, e.g. "Daily Progress: 1 / 20 Bills"."""
    if quota <= 0:
        raise InvalidConfigurationError(f"quota must be positive, got {quota!r}")
    return f"Daily Progress: {position + 1} / {quota} Bills"
