"""Engagement metrics for reviewer evaluation.

Provides a simple engagement score summarizing one review session.
"""

from __future__ import annotations


def compute_engagement_score(
    opinion_ratio: float,
    urgent_coverage: float,
    completion_percent: float,
) -> float:
    """Compute a session engagement score in [0, 100].

    Weights:
        - Opinions (40%): share of handled bills that got a like or dislike
        - Urgent coverage (35%): share of urgent cards shown that got an opinion
        - Completion (25%): daily progress percentage at session end

    Args:
        opinion_ratio: opinions / bills handled (0–1).
        urgent_coverage: urgent opinions / urgent cards shown (0–1).
            Pass 1.0 when no urgent bill was shown.
        completion_percent: Final progress percentage (0–100).

    Returns:
        Score between 0 (disengaged) and 100 (fully engaged).
    """
    opinion_score = max(0.0, min(1.0, opinion_ratio))
    urgent_score = max(0.0, min(1.0, urgent_coverage))
    completion_score = max(0.0, min(1.0, completion_percent / 100.0))

    weighted = (
        0.40 * opinion_score
        + 0.35 * urgent_score
        + 0.25 * completion_score
    )
    return 100.0 * weighted


def session_engagement_score(result: dict) -> float:
    """Engagement score from a ReviewerPolicy.run_session() result dict."""
    reviewed = result.get("reviewed", 0)
    opinion_ratio = result["opinions"] / reviewed if reviewed > 0 else 0.0
    urgent_seen = result.get("urgent_seen", 0)
    urgent_coverage = (
        min(1.0, result["urgent_opinions"] / urgent_seen) if urgent_seen > 0 else 1.0
    )
    return compute_engagement_score(
        opinion_ratio=opinion_ratio,
        urgent_coverage=urgent_coverage,
        completion_percent=result.get("final_percent", 0.0),
    )
