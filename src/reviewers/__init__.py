"""Scripted reviewer policies for bill review sessions."""

from src.reviewers.base_reviewer import ReviewerPolicy
from src.reviewers.enthusiast import EnthusiastReviewer
from src.reviewers.skimmer import SkimmerReviewer
from src.reviewers.urgent_focus import UrgentFocusReviewer
from src.reviewers.random_reviewer import RandomReviewer

ALL_REVIEWERS = [
    EnthusiastReviewer,
    SkimmerReviewer,
    UrgentFocusReviewer,
    RandomReviewer,
]

__all__ = [
    "ReviewerPolicy",
    "EnthusiastReviewer",
    "SkimmerReviewer",
    "UrgentFocusReviewer",
    "RandomReviewer",
    "ALL_REVIEWERS",
]
