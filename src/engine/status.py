"""Status classification — free-text bill status → advisory category.

Matching is case-insensitive substring search, checked in precedence order:
    1. "floor" / "voting" / "vote"  → URGENT
    2. "committee"                   → INFORMATIONAL
    3. anything else                 → NONE
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Advisory category for a bill's lifecycle status."""

    URGENT = "urgent"
    INFORMATIONAL = "informational"
    NONE = "none"


URGENT_KEYWORDS: tuple[str, ...] = ("floor", "voting", "vote")
INFORMATIONAL_KEYWORDS: tuple[str, ...] = ("committee",)

ADVISORY_MESSAGES: dict[Category, str] = {
    Category.URGENT: "Voting soon. Send a letter!",
    Category.INFORMATIONAL: "In committee. Share your opinion early.",
    Category.NONE: "",
}


def classify(status: str | None) -> Category:
    """Classify a status label such as "Senate Floor" or "In Committee".

    Never raises: empty or missing text falls through to ``Category.NONE``.
    """
    text = (status or "").lower()
    if any(word in text for word in URGENT_KEYWORDS):
        return Category.URGENT
    if any(word in text for word in INFORMATIONAL_KEYWORDS):
        return Category.INFORMATIONAL
    return Category.NONE


def is_urgent(status: str | None) -> bool:
    """Emphasis flag for call-to-action styling. Always derived from classify()."""
    return classify(status) is Category.URGENT


def advisory_message(category: Category) -> str:
    """Advisory text for a category; empty string when there is nothing to say."""
    return ADVISORY_MESSAGES[category]
