"""Bill records and the fixed, ordered collection navigated in a session.

Bills are immutable. The collection classifies every bill's status once at
construction so later lookups never repeat the substring search.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from src.engine.errors import EmptyCollectionError, InvalidConfigurationError
from src.engine.status import Category, classify


@dataclass(frozen=True)
class BillStats:
    """Engagement counters shown under a bill card."""

    like: int = 0
    dislike: int = 0
    watch: int = 0

    def __post_init__(self):
        for name in ("like", "dislike", "watch"):
            if getattr(self, name) < 0:
                raise InvalidConfigurationError(
                    f"BillStats.{name} must be non-negative, got {getattr(self, name)!r}"
                )

    @property
    def total(self) -> int:
        return self.like + self.dislike + self.watch

    @property
    def like_share(self) -> float:
        """Likes / (likes + dislikes). 0.5 when nobody has voted yet."""
        votes = self.like + self.dislike
        if votes <= 0:
            return 0.5
        return self.like / votes


@dataclass(frozen=True)
class Bill:
    """A single legislative record with display metadata."""

    jurisdiction: str           # e.g. "California" or "U.S. Federal"
    title: str
    summary: str
    key_issues: tuple[str, ...] = ()
    stats: BillStats = field(default_factory=BillStats)
    status: str = ""            # free text, e.g. "Senate Floor"
    vote_date: str | None = None

    def __post_init__(self):
        # Lists from callers are frozen so the record stays hashable
        object.__setattr__(self, "key_issues", tuple(self.key_issues))


class BillCollection:
    """Ordered, read-only sequence of bills with pre-computed categories."""

    def __init__(self, bills: Sequence[Bill] = ()):
        self._bills: tuple[Bill, ...] = tuple(bills)
        self._categories: tuple[Category, ...] = tuple(
            classify(b.status) for b in self._bills
        )

    def __len__(self) -> int:
        return len(self._bills)

    def __iter__(self) -> Iterator[Bill]:
        return iter(self._bills)

    def __getitem__(self, index: int) -> Bill:
        self._require_bills()
        return self._bills[index]

    def __repr__(self) -> str:
        return f"BillCollection({len(self)} bills)"

    @property
    def is_empty(self) -> bool:
        return not self._bills

    def category_at(self, index: int) -> Category:
        """Advisory category of the bill at ``index``."""
        self._require_bills()
        return self._categories[index]

    def count(self, category: Category) -> int:
        return sum(1 for c in self._categories if c is category)

    def _require_bills(self) -> None:
        if not self._bills:
            raise EmptyCollectionError()
