"""CollectionSampler — generates varied bill feeds for session simulation.

Produces random SessionConfig instances with varied collection sizes (1–25),
status mixes, engagement counters and quotas. Also provides named presets for
reproducible walkthroughs.
"""

from __future__ import annotations

import numpy as np

from src.engine.bill_model import Bill, BillStats
from src.engine.errors import InvalidConfigurationError
from src.envs.reward import RewardConfig
from src.utils.config import SessionConfig


_JURISDICTIONS = [
    "California", "Texas", "New York", "Florida", "Illinois", "Ohio",
    "Iowa", "Washington", "Colorado", "Georgia", "U.S. Federal",
]

# Real-world lifecycle labels; the mix covers all three advisory categories
_STATUSES = [
    "Senate Floor", "House Floor", "Voting Scheduled", "Scheduled for Vote",
    "In Committee", "Referred to Committee", "Committee Hearing",
    "Introduced", "First Reading", "Passed", "Signed by Governor", "Vetoed",
]

_ISSUES = [
    "Renewable Energy", "Environment", "Healthcare", "Taxes", "Energy policy",
    "Social programs", "Education", "Housing", "Transportation", "Privacy",
    "Public Safety", "Agriculture", "Labor",
]

_TOPICS = [
    "Clean Energy", "Affordable Housing", "Data Privacy", "School Funding",
    "Transit Expansion", "Water Rights", "Small Business Relief",
    "Broadband Access", "Wildfire Prevention", "Prescription Drug Pricing",
]

DEMO_BILLS: tuple[Bill, ...] = (
    Bill(
        jurisdiction="California",
        title="Clean Energy Act 2025",
        summary=(
            "Require utilities to generate 70% clean energy by 2030 and invest "
            "in renewable infrastructure."
        ),
        key_issues=("Renewable Energy", "Environment"),
        stats=BillStats(like=120, dislike=10, watch=50),
        status="Senate Floor",
        vote_date="10/01/25",
    ),
    Bill(
        jurisdiction="U.S. Federal",
        title="One Big Beautiful Bill Act (H.R.1)",
        summary="Cuts Medicaid/SNAP, changes tax rules, lifts energy restrictions.",
        key_issues=("Healthcare", "Taxes", "Energy policy", "Social programs"),
        stats=BillStats(like=80, dislike=200, watch=150),
        status="In Committee",
        vote_date="09/22/25",
    ),
)


class CollectionSampler:
    """Generate randomized or preset review sessions."""

    def __init__(
        self,
        num_bills_range: tuple[int, int] = (1, 25),
        quota_range: tuple[int, int] = (5, 30),
        engagement_range: tuple[int, int] = (0, 500),
        issues_per_bill: tuple[int, int] = (1, 4),
        policy: str = "wrap",
        max_steps: int = 100,
        reward_config: RewardConfig | None = None,
    ):
        self.num_bills_range = num_bills_range
        self.quota_range = quota_range
        self.engagement_range = engagement_range
        self.issues_per_bill = issues_per_bill
        self.policy = policy
        self.max_steps = max_steps
        self.reward_config = reward_config or RewardConfig()

    def sample_bill(self, rng: np.random.Generator) -> Bill:
        jurisdiction = str(rng.choice(_JURISDICTIONS))
        topic = str(rng.choice(_TOPICS))
        year = int(rng.integers(2023, 2027))
        n_issues = int(rng.integers(self.issues_per_bill[0], self.issues_per_bill[1] + 1))
        issue_idx = rng.choice(len(_ISSUES), size=n_issues, replace=False)
        lo, hi = self.engagement_range
        like, dislike, watch = (int(v) for v in rng.integers(lo, hi + 1, size=3))
        has_date = bool(rng.random() < 0.7)
        vote_date = (
            f"{int(rng.integers(1, 13)):02d}/{int(rng.integers(1, 29)):02d}/{year % 100:02d}"
            if has_date else None
        )
        return Bill(
            jurisdiction=jurisdiction,
            title=f"{topic} Act {year}",
            summary=f"{jurisdiction} proposal addressing {topic.lower()}.",
            key_issues=tuple(_ISSUES[i] for i in issue_idx),
            stats=BillStats(like=like, dislike=dislike, watch=watch),
            status=str(rng.choice(_STATUSES)),
            vote_date=vote_date,
        )

    def sample(self, rng: np.random.Generator | None = None) -> SessionConfig:
        """Sample a random review session.

        Args:
            rng: Numpy random Generator for reproducibility.

        Returns:
            A randomized SessionConfig.
        """
        if rng is None:
            rng = np.random.default_rng()

        num_bills = int(rng.integers(self.num_bills_range[0], self.num_bills_range[1] + 1))
        bills = [self.sample_bill(rng) for _ in range(num_bills)]
        quota = int(rng.integers(self.quota_range[0], self.quota_range[1] + 1))

        return SessionConfig(
            bills=bills,
            quota=quota,
            policy=self.policy,
            max_steps=self.max_steps,
            reward=self.reward_config,
        )

    @staticmethod
    def preset(name: str) -> SessionConfig:
        """Return a named preset session.

        Available presets:
            - "demo": the two showcase bills in card view (WRAP), quota 20
            - "scroll_feed": the same bills in scroll view (CLAMP), quota = bill count

        Raises:
            InvalidConfigurationError: If preset name is unknown.
        """
        presets = {
            "demo": lambda: SessionConfig(bills=list(DEMO_BILLS), quota=20, policy="wrap"),
            "scroll_feed": lambda: SessionConfig(
                bills=list(DEMO_BILLS), quota=len(DEMO_BILLS), policy="clamp"
            ),
        }

        if name not in presets:
            valid = ", ".join(sorted(presets.keys()))
            raise InvalidConfigurationError(f"Unknown preset {name!r}. Valid: {valid}")

        return presets[name]()
