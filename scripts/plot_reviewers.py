"""Chart how each reviewer spent its daily quota.

Left panel: share of sessions where the quota was met.
Right panel: mean opinions per session, stacked by advisory category.

Usage:
    python scripts/plot_reviewers.py
    python scripts/plot_reviewers.py --input results/reviewers_per_session.csv --policy clamp
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import pandas as pd

from src.utils.config import load_eval_config

# CSV column → stack label, bottom to top
OPINION_COLUMNS = {
    "urgent_opinions": "Urgent (floor / vote)",
    "informational_opinions": "In committee",
    "other_opinions": "No advisory",
}

# Same palette as the card accents: dislike red, like green, neutral grey
CATEGORY_COLORS = ["#991b1b", "#166534", "#9ca3af"]


def summarize_sessions(df: pd.DataFrame, policy: str | None = None) -> pd.DataFrame:
    """One row per reviewer: quota-met rate and mean opinions by category.

    Rows are sorted by total opinions, fewest first. When ``policy`` is given,
    only sessions run under that navigation policy are kept.
    """
    if policy is not None and "policy" in df.columns:
        df = df[df["policy"] == policy]
    if df.empty:
        raise ValueError(f"No sessions to plot for policy {policy!r}")

    summary = df.groupby("reviewer").agg(
        quota_met_rate=("quota_met", "mean"),
        sessions=("session", "count"),
        **{col: (col, "mean") for col in OPINION_COLUMNS},
    )
    summary["total_opinions"] = summary[list(OPINION_COLUMNS)].sum(axis=1)
    return summary.sort_values("total_opinions")


def plot_summary(summary: pd.DataFrame, policy: str, output_path: str) -> Path:
    """Draw the two-panel chart and save it as PNG."""
    reviewers = list(summary.index)
    fig, (ax_quota, ax_ops) = plt.subplots(
        1, 2, figsize=(13, 0.6 * len(reviewers) + 3), sharey=True
    )
    fig.suptitle(f"Daily review sessions ({policy} navigation)", fontweight="bold")

    rates = summary["quota_met_rate"] * 100
    ax_quota.barh(reviewers, rates, color="#374151")
    for y, rate in enumerate(rates):
        ax_quota.text(rate + 1, y, f"{rate:.0f}%", va="center", fontsize=9)
    ax_quota.set_xlim(0, 110)
    ax_quota.set_xlabel("Sessions with quota met (%)")

    left = pd.Series(0.0, index=summary.index)
    for (col, label), color in zip(OPINION_COLUMNS.items(), CATEGORY_COLORS):
        ax_ops.barh(reviewers, summary[col], left=left, color=color, label=label)
        left += summary[col]
    ax_ops.set_xlabel("Opinions per session (mean)")
    ax_ops.legend(loc="lower right", fontsize=8, frameon=False)

    for ax in (ax_quota, ax_ops):
        ax.grid(axis="x", alpha=0.3)

    plt.tight_layout()
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(out), dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out


def main():
    parser = argparse.ArgumentParser(description="Chart quota completion and opinions per reviewer")
    parser.add_argument("--input", type=str, default="results/reviewers_per_session.csv")
    parser.add_argument("--output", type=str, default="results/reviewers_engagement.png")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/eval/eval_protocol.yaml",
        help="Eval protocol; its policy is used unless --policy is given",
    )
    parser.add_argument("--policy", type=str, default=None, choices=["wrap", "clamp"])
    args = parser.parse_args()

    csv_path = Path(args.input)
    if not csv_path.exists():
        print(f"Error: {csv_path} not found. Run run_reviewers.py first.")
        sys.exit(1)

    policy = args.policy or load_eval_config(args.config).get("policy", "wrap")
    df = pd.read_csv(csv_path)

    try:
        summary = summarize_sessions(df, policy)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(summary.round(2).to_string())
    out = plot_summary(summary, policy, args.output)
    print(f"\nChart saved to {out}")


if __name__ == "__main__":
    main()
