"""Run all scripted reviewers on sampled bill feeds and produce benchmark CSV.

Usage:
    python scripts/run_reviewers.py                          # Full: protocol sessions × seeds
    python scripts/run_reviewers.py --quick                  # Dev:  50 sessions × 1 seed
    python scripts/run_reviewers.py --config configs/eval/eval_protocol.yaml
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import numpy as np
import pandas as pd

from src.envs.bill_feed_env import BillFeedEnv
from src.envs.collection_sampler import CollectionSampler
from src.evaluation.metrics import session_engagement_score
from src.reviewers import ALL_REVIEWERS
from src.utils.config import load_eval_config


def run_benchmark(
    num_sessions: int = 500,
    seeds: list[int] | None = None,
    policy: str = "wrap",
    max_steps: int = 100,
    output_dir: str = "results",
) -> pd.DataFrame:
    """Run all reviewers across seeds × sessions with sampled feeds.

    Args:
        num_sessions: Number of sessions per (reviewer, seed) pair.
        seeds: List of RNG seeds for reproducibility.
        policy: Navigation policy for every sampled feed.
        max_steps: Command limit per session.
        output_dir: Directory to write CSV output.

    Returns:
        DataFrame with one row per (reviewer, seed, session).
    """
    if seeds is None:
        seeds = [42]

    sampler = CollectionSampler(policy=policy, max_steps=max_steps)
    rows: list[dict] = []

    total_runs = len(ALL_REVIEWERS) * len(seeds) * num_sessions
    completed = 0
    t0 = time.time()

    for seed in seeds:
        # Pre-generate feeds for this seed so all reviewers see the same ones
        rng = np.random.default_rng(seed)
        feeds = [sampler.sample(rng) for _ in range(num_sessions)]

        for ReviewerClass in ALL_REVIEWERS:
            reviewer = ReviewerClass()

            for idx, feed in enumerate(feeds):
                env = BillFeedEnv(config=feed)
                result = reviewer.run_session(env, seed=seed + idx)

                rows.append({
                    "reviewer": result["reviewer"],
                    "seed": seed,
                    "policy": feed.policy,
                    "session": idx,
                    "num_bills": feed.num_bills,
                    "quota": feed.quota,
                    "steps": result["steps"],
                    "opinions": result["opinions"],
                    "urgent_opinions": result["urgent_opinions"],
                    "informational_opinions": result["opinions_by_category"]["informational"],
                    "other_opinions": result["opinions_by_category"]["none"],
                    "quota_met": result["quota_met"],
                    "final_percent": round(result["final_percent"], 1),
                    "total_reward": round(result["total_reward"], 3),
                    "engagement_score": round(session_engagement_score(result), 1),
                })

                completed += 1
                if completed % 500 == 0:
                    elapsed = time.time() - t0
                    rate = completed / elapsed if elapsed > 0 else 0
                    eta = (total_runs - completed) / rate if rate > 0 else 0
                    print(
                        f"  [{completed}/{total_runs}] "
                        f"{elapsed:.0f}s elapsed, ~{eta:.0f}s remaining"
                    )

    df = pd.DataFrame(rows)

    out_path = Path(output_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    csv_path = out_path / "reviewers_per_session.csv"
    df.to_csv(csv_path, index=False)
    print(f"\nPer-session results saved to {csv_path}")

    return df


def print_summary(df: pd.DataFrame) -> None:
    """Print summary stats table grouped by reviewer."""
    summary_rows = []
    for reviewer, group in df.groupby("reviewer", sort=False):
        summary_rows.append({
            "Reviewer": reviewer,
            "Steps (mean±std)": f"{group['steps'].mean():.1f} ± {group['steps'].std():.1f}",
            "Opinions (mean)": f"{group['opinions'].mean():.1f}",
            "Quota Met %": f"{group['quota_met'].mean() * 100:.1f}%",
            "Progress (mean)": f"{group['final_percent'].mean():.1f}%",
            "Reward (mean)": f"{group['total_reward'].mean():.2f}",
            "Engagement (mean)": f"{group['engagement_score'].mean():.0f}",
        })
    summary = pd.DataFrame(summary_rows)
    print("\n" + "=" * 90)
    print("  REVIEWER COMPARISON — Summary Statistics")
    print("=" * 90)
    print(summary.to_string(index=False))
    print()


def sanity_checks(df: pd.DataFrame) -> None:
    """Run sanity checks on reviewer results."""
    print("Sanity checks:")

    # Skimmer never records an opinion
    skim = df[df["reviewer"] == "Skimmer"]["opinions"].sum()
    if skim == 0:
        print("  [PASS] Skimmer recorded no opinions")
    else:
        print(f"  [FAIL] Skimmer recorded {skim} opinions! Possible command mapping bug.")

    # Enthusiast should out-engage Skimmer
    enth = df[df["reviewer"] == "Enthusiast"]["engagement_score"].mean()
    skim_score = df[df["reviewer"] == "Skimmer"]["engagement_score"].mean()
    if enth > skim_score:
        print(f"  [PASS] Enthusiast ({enth:.0f}) > Skimmer ({skim_score:.0f}) on engagement")
    else:
        print(f"  [NOTE] Enthusiast ({enth:.0f}) <= Skimmer ({skim_score:.0f}) on engagement")

    print()


def main():
    parser = argparse.ArgumentParser(description="Run scripted reviewer benchmark")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/eval/eval_protocol.yaml",
        help="Path to eval protocol YAML",
    )
    parser.add_argument("--quick", action="store_true", help="Quick run: 50 sessions, 1 seed")
    parser.add_argument("--output", type=str, default="results", help="Output directory")
    args = parser.parse_args()

    eval_cfg = load_eval_config(args.config)

    if args.quick:
        num_sessions = 50
        seeds = [42]
        print("Quick mode: 50 sessions × 1 seed")
    else:
        num_sessions = eval_cfg.get("num_sessions", 500)
        seeds = eval_cfg.get("seeds", [42, 123, 456])
        print(f"Full mode: {num_sessions} sessions × {len(seeds)} seeds")

    print(f"Running {len(ALL_REVIEWERS)} reviewers...\n")
    df = run_benchmark(
        num_sessions=num_sessions,
        seeds=seeds,
        policy=eval_cfg.get("policy", "wrap"),
        max_steps=eval_cfg.get("max_steps", 100),
        output_dir=args.output,
    )

    print_summary(df)
    sanity_checks(df)


if __name__ == "__main__":
    main()
