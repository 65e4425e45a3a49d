"""Sanity check — step through review sessions with rendered cards.

Usage:
    python scripts/sanity_check.py
    python scripts/sanity_check.py --config configs/session/scroll_feed.yaml --sessions 1
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.engine.errors import EmptyCollectionError, InvalidConfigurationError
from src.envs.bill_feed_env import BillFeedEnv
from src.reviewers import EnthusiastReviewer, SkimmerReviewer, UrgentFocusReviewer
from src.utils.config import load_session_config


def main():
    parser = argparse.ArgumentParser(description="Sanity check: walk through review sessions")
    parser.add_argument("--config", type=str, default="configs/session/default.yaml")
    parser.add_argument("--sessions", type=int, default=3)
    parser.add_argument("--max-steps", type=int, default=6, help="Cards shown per session")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    try:
        session_config = load_session_config(args.config)
        env = BillFeedEnv(config=session_config, render_mode="human")
    except (EmptyCollectionError, InvalidConfigurationError) as e:
        print(f"Error: {args.config}: {e}")
        sys.exit(1)

    reviewers = [EnthusiastReviewer(), UrgentFocusReviewer(), SkimmerReviewer()]

    for ep, reviewer in enumerate(reviewers[:args.sessions]):
        print(f"\n{'#'*60}")
        print(f"  SESSION {ep + 1}: Reviewer = {reviewer.name}  "
              f"(policy={session_config.policy}, quota={session_config.quota})")
        print(f"{'#'*60}")

        obs, info = env.reset(seed=args.seed + ep)
        env.render()

        terminated = truncated = False
        shown = 0
        while not (terminated or truncated) and shown < args.max_steps:
            action = reviewer.choose(env)
            prev_position = info["position"]
            obs, reward, terminated, truncated, info = env.step(action)
            env.render()
            shown += 1

            # Sanity checks
            if not 0 <= info["position"] < env.num_bills:
                print(f"  ⚠️ WARNING: position {info['position']} out of range!")
            if session_config.policy == "wrap" and info["position"] == prev_position and env.num_bills > 1:
                print("  ⚠️ WARNING: card view did not advance!")

        status = "✓ QUOTA MET" if info.get("quota_met") else "… IN PROGRESS"
        print(f"\n  Result: {status} after {info['step']} commands")
        print(f"  Progress: {info['percent']:.0f}%  Commands: {info['counts']}")


if __name__ == "__main__":
    main()
