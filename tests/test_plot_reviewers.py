"""Tests for the reviewer chart: session aggregation and PNG output."""

import pandas as pd
import pytest

from scripts.plot_reviewers import plot_summary, summarize_sessions


@pytest.fixture
def sessions() -> pd.DataFrame:
    rows = []
    for policy in ("wrap", "clamp"):
        for session, met in enumerate([True, False]):
            rows.append({
                "reviewer": "Enthusiast", "policy": policy, "session": session,
                "quota_met": met, "urgent_opinions": 4,
                "informational_opinions": 2, "other_opinions": 6,
            })
            rows.append({
                "reviewer": "Skimmer", "policy": policy, "session": session,
                "quota_met": True, "urgent_opinions": 0,
                "informational_opinions": 0, "other_opinions": 0,
            })
    return pd.DataFrame(rows)


class TestSummarizeSessions:

    def test_rates_and_opinion_split(self, sessions):
        summary = summarize_sessions(sessions, "wrap")
        assert summary.loc["Enthusiast", "quota_met_rate"] == pytest.approx(0.5)
        assert summary.loc["Skimmer", "quota_met_rate"] == pytest.approx(1.0)
        assert summary.loc["Enthusiast", "urgent_opinions"] == pytest.approx(4.0)
        assert summary.loc["Enthusiast", "total_opinions"] == pytest.approx(12.0)
        assert summary.loc["Enthusiast", "sessions"] == 2

    def test_sorted_fewest_opinions_first(self, sessions):
        assert list(summarize_sessions(sessions, "clamp").index) == ["Skimmer", "Enthusiast"]

    def test_unknown_policy_has_nothing_to_plot(self, sessions):
        with pytest.raises(ValueError):
            summarize_sessions(sessions[sessions["policy"] == "wrap"], "clamp")


class TestPlotSummary:

    def test_writes_png(self, sessions, tmp_path):
        out = plot_summary(summarize_sessions(sessions, "wrap"), "wrap", str(tmp_path / "c.png"))
        assert out.exists()
        assert out.stat().st_size > 0
