"""Unit tests for daily progress computation."""

import pytest

from src.engine.errors import InvalidConfigurationError
from src.engine.progress import compute_percent, progress_label


class TestComputePercent:

    def test_first_bill_of_twenty(self):
        assert compute_percent(0, 20) == pytest.approx(5.0)

    def test_second_bill_of_twenty(self):
        assert compute_percent(1, 20) == pytest.approx(10.0)

    def test_complete_at_last_quota_slot(self):
        assert compute_percent(19, 20) == pytest.approx(100.0)

    def test_clamped_above_quota(self):
        """Collections longer than the quota saturate at 100%."""
        assert compute_percent(45, 20) == pytest.approx(100.0)

    def test_clamped_below_zero(self):
        assert compute_percent(-5, 20) == pytest.approx(0.0)

    @pytest.mark.parametrize("quota", [1, 3, 7, 20])
    def test_monotonic(self, quota):
        values = [compute_percent(p, quota) for p in range(quota + 3)]
        assert all(a <= b for a, b in zip(values, values[1:]))
        assert compute_percent(quota - 1, quota) == pytest.approx(100.0)

    @pytest.mark.parametrize("quota", [0, -1, -20])
    def test_non_positive_quota_rejected(self, quota):
        with pytest.raises(InvalidConfigurationError):
            compute_percent(0, quota)


class TestProgressLabel:

    def test_label(self):
        assert progress_label(0, 20) == "Daily Progress: 1 / 20 Bills"

    def test_label_rejects_bad_quota(self):
        with pytest.raises(InvalidConfigurationError):
            progress_label(0, 0)
