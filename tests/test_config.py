"""
Tests for environment configuration parsing
"""

import pytest

from config import parse_report_weeks


class TestReportWeeks:

    def test_accepts_positive_counts(self):
        assert parse_report_weeks("4") == 4
        assert parse_report_weeks(1) == 1

    @pytest.mark.parametrize("value", ["0", "-2"])
    def test_rejects_counts_below_one(self, value):
        with pytest.raises(ValueError):
            parse_report_weeks(value)

    def test_rejects_non_numbers(self):
        with pytest.raises(ValueError):
            parse_report_weeks("four")
