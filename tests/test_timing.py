"""
Unit tests for session timing instrumentation.
"""

import pytest

from student_erp.timing import TimingLog, timed_phase


class TestTimingLog:
    """Tests for TimingLog."""

    def test_log_phase_and_total(self):
        log = TimingLog()
        log.log_phase("load", 0.5)
        log.log_phase("index_build", 0.25)
        assert log.total == pytest.approx(0.75)

    def test_summary_lists_phases(self):
        log = TimingLog()
        log.log_phase("load", 0.012)
        summary = log.summary()
        assert "=== Session Timing Summary ===" in summary
        assert "load" in summary
        assert "12.0 ms" in summary


class TestTimedPhase:
    """Tests for the timed_phase context manager."""

    def test_records_duration(self):
        log = TimingLog()
        with timed_phase(log, "work"):
            sum(range(1000))
        assert log.phases["work"] >= 0

    def test_records_even_when_block_raises(self):
        log = TimingLog()
        with pytest.raises(RuntimeError):
            with timed_phase(log, "failing"):
                raise RuntimeError("boom")
        assert "failing" in log.phases
