import time
from io import StringIO

import pytest

import memotools.timing


class TestTimer:

    @pytest.fixture(autouse=True)
    def setup(self):
        self.timer = memotools.timing.Timer(enabled=True)

    def test_timer_disabled(self):
        """Test that disabled timer doesn't track anything"""
        timer = memotools.timing.Timer(enabled=False)
        timer.start("test_op")
        elapsed = timer.stop("test_op")

        assert elapsed == 0.0
        assert len(timer.timings) == 0

    def test_basic_timing(self):
        self.timer.start("test_operation")
        time.sleep(0.01)
        elapsed = self.timer.stop("test_operation")

        assert elapsed > 0.0
        assert self.timer.get_elapsed("test_operation") == elapsed

    def test_stop_without_start(self):
        assert self.timer.stop("never_started") == 0.0

    def test_nested_timing(self):
        with self.timer.time_operation("outer"):
            with self.timer.time_operation("inner"):
                time.sleep(0.01)

        assert "inner" in self.timer.nested_timings["outer"]
        assert self.timer.get_elapsed("outer") >= self.timer.get_elapsed("inner")

    def test_total_time_no_double_counting(self):
        with self.timer.time_operation("outer"):
            with self.timer.time_operation("inner"):
                time.sleep(0.01)

        assert self.timer.total() == self.timer.get_elapsed("outer")

    def test_format_time(self):
        assert self.timer.format_time(0.0005) == "500µs"
        assert self.timer.format_time(0.0015) == "1.5ms"
        assert self.timer.format_time(1.5) == "1.5s"
        assert self.timer.format_time(65.5) == "1m5.5s"

    def test_report_disabled_timer(self):
        timer = memotools.timing.Timer(enabled=False)
        output = StringIO()
        timer.report(verbose_level=2, file=output)

        assert output.getvalue() == ""

    def test_report_verbose_1(self):
        with self.timer.time_operation("memoized calls"):
            with self.timer.time_operation("call 1"):
                pass

        output = StringIO()
        self.timer.report(verbose_level=1, file=output)

        output_text = output.getvalue()
        assert "Total elapsed time:" in output_text
        assert "call 1" not in output_text

    def test_report_verbose_2(self):
        with self.timer.time_operation("memoized calls"):
            for name in ("call 1", "call 2"):
                with self.timer.time_operation(name):
                    pass

        output = StringIO()
        self.timer.report(verbose_level=2, file=output)

        lines = output.getvalue().splitlines()
        assert lines[0].startswith("Total elapsed time:")
        assert lines[1].startswith("  memoized calls:")
        assert lines[2].startswith("    call 1:")
        assert lines[3].startswith("    call 2:")
