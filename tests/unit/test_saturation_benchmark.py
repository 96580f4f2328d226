"""Unit tests for the saturation benchmark."""

import logging
import threading
from unittest.mock import patch

import pytest

from src.loadtester.constants import LoadTestConstants
from src.loadtester.exceptions import ConfigurationError
from src.loadtester.models import BenchmarkResult
from src.loadtester.saturation_benchmark import SaturationBenchmark, benchmark
from tests.conftest import FakeSession, make_pool
from tests.test_const import TEST_BENCH_DURATION, TEST_URL


class TestBenchmarkResult:
    """Test the RPS derivation."""

    @pytest.mark.parametrize("completed,duration,expected", [
        (0, 5, 0),
        (10, 5, 2),
        (14, 5, 2),
        (4, 5, 0),
    ])
    def test_rps_truncates(self, completed, duration, expected):
        result = BenchmarkResult(completed=completed, failed=0, duration=duration, workers=1)
        assert result.rps == expected


class TestSaturationBenchmark:
    """Test SaturationBenchmark.run."""

    def test_default_workers_scale_with_cpus(self, ok_pool):
        """Test the worker count is a multiple of the CPU count."""
        with patch('src.loadtester.constants.os.cpu_count', return_value=3):
            bench = SaturationBenchmark(ok_pool)
        assert bench.workers == 3 * LoadTestConstants.WORKERS_PER_CPU

    @pytest.mark.parametrize("duration", [0, -1])
    def test_non_positive_duration_rejected(self, ok_pool, ok_session, duration):
        """Test a non-positive duration fails before any request."""
        with pytest.raises(ConfigurationError):
            SaturationBenchmark(ok_pool, workers=2).run(TEST_URL, duration)
        assert ok_session.calls == 0

    def test_instant_transport_reports_positive_rps(self, ok_pool, ok_session):
        """Test completions are counted and converted to RPS."""
        result = SaturationBenchmark(ok_pool, workers=4).run(TEST_URL, TEST_BENCH_DURATION)
        assert result.completed > 0
        assert result.failed == 0
        assert result.rps == result.completed // TEST_BENCH_DURATION
        assert result.rps > 0
        assert ok_session.calls == result.completed

    def test_failures_are_not_completions(self, caplog):
        """Test failing requests are logged and never counted as completions."""
        with caplog.at_level(logging.ERROR, logger="src.loadtester.saturation_benchmark"):
            result = SaturationBenchmark(make_pool(FakeSession(fail=True, delay=0.001)), workers=2).run(TEST_URL, TEST_BENCH_DURATION)
        assert result.completed == 0
        assert result.rps == 0
        assert result.failed > 0
        assert any("Benchmark request failed" in record.getMessage() for record in caplog.records)

    def test_throughput_scales_with_workers(self):
        """Test more workers finish more requests against a latency-bound target."""
        single = SaturationBenchmark(make_pool(FakeSession(delay=0.01)), workers=1).run(TEST_URL, TEST_BENCH_DURATION)
        several = SaturationBenchmark(make_pool(FakeSession(delay=0.01)), workers=8).run(TEST_URL, TEST_BENCH_DURATION)
        assert several.rps > single.rps

    def test_requests_spread_over_pool(self):
        """Test workers share one round-robin counter across the pool."""
        sessions = [FakeSession(), FakeSession()]
        SaturationBenchmark(make_pool(*sessions), workers=4).run(TEST_URL, TEST_BENCH_DURATION)
        assert all(session.calls > 0 for session in sessions)
        assert abs(sessions[0].calls - sessions[1].calls) <= 4

    def test_benchmark_function_returns_rps(self, ok_pool):
        rps = benchmark(TEST_URL, TEST_BENCH_DURATION, ok_pool, workers=2)
        assert isinstance(rps, int)
        assert rps > 0

    def test_interrupt_still_stops_workers(self):
        """Test an interrupted wait raises the stop signal so run returns."""
        session = FakeSession(delay=0.01)
        bench = SaturationBenchmark(make_pool(session), workers=2)
        with patch('src.loadtester.saturation_benchmark.time.sleep', side_effect=KeyboardInterrupt):
            with pytest.raises(KeyboardInterrupt):
                bench.run(TEST_URL, TEST_BENCH_DURATION)
        calls_after_return = session.calls
        threading.Event().wait(0.1)
        assert session.calls == calls_after_return
