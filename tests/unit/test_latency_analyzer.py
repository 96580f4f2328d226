"""Unit tests for latency statistics."""

import pytest

from src.loadtester.latency_analyzer import LatencyAnalyzer


class TestLatencyAnalyzer:
    """Test LatencyAnalyzer.compute_percentiles."""

    def test_empty_latencies(self):
        results = LatencyAnalyzer.compute_percentiles([])
        assert (results.p50, results.p90, results.p95) == (0.0, 0.0, 0.0)

    def test_percentiles(self):
        """Test percentiles over 1..100."""
        results = LatencyAnalyzer.compute_percentiles([float(i) for i in range(1, 101)])
        assert results.p50 == pytest.approx(50.5)
        assert results.p90 == pytest.approx(90.1)
        assert results.p95 == pytest.approx(95.05)
        assert isinstance(results.p50, float)
