"""Load test runner to orchestrate the benchmark and the rate-limited test."""
import logging
from typing import Optional

from src.shared.config import RunConfig

from .client_pool import build_pool
from .constants import LoadTestConstants
from .models import BenchmarkResult, RunSummary
from .rate_dispatcher import RateLimitedDispatcher
from .saturation_benchmark import SaturationBenchmark


# Configure logging
logger = logging.getLogger(__name__)


class LoadTestRunner:
    """Runs the optional saturation benchmark, then the rate-limited test."""

    def __init__(self, config: RunConfig, benchmark_workers: Optional[int] = None):
        self.config = config
        self.benchmark_workers = benchmark_workers

    def run_benchmark(self) -> BenchmarkResult:
        """Measure the maximum request rate with a dedicated client pool."""
        workers = self.benchmark_workers or LoadTestConstants.benchmark_workers()
        pool = build_pool(self.config.local_addr_list, pool_size=LoadTestConstants.pool_size_for(workers))
        try:
            return SaturationBenchmark(pool, workers=workers).run(
                self.config.url, self.config.bench_duration
            )
        finally:
            pool.close()

    def run(self) -> RunSummary:
        """Run the complete load test and return once every request has finished."""
        try:
            rps = self.config.rps
            benchmark_result = None
            if self.config.benchmark:
                benchmark_result = self.run_benchmark()
                rps = benchmark_result.rps
                logger.info(f"Maximum achievable RPS on this machine: {rps}")

            pool = build_pool(self.config.local_addr_list)
            try:
                report = RateLimitedDispatcher(pool, rps).run(self.config.url, self.config.duration)
            finally:
                pool.close()

            return RunSummary(rps=rps, dispatch=report, benchmark=benchmark_result)

        except Exception as e:
            logger.error(f"Load test failed: {e}", stack_info=True)
            raise


def run(config: RunConfig) -> RunSummary:
    """Run a load test described by config."""
    return LoadTestRunner(config).run()
