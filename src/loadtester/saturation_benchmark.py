"""Discovers the maximum request rate with an unthrottled burst of workers."""
import logging
import threading
import time
import concurrent.futures
from typing import Optional

from .client_pool import AtomicCounter, ClientPool
from .constants import LoadTestConstants
from .exceptions import ConfigurationError, RequestError
from .models import BenchmarkResult
from .request_executor import RequestExecutor


# Configure logging
logger = logging.getLogger(__name__)


class SaturationBenchmark:
    """Runs a fixed-duration burst of concurrent workers and counts completions."""

    def __init__(self, pool: ClientPool, workers: Optional[int] = None):
        self.pool = pool
        self.workers = workers if workers is not None else LoadTestConstants.benchmark_workers()
        self.request_executor = RequestExecutor(pool, AtomicCounter())
        self.completed = AtomicCounter()
        self.failed = AtomicCounter()

    def _worker(self, url: str, stop: threading.Event) -> None:
        # The stop signal is only checked between requests
        while not stop.is_set():
            try:
                self.request_executor.send_request(url)
            except RequestError as e:
                logger.error(f"Benchmark request failed: {e}")
                self.failed.increment()
                continue
            self.completed.increment()

    def run(self, url: str, duration: int) -> BenchmarkResult:
        """
        Hammer the URL with every worker for the given duration.

        Args:
            url: Target URL.
            duration: Benchmark length in seconds.

        Returns:
            BenchmarkResult with completions, failures and achieved RPS.

        Raises:
            ConfigurationError: If duration is not positive.
        """
        if duration <= 0:
            raise ConfigurationError(f"Benchmark duration must be positive, got {duration}")

        self.completed = AtomicCounter()
        self.failed = AtomicCounter()
        logger.info(f"Starting saturation benchmark on {url} for {duration}s with {self.workers} workers...")
        stop = threading.Event()
        with concurrent.futures.ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(self._worker, url, stop) for _ in range(self.workers)]
            try:
                time.sleep(duration)
            finally:
                # Workers loop until stopped, so this must run even on interrupt
                stop.set()
            for future in concurrent.futures.as_completed(futures):
                try:
                    future.result()
                except Exception as e:
                    logger.error(f"Benchmark worker crashed: {e}")

        result = BenchmarkResult(
            completed=self.completed.value,
            failed=self.failed.value,
            duration=duration,
            workers=self.workers,
        )
        logger.info(f"Benchmark finished: {result.rps} requests per second "
                    f"({result.completed} completed, {result.failed} failed)")
        return result


def benchmark(url: str, duration: int, pool: ClientPool, workers: Optional[int] = None) -> int:
    """Run a saturation benchmark and return the achieved requests per second."""
    return SaturationBenchmark(pool, workers=workers).run(url, duration).rps
