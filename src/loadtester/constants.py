"""Constants for the load generation engine."""
import os


class LoadTestConstants:
    """Centralized constants for the load generation engine."""
    REQUEST_TIMEOUT = 30  # seconds, end-to-end per request
    MAX_RETRIES = 0  # every tick is a single best-effort attempt
    EPHEMERAL_PORT = 0
    WORKERS_PER_CPU = 10
    CONNECTION_POOL_SIZE = 100
    PERCENTILES = (50, 90, 95)
    COMPLETION_MESSAGE = "Load test finished"

    @staticmethod
    def benchmark_workers() -> int:
        """Worker count for the saturation benchmark, sized by available CPUs."""
        return (os.cpu_count() or 1) * LoadTestConstants.WORKERS_PER_CPU

    @staticmethod
    def pool_size_for(workers: int) -> int:
        """Connections per client so that no concurrent worker has its connection discarded."""
        return max(workers, LoadTestConstants.CONNECTION_POOL_SIZE)
