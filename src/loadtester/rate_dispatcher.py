"""Issues requests at a fixed rate for a fixed window."""
import logging
import threading
import time
from collections import Counter
from typing import List, Optional

from .client_pool import AtomicCounter, ClientPool
from .constants import LoadTestConstants
from .exceptions import ConfigurationError, RequestError
from .latency_analyzer import LatencyAnalyzer
from .models import DispatcherState, DispatchReport, RequestOutcome
from .request_executor import RequestExecutor


# Configure logging
logger = logging.getLogger(__name__)


class DispatchUnit(threading.Thread):
    """One tick's request-response cycle, run on its own thread."""

    def __init__(self, request_executor: RequestExecutor, url: str, tick: int):
        super().__init__(name=f"dispatch-{tick}", daemon=True)
        self.request_executor = request_executor
        self.url = url
        self.tick = tick
        self.outcome: Optional[RequestOutcome] = None

    def run(self) -> None:
        try:
            outcome = self.request_executor.send_request(self.url)
        except RequestError as e:
            logger.error(f"Request failed: {e}")
            self.outcome = RequestOutcome(error=str(e))
            return
        except Exception as e:
            logger.exception(f"Request crashed: {e}")
            self.outcome = RequestOutcome(error=f"{type(e).__name__}: {e}")
            return
        logger.info(f"Response status: {outcome.status_code}")
        self.outcome = outcome


class RateLimitedDispatcher:
    """
    Fires one request per tick at a fixed rate until a duration timer expires.

    Each tick spawns a DispatchUnit and moves on without waiting for it, so
    slow responses pile up as concurrent in-flight requests. When the duration
    timer fires the dispatcher stops ticking (DRAINING), joins every unit it
    spawned and only then reports (DONE).
    """

    def __init__(self, pool: ClientPool, rps: int):
        if rps <= 0:
            raise ConfigurationError(f"Requests per second must be positive, got {rps}")
        self.pool = pool
        self.rps = rps
        self.interval = 1.0 / rps
        self.request_executor = RequestExecutor(pool, AtomicCounter())
        self.state: Optional[DispatcherState] = None

    def _drain(self, stop: threading.Event) -> None:
        self.state = DispatcherState.DRAINING
        stop.set()

    def _schedule(self, url: str, stop: threading.Event) -> List[DispatchUnit]:
        units: List[DispatchUnit] = []
        start = time.monotonic()
        slot = 0
        while True:
            slot += 1
            deadline = start + slot * self.interval
            if stop.wait(timeout=max(0.0, deadline - time.monotonic())):
                break
            unit = DispatchUnit(self.request_executor, url, len(units) + 1)
            unit.start()
            units.append(unit)
            # Missed slots are dropped rather than fired in a burst
            slot = max(slot, int((time.monotonic() - start) / self.interval))
        return units

    def run(self, url: str, duration: int) -> DispatchReport:
        """
        Run the fixed-rate test and wait for every spawned request.

        Args:
            url: Target URL.
            duration: Test length in seconds. Zero or less dispatches nothing.

        Returns:
            DispatchReport aggregated from every unit's outcome.
        """
        logger.info(f"Starting load test on {url}: {self.rps} requests per second for {duration}s")
        stop = threading.Event()
        self.state = DispatcherState.RUNNING

        watchdog = threading.Timer(max(duration, 0), self._drain, args=(stop,))
        watchdog.daemon = True
        if duration <= 0:
            self._drain(stop)
        else:
            watchdog.start()

        try:
            units = self._schedule(url, stop)
        finally:
            watchdog.cancel()

        self.state = DispatcherState.DRAINING
        for unit in units:
            unit.join()
        self.state = DispatcherState.DONE

        report = self._build_report(units, duration)
        logger.info(f"{LoadTestConstants.COMPLETION_MESSAGE}: {report.ticks} requests dispatched, "
                    f"{report.succeeded} succeeded, {report.failed} failed")
        return report

    def _build_report(self, units: List[DispatchUnit], duration: int) -> DispatchReport:
        outcomes = [unit.outcome for unit in units if unit.outcome is not None]
        successes = [outcome for outcome in outcomes if outcome.ok]
        return DispatchReport(
            rps=self.rps,
            duration=duration,
            ticks=len(units),
            succeeded=len(successes),
            failed=len(units) - len(successes),
            status_counts=dict(Counter(outcome.status_code for outcome in successes)),
            latency=LatencyAnalyzer.compute_percentiles([outcome.latency for outcome in successes]),
        )


def start_test(url: str, rps: int, duration: int, pool: ClientPool) -> DispatchReport:
    """Run a rate-limited test and return its report."""
    return RateLimitedDispatcher(pool, rps).run(url, duration)
