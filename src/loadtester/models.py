"""Data models for the load tester."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .constants import LoadTestConstants


@dataclass(frozen=True)
class ClientSpec:
    """Local bind address and timeout for one pool client."""
    local_address: Optional[Tuple[str, int]] = None
    timeout: float = LoadTestConstants.REQUEST_TIMEOUT

    @property
    def is_bound(self) -> bool:
        return self.local_address is not None

    def describe(self) -> str:
        if self.local_address is None:
            return "default"
        host, port = self.local_address
        return f"{host}:{port}"


@dataclass
class LatencyResults:
    """Container for latency percentiles."""
    p50: float
    p90: float
    p95: float


@dataclass(frozen=True)
class RequestOutcome:
    """Result of a single request-response cycle."""
    status_code: Optional[int] = None
    latency: float = 0.0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BenchmarkResult:
    """Outcome of a saturation benchmark."""
    completed: int
    failed: int
    duration: int
    workers: int

    @property
    def rps(self) -> int:
        return self.completed // self.duration


class DispatcherState(Enum):
    """Lifecycle of the rate-limited dispatcher."""
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"


@dataclass
class DispatchReport:
    """Aggregated outcome of a rate-limited dispatch run."""
    rps: int
    duration: int
    ticks: int = 0
    succeeded: int = 0
    failed: int = 0
    status_counts: Dict[int, int] = field(default_factory=dict)
    latency: Optional[LatencyResults] = None


@dataclass
class RunSummary:
    """Everything a run produced: the effective rate and both phase results."""
    rps: int
    dispatch: DispatchReport
    benchmark: Optional[BenchmarkResult] = None
