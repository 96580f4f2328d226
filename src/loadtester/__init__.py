"""Load tester package initialization."""
from .models import (
    BenchmarkResult, ClientSpec, DispatcherState, DispatchReport, LatencyResults,
    RequestOutcome, RunSummary,
)
from .constants import LoadTestConstants
from .exceptions import AddressResolutionError, ConfigurationError, LoadTestError, RequestError
from .request_session_manager import RequestSessionManager, SourceAddressAdapter
from .client_pool import AtomicCounter, ClientPool, HttpClient, build_pool, resolve_local_address, split_host_port
from .request_executor import RequestExecutor
from .latency_analyzer import LatencyAnalyzer
from .saturation_benchmark import SaturationBenchmark, benchmark
from .rate_dispatcher import DispatchUnit, RateLimitedDispatcher, start_test
from .runner import LoadTestRunner, run

__all__ = [
    'BenchmarkResult',
    'ClientSpec',
    'DispatcherState',
    'DispatchReport',
    'LatencyResults',
    'RequestOutcome',
    'RunSummary',
    'LoadTestConstants',
    'AddressResolutionError',
    'ConfigurationError',
    'LoadTestError',
    'RequestError',
    'RequestSessionManager',
    'SourceAddressAdapter',
    'AtomicCounter',
    'ClientPool',
    'HttpClient',
    'build_pool',
    'resolve_local_address',
    'split_host_port',
    'RequestExecutor',
    'LatencyAnalyzer',
    'SaturationBenchmark',
    'benchmark',
    'DispatchUnit',
    'RateLimitedDispatcher',
    'start_test',
    'LoadTestRunner',
    'run',
]
