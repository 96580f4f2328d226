"""Command line entry point for the load tester."""
import argparse
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from src.const import APP_DESCRIPTION, APP_NAME, EXIT_CONFIG_ERROR, EXIT_OK
from src.shared.config import RunConfig
from src.shared.logging import LoggingManager

from .exceptions import ConfigurationError
from .runner import LoadTestRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument("--url", help="URL to test (required)")
    parser.add_argument("--rps", type=int, help="Requests per second (ignored when --benchmark is set)")
    parser.add_argument("--duration", type=int, help="Test duration in seconds")
    parser.add_argument("--benchmark", action="store_true", default=None,
                        help="Run a saturation benchmark first and use its RPS for the test")
    parser.add_argument("--bench-duration", "--benchDuration", dest="bench_duration", type=int, help="Benchmark duration in seconds")
    parser.add_argument("--local-addrs", "--localAddrs", dest="local_addrs",
                        help="Comma-separated local addresses to send requests from")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def load_config(args: argparse.Namespace) -> RunConfig:
    """Build the run configuration; unset flags fall back to env, file and defaults."""
    overrides: Dict[str, Any] = {key: value for key, value in vars(args).items() if value is not None}
    return RunConfig(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    LoggingManager.setup_logging(config.log_level, config.library_log_levels)

    try:
        summary = LoadTestRunner(config).run()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if summary.benchmark is not None:
        print(f"Maximum achievable RPS on this machine: {summary.rps}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
