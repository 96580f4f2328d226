"""Constants for the HTTP load tester."""

# Default run configuration values
DEFAULT_RPS = 10
DEFAULT_DURATION = 10
DEFAULT_BENCHMARK = False
DEFAULT_BENCH_DURATION = 5
DEFAULT_LOCAL_ADDRS = ""

# Configuration sources
ENV_PREFIX = "LOADTESTER_"
CONFIG_FILE_NAME = "loadtester.json"
LOCAL_ADDRS_SEPARATOR = ","

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "urllib3": "WARNING",
    "urllib3.connectionpool": "WARNING",
}

# CLI exit codes
EXIT_OK = 0
EXIT_CONFIG_ERROR = 1

# Console script
APP_NAME = "loadtester"
APP_DESCRIPTION = "Issue HTTP GET requests at a fixed rate and report observed throughput"
APP_VERSION = "0.1.0"
