"""Constants used across all test files."""

# Common test values
TEST_URL = "http://example.test/ok"
TEST_RPS = 5
TEST_DURATION = 2
TEST_BENCH_DURATION = 1
TEST_LOCAL_ADDR = "127.0.0.1"
TEST_LOCAL_ADDR_WITH_PORT = "127.0.0.1:0"
TEST_INVALID_ADDRS = ["127.0.0.1:notaport", "[::1", "10.0.0.1:70000"]

# Mock transport values
STATUS_OK = 200
STATUS_SERVER_ERROR = 503
CONNECTION_ERROR_MESSAGE = "connection refused"

# Timing tolerance for tick counts
TICK_TOLERANCE = 1
