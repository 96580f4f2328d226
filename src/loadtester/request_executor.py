"""Handles individual request execution and timing."""
import time
import logging

import requests

from .client_pool import AtomicCounter, ClientPool
from .exceptions import RequestError
from .models import RequestOutcome


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Sends one GET through a pool-selected client and times it."""

    def __init__(self, pool: ClientPool, counter: AtomicCounter):
        self.pool = pool
        self.counter = counter

    def send_request(self, url: str) -> RequestOutcome:
        """
        Send a single GET request and measure latency.

        The response body is discarded and the connection released before
        returning.

        Args:
            url: Target URL.

        Returns:
            RequestOutcome with status code and latency in seconds.

        Raises:
            RequestError: If the transport fails.
        """
        client = self.pool.select(self.counter)
        start_time = time.perf_counter()
        try:
            response = client.get(url)
        except requests.RequestException as e:
            raise RequestError(url, f"Request to {url} via {client.spec.describe()} failed: {e}") from e
        status_code = response.status_code
        response.close()

        end_time = time.perf_counter()
        return RequestOutcome(status_code=status_code, latency=end_time - start_time)
