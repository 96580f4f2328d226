"""Manages HTTP request sessions bound to local source addresses."""
import logging
from typing import Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .constants import LoadTestConstants


# Configure logging
logger = logging.getLogger(__name__)


class SourceAddressAdapter(HTTPAdapter):
    """HTTP adapter whose connections originate from a fixed local address."""

    def __init__(self, source_address: Optional[Tuple[str, int]] = None, **kwargs):
        self.source_address = source_address
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        if self.source_address is not None:
            pool_kwargs["source_address"] = self.source_address
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)


class RequestSessionManager:
    """Manages HTTP request sessions for pool clients."""

    @staticmethod
    def create_session(
        source_address: Optional[Tuple[str, int]] = None,
        max_retries: int = LoadTestConstants.MAX_RETRIES,
        pool_size: int = LoadTestConstants.CONNECTION_POOL_SIZE,
    ) -> requests.Session:
        """Create a requests session, optionally bound to a local address."""
        session = requests.Session()
        retry = Retry(total=max_retries, raise_on_status=False)
        adapter = SourceAddressAdapter(
            source_address=source_address,
            max_retries=retry,
            pool_connections=pool_size,
            pool_maxsize=pool_size,
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        if source_address is not None:
            logger.debug(f"Session bound to local address {source_address[0]}:{source_address[1]}")
        return session
