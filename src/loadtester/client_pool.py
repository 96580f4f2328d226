"""Pool of outbound HTTP clients with round-robin selection."""
import logging
import socket
import threading
from typing import Iterator, List, Optional, Sequence, Tuple

import requests

from .constants import LoadTestConstants
from .exceptions import AddressResolutionError, ConfigurationError
from .models import ClientSpec
from .request_session_manager import RequestSessionManager


# Configure logging
logger = logging.getLogger(__name__)


class AtomicCounter:
    """Monotonic counter shared by concurrent workers."""

    def __init__(self, initial: int = 0):
        self._value = initial
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


def split_host_port(address: str) -> Tuple[str, int]:
    """
    Split a local address into host and port.

    Accepts ``host``, ``host:port``, a bare IPv6 literal and ``[v6]:port``.
    A missing port becomes the ephemeral port 0.

    Raises:
        AddressResolutionError: If the address is malformed.
    """
    address = address.strip()
    if address.startswith("["):
        host, closed, rest = address[1:].partition("]")
        if not closed:
            raise AddressResolutionError(address, "missing ']' in IPv6 address")
        if not rest:
            return host, LoadTestConstants.EPHEMERAL_PORT
        if not rest.startswith(":"):
            raise AddressResolutionError(address, f"unexpected {rest!r} after IPv6 address")
        port_text = rest[1:]
    elif address.count(":") == 1:
        host, port_text = address.split(":")
    else:
        # Plain host name, IPv4 literal or bare IPv6 literal
        return address, LoadTestConstants.EPHEMERAL_PORT

    if not host:
        raise AddressResolutionError(address, "missing host")
    try:
        port = int(port_text)
    except ValueError:
        raise AddressResolutionError(address, f"invalid port {port_text!r}") from None
    if not 0 <= port <= 65535:
        raise AddressResolutionError(address, f"port {port} out of range")
    return host, port


def resolve_local_address(address: str) -> Tuple[str, int]:
    """Resolve a local address string to a concrete (ip, port) endpoint."""
    host, port = split_host_port(address)
    if not host:
        raise AddressResolutionError(address, "empty address")
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as e:
        raise AddressResolutionError(address, str(e)) from e
    if not infos:
        raise AddressResolutionError(address, "no addresses returned")
    # IPv4 first, so a name like localhost does not bind IPv4 targets to ::1
    infos = sorted(infos, key=lambda info: info[0] != socket.AF_INET)
    sockaddr = infos[0][4]
    return sockaddr[0], sockaddr[1]


class HttpClient:
    """One outbound client: a session plus the spec it was built from."""

    def __init__(self, spec: ClientSpec, session: Optional[requests.Session] = None,
                 pool_size: int = LoadTestConstants.CONNECTION_POOL_SIZE):
        self.spec = spec
        if session is None:
            session = RequestSessionManager.create_session(spec.local_address, pool_size=pool_size)
        self.session = session

    def get(self, url: str) -> requests.Response:
        """Issue a GET with the client's end-to-end timeout."""
        return self.session.get(url, timeout=self.spec.timeout)

    def close(self) -> None:
        self.session.close()

    def __repr__(self) -> str:
        return f"HttpClient({self.spec.describe()})"


class ClientPool:
    """Read-only, non-empty sequence of clients selected round-robin."""

    def __init__(self, clients: Sequence[HttpClient]):
        if not clients:
            raise ConfigurationError("Client pool cannot be empty")
        self._clients = tuple(clients)

    def __len__(self) -> int:
        return len(self._clients)

    def __getitem__(self, index: int) -> HttpClient:
        return self._clients[index]

    def __iter__(self) -> Iterator[HttpClient]:
        return iter(self._clients)

    def select(self, counter: AtomicCounter) -> HttpClient:
        """Advance the shared counter and return the client at counter mod size."""
        return self._clients[counter.increment() % len(self._clients)]

    def close(self) -> None:
        for client in self._clients:
            client.close()


def build_pool(local_addrs: Optional[Sequence[str]] = None,
               pool_size: int = LoadTestConstants.CONNECTION_POOL_SIZE) -> ClientPool:
    """
    Build a client pool from local bind addresses.

    Addresses that fail to resolve are logged and skipped. When nothing usable
    remains the pool holds a single unbound client.

    Args:
        local_addrs: Local addresses, each ``host`` or ``host:port``.
        pool_size: Connections each client keeps open per host.

    Returns:
        A non-empty ClientPool.
    """
    clients: List[HttpClient] = []
    for address in local_addrs or []:
        try:
            local_address = resolve_local_address(address)
        except AddressResolutionError as e:
            logger.warning(f"Skipping local address: {e}")
            continue
        clients.append(HttpClient(ClientSpec(local_address=local_address), pool_size=pool_size))

    if not clients:
        clients.append(HttpClient(ClientSpec(), pool_size=pool_size))

    logger.debug(f"Client pool built: {[client.spec.describe() for client in clients]}")
    return ClientPool(clients)
