"""Custom exceptions for the load tester."""


class LoadTestError(Exception):
    """Base class for load tester errors."""
    pass


class ConfigurationError(LoadTestError, ValueError):
    """Exception raised when run parameters make a run impossible."""
    pass


class AddressResolutionError(LoadTestError):
    """Exception raised when a local bind address cannot be resolved."""

    def __init__(self, address: str, reason: str):
        super().__init__(f"Cannot resolve local address {address!r}: {reason}")
        self.address = address
        self.reason = reason


class RequestError(LoadTestError):
    """Exception raised when a request fails."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url
