"""
Custom exceptions for the network_graph module.

Not-found conditions (unknown airport, disconnected endpoints) are never
raised; they are encoded as ``None`` or empty results. These exceptions
cover programming errors and failed centrality computations.
"""


class NetworkGraphError(Exception):
    """Base exception for all network_graph module errors."""

    pass


class InvalidPathRequestError(NetworkGraphError, ValueError):
    """Raised when a path search is called with invalid arguments."""

    def __init__(self, parameter_name: str, message: str = "") -> None:
        self.parameter_name = parameter_name
        message = message or f"Invalid path request parameter: {parameter_name}"
        super().__init__(message)


class CentralityComputationError(NetworkGraphError):
    """Raised when centrality could not be computed, fallback included."""

    def __init__(self, message: str, cache_key: str | None = None) -> None:
        self.cache_key = cache_key
        super().__init__(message)


class WorkerError(NetworkGraphError):
    """Base exception for background worker failures."""

    pass


class WorkerDispatchError(WorkerError):
    """Raised when a request cannot be handed to the background worker."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to communicate with worker: {reason}")


class WorkerCrashedError(WorkerError):
    """Raised when the background worker dies while handling a request."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Worker error: {reason}")
