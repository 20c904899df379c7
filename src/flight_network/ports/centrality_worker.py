"""
Centrality Worker port interface.

The background execution unit of the centrality manager. Requests and
responses are the typed messages from schemas.messages; a worker never
raises for a bad request, it answers with CENTRALITY_ERROR instead.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future

from src.flight_network.schemas.messages import (
    CalculateCentralityRequest,
    CentralityErrorMessage,
    CentralityResultMessage,
)


class CentralityWorker(ABC):
    """
    Abstract interface for a single background computation context.

    Jobs serialize behind one worker; there is no pool.

    Implementations:
    - ThreadCentralityWorker: one dedicated thread
    """

    @abstractmethod
    def submit(
        self,
        request: CalculateCentralityRequest,
    ) -> "Future[CentralityResultMessage | CentralityErrorMessage]":
        """
        Queue a request.

        Returns:
            Future resolving to the response message. The future fails
            with WorkerCrashedError if the worker died while handling it.

        Raises:
            WorkerDispatchError: If the request could not be queued.
        """
        ...

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """True while the worker accepts requests."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Stop accepting requests and release the worker."""
        ...
