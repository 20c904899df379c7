"""
Thread-backed centrality worker.

One dedicated thread handles CALCULATE_CENTRALITY messages in arrival
order. Messages cross the boundary as plain dicts and are validated with
pydantic on both sides, the same contract a process or remote worker
would have.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from pydantic import ValidationError

from src.flight_network.adapters.algorithms.centrality_adapter import (
    compute_network_centrality,
)
from src.flight_network.ports.centrality_worker import CentralityWorker
from src.flight_network.schemas.airport import Airport, RouteEdge
from src.flight_network.schemas.centrality import NetworkAnalysisResult
from src.flight_network.schemas.messages import (
    CalculateCentralityRequest,
    CentralityErrorMessage,
    CentralityResultMessage,
    WorkerResponse,
    worker_response_adapter,
)
from src.network_graph.exceptions import WorkerCrashedError, WorkerDispatchError

logger = logging.getLogger(__name__)

ComputeFn = Callable[
    [Iterable[RouteEdge], Iterable[Airport], Optional[Mapping[str, float]]],
    NetworkAnalysisResult,
]


def _default_compute(
    routes: Iterable[RouteEdge],
    airports: Iterable[Airport],
    airline_speeds: Optional[Mapping[str, float]],
) -> NetworkAnalysisResult:
    return compute_network_centrality(routes, airports, airline_speeds)


def handle_message(
    message: Mapping[str, Any],
    compute: ComputeFn = _default_compute,
) -> Dict[str, Any]:
    """
    Handle one raw worker message and build the raw response.

    Never raises for a bad message or a failed computation: both come
    back as a CENTRALITY_ERROR response.

    Args:
        message: Raw request, e.g. ``{"type": "CALCULATE_CENTRALITY", ...}``.
        compute: Centrality computation to run.

    Returns:
        Raw CENTRALITY_RESULT or CENTRALITY_ERROR response.
    """
    try:
        request = CalculateCentralityRequest.model_validate(message)
    except ValidationError as e:
        logger.error("Rejected malformed worker message: %s", e)
        return CentralityErrorMessage.from_error(f"Invalid request: {e}").model_dump()

    try:
        result = compute(
            [r.to_route() for r in request.routes],
            [a.to_airport() for a in request.airports],
            request.airline_speeds,
        )
    except Exception as e:
        logger.error("Centrality computation failed in worker: %s", e)
        return CentralityErrorMessage.from_error(str(e)).model_dump()

    return CentralityResultMessage(payload=result).model_dump()


class ThreadCentralityWorker(CentralityWorker):
    """
    Background worker on a single-thread executor.

    Attributes:
        _executor: Executor with exactly one thread.
        _compute: Computation run for each request.
        _closed: Set once close() was called.
    """

    def __init__(self, compute: ComputeFn = _default_compute) -> None:
        """
        Initialize the worker.

        Args:
            compute: Centrality computation; replaceable for tests.
        """
        self._compute = compute
        self._closed = False
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="centrality-worker"
        )

    def submit(self, request: CalculateCentralityRequest) -> "Future[WorkerResponse]":
        if self._closed:
            raise WorkerDispatchError("worker is closed")

        raw = request.model_dump()
        try:
            return self._executor.submit(self._run, raw)
        except RuntimeError as e:
            raise WorkerDispatchError(str(e)) from e

    def _run(self, raw: Dict[str, Any]) -> WorkerResponse:
        logger.debug(
            "Worker handling %s with %d routes",
            raw.get("type"),
            len(raw.get("routes", [])),
        )
        try:
            response = handle_message(raw, self._compute)
            return worker_response_adapter.validate_python(response)
        except Exception as e:
            raise WorkerCrashedError(str(e)) from e

    @property
    def is_available(self) -> bool:
        return not self._closed

    def close(self) -> None:
        """Stop accepting requests; queued requests still run."""
        self._closed = True
        self._executor.shutdown(wait=False)
        logger.debug("Centrality worker closed")
