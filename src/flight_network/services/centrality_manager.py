"""
Centrality Manager - cached, single-flight centrality computation.

Coordinates:
- CentralityCache (content-addressed, TTL)
- CentralityWorker (one background execution context)
- the synchronous fallback on the caller's thread

Request flow for calculate_centrality:
1. Cache hit returns immediately.
2. A request for a key already in flight waits for that computation.
3. Otherwise the request goes to the worker. If no answer arrives within
   the timeout, the caller computes synchronously; the worker's late
   result is still cached when it arrives.
4. If the worker fails, the synchronous computation is tried once. If
   that fails too, every caller waiting on the key gets the error.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from functools import partial
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from src.flight_network.adapters.algorithms.centrality_adapter import (
    compute_network_centrality,
)
from src.flight_network.adapters.repositories.centrality_cache import (
    InMemoryCentralityCache,
)
from src.flight_network.ports.centrality_cache import CentralityCache
from src.flight_network.ports.centrality_worker import CentralityWorker
from src.flight_network.schemas.airport import (
    Airport,
    AirportInput,
    RouteEdge,
    RouteInput,
    coerce_airports,
    coerce_routes,
)
from src.flight_network.schemas.centrality import NetworkAnalysisResult
from src.flight_network.schemas.messages import (
    CalculateCentralityRequest,
    CentralityErrorMessage,
    CentralityResultMessage,
)
from src.network_graph.exceptions import (
    CentralityComputationError,
    WorkerDispatchError,
    WorkerError,
)
from src.network_graph.graph import DEFAULT_SPEED_KMH

logger = logging.getLogger(__name__)

DEFAULT_WORKER_TIMEOUT = 5.0

ComputeFn = Callable[..., NetworkAnalysisResult]


def centrality_cache_key(routes: Iterable[RouteEdge]) -> str:
    """
    Deterministic key for a route set.

    Hash of the serialized route list. Order matters: it fixes node order
    and with it tie-breaking, so a reordered list is a different key.
    """
    payload = json.dumps([r.to_dict() for r in routes], sort_keys=True)
    return "centrality_" + hashlib.md5(payload.encode()).hexdigest()


class CentralityManager:
    """
    Explicitly constructed centrality service with a close() lifecycle.

    Thread-safe: the in-flight map is guarded by a lock and the cache is
    thread-safe itself.

    Attributes:
        _cache: Result cache.
        _worker: Background worker, or None to always compute inline.
        _timeout: Seconds to wait for the worker.
        _compute: Synchronous computation.
        _inflight: cache key -> Future shared by all callers of that key.
    """

    def __init__(
        self,
        cache: Optional[CentralityCache] = None,
        worker: Optional[CentralityWorker] = None,
        timeout: float = DEFAULT_WORKER_TIMEOUT,
        compute: ComputeFn = compute_network_centrality,
        airline_speeds: Optional[Mapping[str, float]] = None,
        default_speed: float = DEFAULT_SPEED_KMH,
    ) -> None:
        """
        Initialize the manager.

        Args:
            cache: Result cache. Defaults to a 30-minute in-memory cache.
            worker: Background worker. None computes on the caller's thread.
            timeout: Seconds to wait for the worker before falling back.
            compute: Synchronous computation, called as
                ``compute(routes, airports, airline_speeds, default_speed)``.
            airline_speeds: Default speed table for requests without one.
            default_speed: Speed for airlines missing from the table.
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {timeout}")

        self._cache: CentralityCache = (
            cache if cache is not None else InMemoryCentralityCache()
        )
        self._worker = worker
        self._timeout = timeout
        self._compute = compute
        self._airline_speeds = dict(airline_speeds or {})
        self._default_speed = default_speed

        self._inflight: Dict[str, Future] = {}
        self._lock = threading.Lock()

        self._preload_executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="centrality-preload"
        )
        self._closed = False

    # =========================================================================
    # Public API
    # =========================================================================

    def calculate_centrality(
        self,
        routes: Iterable[RouteInput],
        airports: Iterable[AirportInput],
        airline_speeds: Optional[Mapping[str, float]] = None,
    ) -> NetworkAnalysisResult:
        """
        Centrality for a route set, from cache when possible.

        Args:
            routes: Route set to analyze.
            airports: Reference airports.
            airline_speeds: Speed table; defaults to the manager's.

        Returns:
            NetworkAnalysisResult. Repeated calls within the TTL return
            the same cached object.

        Raises:
            CentralityComputationError: If the computation failed on the
                worker (when used) and in the synchronous fallback.
        """
        route_list = coerce_routes(routes)
        key = centrality_cache_key(route_list)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Centrality cache hit: %s", key)
            return cached

        with self._lock:
            # Double-check after acquiring lock
            cached = self._cache.get(key)
            if cached is not None:
                return cached

            pending = self._inflight.get(key)
            is_owner = pending is None
            if is_owner:
                pending = Future()
                self._inflight[key] = pending

        if not is_owner:
            logger.debug("Joining in-flight centrality computation: %s", key)
            return pending.result()

        speeds = self._airline_speeds if airline_speeds is None else dict(airline_speeds)
        try:
            result = self._run(key, route_list, coerce_airports(airports), speeds)
        except Exception as e:
            error = (
                e
                if isinstance(e, CentralityComputationError)
                else CentralityComputationError(f"Centrality computation failed: {e}", key)
            )
            self._settle(key, pending, error=error)
            if error is e:
                raise
            raise error from e

        self._cache.set(key, result)
        self._settle(key, pending, result=result)
        return result

    def preload(
        self,
        routes: Iterable[RouteInput],
        airports: Iterable[AirportInput],
        airline_speeds: Optional[Mapping[str, float]] = None,
        block: bool = True,
    ) -> Optional[Future]:
        """
        Warm the cache for a route set.

        Failures are logged, never raised.

        Args:
            routes: Route set to analyze.
            airports: Reference airports.
            airline_speeds: Speed table; defaults to the manager's.
            block: If False, schedule in the background and return at once.

        Returns:
            None when blocking; otherwise a Future resolving to the result,
            or to None if the computation failed.
        """
        route_list = coerce_routes(routes)
        airport_list = coerce_airports(airports)

        if block:
            self._preload(route_list, airport_list, airline_speeds)
            return None

        return self._preload_executor.submit(
            self._preload, route_list, airport_list, airline_speeds
        )

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("Centrality cache cleared")

    def is_cached(self, routes: Iterable[RouteInput]) -> bool:
        key = centrality_cache_key(coerce_routes(routes))
        return not self._cache.is_stale(key)

    @property
    def inflight_count(self) -> int:
        with self._lock:
            return len(self._inflight)

    def close(self) -> None:
        """Stop the preload executor and the worker."""
        if self._closed:
            return
        self._closed = True
        self._preload_executor.shutdown(wait=False)
        if self._worker is not None:
            self._worker.close()
        logger.debug("Centrality manager closed")

    def __enter__(self) -> "CentralityManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Internals
    # =========================================================================

    def _preload(
        self,
        routes: List[RouteEdge],
        airports: List[Airport],
        airline_speeds: Optional[Mapping[str, float]],
    ) -> Optional[NetworkAnalysisResult]:
        start_time = time.perf_counter()
        try:
            result = self.calculate_centrality(routes, airports, airline_speeds)
        except CentralityComputationError as e:
            logger.error("Centrality preload failed: %s", e)
            return None
        logger.info(
            "Centrality preloaded for %d routes in %.1fms",
            len(routes),
            (time.perf_counter() - start_time) * 1000,
        )
        return result

    def _settle(
        self,
        key: str,
        pending: Future,
        result: Optional[NetworkAnalysisResult] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        """Release the key and wake every waiter."""
        with self._lock:
            self._inflight.pop(key, None)
        if error is not None:
            pending.set_exception(error)
        else:
            pending.set_result(result)

    def _run(
        self,
        key: str,
        routes: List[RouteEdge],
        airports: List[Airport],
        airline_speeds: Dict[str, float],
    ) -> NetworkAnalysisResult:
        if self._worker is None or not self._worker.is_available:
            return self._compute_sync(routes, airports, airline_speeds)

        request = CalculateCentralityRequest.create(routes, airports, airline_speeds)
        try:
            future = self._worker.submit(request)
        except WorkerDispatchError as e:
            logger.error("Worker dispatch failed for %s: %s", key, e)
            return self._fallback(key, routes, airports, airline_speeds, cause=e)

        try:
            response = future.result(timeout=self._timeout)
        except FutureTimeoutError:
            logger.warning(
                "Worker timed out after %.1fs, computing centrality synchronously",
                self._timeout,
            )
            future.add_done_callback(partial(self._cache_late_result, key))
            return self._compute_sync(routes, airports, airline_speeds)
        except WorkerError as e:
            logger.error("Worker failed for %s: %s", key, e)
            return self._fallback(key, routes, airports, airline_speeds, cause=e)

        if isinstance(response, CentralityErrorMessage):
            logger.error("Worker reported error for %s: %s", key, response.payload.error)
            return self._fallback(
                key,
                routes,
                airports,
                airline_speeds,
                cause=CentralityComputationError(response.payload.error, key),
            )

        return response.payload

    def _compute_sync(
        self,
        routes: List[RouteEdge],
        airports: List[Airport],
        airline_speeds: Dict[str, float],
    ) -> NetworkAnalysisResult:
        return self._compute(routes, airports, airline_speeds, self._default_speed)

    def _fallback(
        self,
        key: str,
        routes: List[RouteEdge],
        airports: List[Airport],
        airline_speeds: Dict[str, float],
        cause: Exception,
    ) -> NetworkAnalysisResult:
        """Synchronous retry after a worker failure."""
        try:
            return self._compute_sync(routes, airports, airline_speeds)
        except Exception as e:
            raise CentralityComputationError(
                f"Centrality computation failed: {cause}; fallback failed: {e}",
                cache_key=key,
            ) from e

    def _cache_late_result(self, key: str, future: Future) -> None:
        """Cache a worker result that arrived after the caller gave up."""
        if future.cancelled() or future.exception() is not None:
            return
        response = future.result()
        if isinstance(response, CentralityResultMessage) and self._cache.is_stale(key):
            self._cache.set(key, response.payload)
            logger.debug("Cached late worker result: %s", key)
