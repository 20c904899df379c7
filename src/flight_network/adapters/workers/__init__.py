"""
Background worker adapters for centrality computation.
"""

from src.flight_network.adapters.workers.thread_worker import (
    ThreadCentralityWorker,
    handle_message,
)

__all__ = [
    "ThreadCentralityWorker",
    "handle_message",
]
