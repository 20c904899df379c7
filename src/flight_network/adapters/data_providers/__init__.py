"""
Data provider adapters for flight network sources.
"""

from src.flight_network.adapters.data_providers.csv_provider import (
    CsvNetworkProvider,
)
from src.flight_network.adapters.data_providers.in_memory_provider import (
    InMemoryNetworkProvider,
)
from src.flight_network.adapters.data_providers.indonesia_provider import (
    IndonesiaNetworkProvider,
)

__all__ = [
    "CsvNetworkProvider",
    "InMemoryNetworkProvider",
    "IndonesiaNetworkProvider",
]
