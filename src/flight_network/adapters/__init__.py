"""
Adapter implementations for the Flight Network.

Adapters are concrete implementations of the port interfaces. They
handle the specifics of data sources, algorithms, caching and the
background worker.
"""
