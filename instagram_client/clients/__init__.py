"""
Client adapters: the Graph API client, its transport and the thread-safe wrapper.
"""

__all__ = [
    "graph_client",
    "synchronized_client",
    "transport",
]
