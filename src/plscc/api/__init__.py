"""
Relay HTTP service and its client.

The server module is not imported here so the Streamlit shell can use
the client without FastAPI.
"""

from .client import CONNECTION_ERROR, RelayClient

__all__ = [
    "CONNECTION_ERROR",
    "RelayClient",
]
