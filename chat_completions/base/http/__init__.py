"""HTTP utilities package for the client.

Exposes the transport configuration and the async client factory.
"""

from .client import TransportConfig, build_async_client, owns_client

__all__ = ["TransportConfig", "build_async_client", "owns_client"]
