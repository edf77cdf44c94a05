"""
Ionomy API Client

Async client for the Ionomy exchange HTTP API: market data, order placement
and account queries, with HMAC-SHA512 request signing.

Usage:
    from ionomy import IonomyAPIClient

    async with IonomyAPIClient(api_key="...", api_secret="...") as client:
        balances = await client.balances()
"""

from ionomy.api_client import IonomyAPIClient, create_client
from ionomy.core.errors import ApiError, ArgumentError, IonomyError, TransportError
from ionomy.core.schemas import ClientConfig, Credentials, ResponseEnvelope, SignedHeaders
from ionomy.signer import sign

__version__ = "1.0.0"

__all__ = [
    "IonomyAPIClient",
    "create_client",
    "ClientConfig",
    "Credentials",
    "ResponseEnvelope",
    "SignedHeaders",
    "IonomyError",
    "ArgumentError",
    "ApiError",
    "TransportError",
    "sign",
]
