"""
Ionomy REST API Client

This module provides an async HTTP client for the Ionomy exchange API.
It handles:
- Request signing (api-auth-* headers) when credentials are configured
- The {success, message, data} response envelope
- Argument validation for every endpoint

API Root:
    https://ionomy.com/api/v1/

Wire Format:
    Every endpoint is a GET. All parameters, including those of order
    placement and withdrawals, travel in the query string.

Errors:
    ArgumentError  - raised when an endpoint method is called, before any I/O
    ApiError       - the envelope reported success: false
    aiohttp errors - network/HTTP failures, propagated unchanged

    There is no retry, caching or rate limiting here.

Usage:
    async with IonomyAPIClient(api_key="...", api_secret="...") as client:
        markets = await client.markets()
        order = await client.limit_buy("btc-hive", "1", "0.00005")
"""

import time
from typing import Any, Awaitable, Dict, Mapping, Optional, Union

import aiohttp
from yarl import URL

from ionomy.core.config import Settings, settings as default_settings
from ionomy.core.errors import ApiError
from ionomy.core.logging import get_logger, log_api_request, log_api_response
from ionomy.core.schemas import ClientConfig, ResponseEnvelope
from ionomy.core.utils.params import require, require_choice, sanitize_params, to_fixed_8
from ionomy.core.utils.time import current_utc_timestamp
from ionomy.signer import build_signed_headers, canonical_url

Number = Union[str, int, float]

ORDER_BOOK_TYPES = ("ask", "bid", "both")


class IonomyAPIClient:
    """
    Async HTTP client for the Ionomy API

    Each endpoint method validates its arguments immediately and returns an
    awaitable resolving to the envelope's data payload, unchanged.

    Attributes:
        config: Immutable ClientConfig (base URL, credentials, keep-alive, timeout)
        session: aiohttp ClientSession, open between __aenter__ and __aexit__
        logger: Logger instance for debugging

    Example:
        >>> async with IonomyAPIClient() as client:
        ...     book = await client.order_book("btc-hive", type="bid")

    Notes:
        - Uses context manager for automatic session cleanup
        - Without both api_key and api_secret requests are sent unsigned
          and only public endpoints will succeed
        - Instances share nothing; create one per configuration
    """

    def __init__(self, config: Optional[ClientConfig] = None, **overrides: Any):
        """
        Initialize the client.

        Args:
            config: Client configuration (defaults to ClientConfig())
            **overrides: ClientConfig fields, e.g. api_key="...", keep_alive=False
        """
        if config is None:
            config = ClientConfig(**overrides)
        elif overrides:
            config = ClientConfig(**{**config.model_dump(), **overrides})

        self.config = config
        self.logger = get_logger(__name__)
        self.session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides: Any) -> "IonomyAPIClient":
        """Build a client from environment settings (IONOMY_* variables)"""
        return cls((settings or default_settings).client_config(**overrides))

    @property
    def base_url(self) -> str:
        return self.config.api

    @property
    def authenticated(self) -> bool:
        return self.config.credentials is not None

    # ============================================
    # Session Management
    # ============================================

    async def open(self) -> "IonomyAPIClient":
        """
        Create the HTTP session (connection pool).

        Keep-alive is controlled by config.keep_alive; the configured timeout
        applies to every request made through the session.
        """
        if self.session is None:
            connector = aiohttp.TCPConnector(force_close=not self.config.keep_alive)
            self.session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout)
            )
            self.logger.debug("IonomyAPIClient session created")
        return self

    async def close(self) -> None:
        """Close the HTTP session if open"""
        if self.session:
            await self.session.close()
            self.session = None
            self.logger.debug("IonomyAPIClient session closed")

    async def __aenter__(self):
        return await self.open()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ============================================
    # Request Pipeline
    # ============================================

    def _auth_headers(self, endpoint: str, params: Mapping[str, Any]) -> Dict[str, str]:
        credentials = self.config.credentials
        if credentials is None:
            return {}

        signed = build_signed_headers(
            self.base_url,
            endpoint,
            params,
            credentials,
            current_utc_timestamp()
        )
        return signed.to_headers()

    async def _read_envelope(self, resp: aiohttp.ClientResponse, endpoint: str) -> ResponseEnvelope:
        """
        Parse the response body as an envelope.

        A non-2xx response is still read as an envelope when it has one, so
        the server's message reaches the caller. Otherwise the HTTP error is
        raised by aiohttp's raise_for_status().
        """
        try:
            payload = await resp.json(content_type=None)
        except ValueError:
            resp.raise_for_status()
            raise

        if not isinstance(payload, dict):
            resp.raise_for_status()
            raise ApiError("Unexpected response format", endpoint=endpoint, status=resp.status)

        return ResponseEnvelope.model_validate(payload)

    async def request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Send a GET request and unwrap the response envelope.

        Steps:
            1. Drop None-valued params (order of the rest is preserved)
            2. Sign the canonical URL when credentials are configured
            3. GET the canonical URL, pre-encoded so the wire bytes match
               the signed string
            4. Return envelope.data, or raise ApiError on success: false

        Args:
            endpoint: Endpoint path relative to the base URL (e.g. "public/markets")
            params: Query parameters

        Returns:
            The envelope's data payload

        Raises:
            RuntimeError: If the session has not been opened
            ApiError: If the envelope reports failure
            aiohttp.ClientError: On network or HTTP failure
            json.JSONDecodeError: If a 2xx response body is not JSON (a ValueError,
                not an aiohttp error)
        """
        if not self.session:
            raise RuntimeError("Client session not initialized. Use 'async with' statement.")

        params = sanitize_params(params)
        headers = self._auth_headers(endpoint, params)
        url = canonical_url(self.base_url, endpoint, params)

        log_api_request(endpoint, params, signed=bool(headers))
        started = time.monotonic()

        async with self.session.get(URL(url, encoded=True), headers=headers) as resp:
            log_api_response(endpoint, resp.status, time.monotonic() - started)
            envelope = await self._read_envelope(resp, endpoint)

        if not envelope.success:
            raise ApiError(envelope.message or "Request failed", endpoint=endpoint, status=resp.status)

        return envelope.data

    # ============================================
    # Public Endpoints
    # ============================================

    def markets(self) -> Awaitable[Any]:
        """
        List all available markets.

        Ionomy Endpoint:
            GET public/markets
        """
        return self.request("public/markets")

    def currencies(self) -> Awaitable[Any]:
        """List available currencies (GET public/currencies)"""
        return self.request("public/currencies")

    def order_book(self, market: str, type: str = "both") -> Awaitable[Any]:
        """
        Fetch the order book of a market.

        Args:
            market: Market name (e.g., "btc-hive")
            type: Side of the book: "ask", "bid" or "both"

        Raises:
            ArgumentError: If market is missing or type is not allowed

        Ionomy Endpoint:
            GET public/orderbook?market=...&type=...

        Example:
            >>> book = await client.order_book("btc-hive", type="ask")
        """
        require(market=market)
        require_choice("type", type, ORDER_BOOK_TYPES)

        return self.request("public/orderbook", {"market": market, "type": type})

    def market_summaries(self) -> Awaitable[Any]:
        """Summaries of every market (GET public/markets-summaries)"""
        return self.request("public/markets-summaries")

    def market_summary(self, market: str) -> Awaitable[Any]:
        """Summary of a single market"""
        require(market=market)

        return self.request("public/market-summary", {"market": market})

    def market_history(self, market: str) -> Awaitable[Any]:
        """Trade history of a market"""
        require(market=market)

        return self.request("public/market-history", {"market": market})

    # ============================================
    # Market (Trading) Endpoints
    # ============================================

    def _limit_order(self, endpoint: str, market: str, amount: Number, price: Number) -> Awaitable[Any]:
        require(market=market, amount=amount, price=price)

        params = {
            "market": market,
            "amount": to_fixed_8(amount),
            "price": to_fixed_8(price),
        }
        return self.request(endpoint, params)

    def limit_buy(self, market: str, amount: Number, price: Number) -> Awaitable[Any]:
        """
        Place a limit buy order.

        Amount and price are sent as 8-decimal strings.

        Args:
            market: Market identifier (e.g., "btc-hive")
            amount: Amount to buy (e.g., "1" or 1.5)
            price: Limit price (e.g., "0.00005")

        Returns:
            Awaitable resolving to the created order (contains orderId)

        Ionomy Endpoint:
            GET market/buy-limit?market=btc-hive&amount=1.00000000&price=0.00005000
        """
        return self._limit_order("market/buy-limit", market, amount, price)

    def limit_sell(self, market: str, amount: Number, price: Number) -> Awaitable[Any]:
        """Place a limit sell order (same arguments as limit_buy)"""
        return self._limit_order("market/sell-limit", market, amount, price)

    def cancel_order(self, order_id: str) -> Awaitable[Any]:
        """
        Cancel an order.

        Args:
            order_id: Order ID (e.g., "5b8e8c980e454f2b807863ee")
        """
        require(orderId=order_id)

        return self.request("market/cancel-order", {"orderId": order_id})

    def open_orders(self, market: str) -> Awaitable[Any]:
        """Open orders of the account on a market"""
        require(market=market)

        return self.request("market/open-orders", {"market": market})

    # ============================================
    # Account Endpoints
    # ============================================

    def balances(self) -> Awaitable[Any]:
        """All balances of the account"""
        return self.request("account/balances")

    def balance(self, currency: str) -> Awaitable[Any]:
        """
        Balance of a single currency.

        Args:
            currency: Currency identifier (e.g., "hive")

        Raises:
            ArgumentError: If currency is missing (raised at call time)
        """
        require(currency=currency)

        return self.request("account/balance", {"currency": currency})

    def deposit_address(self, currency: str) -> Awaitable[Any]:
        require(currency=currency)

        return self.request("account/deposit-address", {"currency": currency})

    def deposit_history(self, currency: str) -> Awaitable[Any]:
        require(currency=currency)

        return self.request("account/deposit-history", {"currency": currency})

    def withdraw(self, currency: str, amount: Number, address: str) -> Awaitable[Any]:
        """
        Request a withdrawal.

        Args:
            currency: Currency identifier (e.g., "hive")
            amount: Amount to withdraw, sent as an 8-decimal string
            address: Destination wallet address

        Ionomy Endpoint:
            GET account/withdraw?currency=...&amount=...&address=...
        """
        require(currency=currency, amount=amount, address=address)

        params = {
            "currency": currency,
            "amount": to_fixed_8(amount),
            "address": address,
        }
        return self.request("account/withdraw", params)

    def withdrawal_history(self, currency: str) -> Awaitable[Any]:
        require(currency=currency)

        return self.request("account/withdrawal-history", {"currency": currency})

    def order(self, order_id: str) -> Awaitable[Any]:
        """Status of a single order"""
        require(orderId=order_id)

        return self.request("account/order", {"orderId": order_id})

    def order_history(self, market: str) -> Awaitable[Any]:
        """Order history of the account on a market"""
        require(market=market)

        return self.request("account/order-history", {"market": market})


def create_client(config: Optional[ClientConfig] = None, **overrides: Any) -> IonomyAPIClient:
    """
    Create an independent client instance.

    Example:
        >>> client = create_client(api_key="key", api_secret="secret", keep_alive=False)
    """
    return IonomyAPIClient(config, **overrides)
