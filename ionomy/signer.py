"""
Request Signer

Signed requests carry three headers:

    api-auth-time   unix time in whole seconds
    api-auth-key    the API key
    api-auth-token  hex HMAC-SHA512 of (canonical URL + api-auth-time)

The canonical URL is base URL + endpoint path + "?" + form-encoded query,
with the "?" omitted when there are no parameters. The server rebuilds the
same string from the request it receives, so the query here is also the one
sent on the wire (see IonomyAPIClient.request).

Example:
    >>> token = sign("https://ionomy.com/api/v1/", "account/balance",
    ...              {"currency": "hive"}, 1704110400, "secret")
    >>> len(token)
    128
"""

import hashlib
import hmac
from typing import Any, Mapping
from urllib.parse import quote_plus

from ionomy.core.schemas import Credentials, SignedHeaders


def _form_quote(value: str) -> str:
    # application/x-www-form-urlencoded as browsers produce it: only
    # alphanumerics and *-._ stay literal, spaces become "+"
    return quote_plus(value, safe="*").replace("~", "%7E")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def canonical_query(params: Mapping[str, Any]) -> str:
    """
    Form-encode params in the order given.

    Example:
        >>> canonical_query({"market": "btc-hive", "amount": "1.00000000"})
        'market=btc-hive&amount=1.00000000'
    """
    return "&".join(
        f"{_form_quote(str(key))}={_form_quote(_query_value(value))}"
        for key, value in params.items()
    )


def canonical_url(base_path: str, endpoint_path: str, params: Mapping[str, Any]) -> str:
    """
    Build the exact URL that is both requested and signed.

    Example:
        >>> canonical_url("https://ionomy.com/api/v1/", "public/markets", {})
        'https://ionomy.com/api/v1/public/markets'
    """
    query = canonical_query(params)
    url = f"{base_path}{endpoint_path}"
    return f"{url}?{query}" if query else url


def sign(
    base_path: str,
    endpoint_path: str,
    params: Mapping[str, Any],
    timestamp_seconds: int,
    secret: str
) -> str:
    """
    Compute the api-auth-token for a request.

    Args:
        base_path: API base URL (e.g. "https://ionomy.com/api/v1/")
        endpoint_path: Endpoint path (e.g. "account/balance")
        params: Sanitized query parameters, in wire order
        timestamp_seconds: Unix time in whole seconds
        secret: API secret used as the HMAC key

    Returns:
        Lowercase hex HMAC-SHA512 digest
    """
    message = f"{canonical_url(base_path, endpoint_path, params)}{int(timestamp_seconds)}"
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest()


def build_signed_headers(
    base_path: str,
    endpoint_path: str,
    params: Mapping[str, Any],
    credentials: Credentials,
    timestamp_seconds: int
) -> SignedHeaders:
    """Sign a request and wrap the result with the key and timestamp"""
    return SignedHeaders(
        auth_time=int(timestamp_seconds),
        auth_key=credentials.api_key,
        auth_token=sign(base_path, endpoint_path, params, timestamp_seconds, credentials.api_secret),
    )
