"""
Data Schemas

Pydantic models for the values that flow through one request:

    - Credentials: API key/secret pair used for signing
    - ClientConfig: immutable client configuration
    - SignedHeaders: the three authentication headers of a signed request
    - ResponseEnvelope: the {success, message, data} wrapper of every response

None of these is persisted; they are built per call (or once per client for
ClientConfig) and discarded.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_URL = "https://ionomy.com/api/v1/"


# ============================================
# Credentials
# ============================================

class Credentials(BaseModel):
    """
    API key and secret.

    The secret is only ever used as the HMAC key; it is excluded from repr
    so it does not end up in logs or tracebacks.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, description="Public API key")
    api_secret: str = Field(..., min_length=1, repr=False, description="API secret (HMAC key)")


# ============================================
# Client Configuration
# ============================================

class ClientConfig(BaseModel):
    """
    Immutable client configuration.

    Attributes:
        api: Base URL of the API, always ending with "/"
        api_key: Optional API key
        api_secret: Optional API secret
        keep_alive: Reuse connections between requests
        request_timeout: Total timeout per request in seconds (None disables)

    Example:
        >>> config = ClientConfig(api_key="key", api_secret="secret")
        >>> config.api
        'https://ionomy.com/api/v1/'
        >>> config.credentials is not None
        True
    """

    model_config = ConfigDict(frozen=True)

    api: str = Field(default=DEFAULT_API_URL, description="API base URL")
    api_key: Optional[str] = Field(default=None, description="API key")
    api_secret: Optional[str] = Field(default=None, repr=False, description="API secret")
    keep_alive: bool = Field(default=True, description="Use persistent connections")
    request_timeout: Optional[float] = Field(default=30.0, description="Request timeout in seconds")

    @field_validator("api", mode="before")
    @classmethod
    def validate_api(cls, v: Optional[str]) -> str:
        """Fall back to the default URL and make sure it ends with a slash"""
        if not v:
            return DEFAULT_API_URL
        return v if v.endswith("/") else f"{v}/"

    @property
    def credentials(self) -> Optional[Credentials]:
        """Credentials when both key and secret are set, otherwise None"""
        if self.api_key and self.api_secret:
            return Credentials(api_key=self.api_key, api_secret=self.api_secret)
        return None


# ============================================
# Signed Headers
# ============================================

class SignedHeaders(BaseModel):
    """
    Authentication headers of a signed request.

    Attributes:
        auth_time: Unix time in whole seconds the signature was made for
        auth_key: API key
        auth_token: Lowercase hex HMAC-SHA512 signature
    """

    model_config = ConfigDict(frozen=True)

    auth_time: int
    auth_key: str
    auth_token: str

    def to_headers(self) -> Dict[str, str]:
        """
        Render the wire headers.

        Example:
            >>> SignedHeaders(auth_time=1, auth_key="k", auth_token="ab").to_headers()
            {'api-auth-time': '1', 'api-auth-key': 'k', 'api-auth-token': 'ab'}
        """
        return {
            "api-auth-time": str(self.auth_time),
            "api-auth-key": self.auth_key,
            "api-auth-token": self.auth_token,
        }


# ============================================
# Response Envelope
# ============================================

class ResponseEnvelope(BaseModel):
    """
    Wrapper returned by every endpoint.

    On success only data is meaningful; on failure only message is.
    A missing success field counts as failure.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    message: Optional[str] = None
    data: Any = None

    @field_validator("success", mode="before")
    @classmethod
    def coerce_success(cls, v: Any) -> bool:
        """Treat any falsy value (None, 0, "") as failure"""
        return bool(v)

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, v: Any) -> Optional[str]:
        """Keep the message readable even when the server sends a non-string"""
        if v is None or isinstance(v, str):
            return v
        return str(v)
