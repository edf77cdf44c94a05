"""
Unit Tests for the Request Signer

These tests verify that:
- The canonical URL has no "?" when there are no parameters
- Parameters are encoded in the order given
- The signature is HMAC-SHA512 over canonical URL + timestamp
- The signature changes whenever any input changes

Run with:
    pytest tests/unit/test_signer.py -v
"""

import hashlib
import hmac

import pytest

from ionomy.core.schemas import Credentials
from ionomy.signer import build_signed_headers, canonical_query, canonical_url, sign

BASE = "https://ionomy.com/api/v1/"


def reference_hmac(message: str, secret: str) -> str:
    return hmac.new(secret.encode(), message.encode(), hashlib.sha512).hexdigest()


class TestCanonicalUrl:
    """Tests for canonical query/URL construction"""

    def test_no_question_mark_without_params(self):
        assert canonical_url(BASE, "public/markets", {}) == "https://ionomy.com/api/v1/public/markets"

    def test_query_appended_with_question_mark(self):
        url = canonical_url(BASE, "account/balance", {"currency": "hive"})
        assert url == "https://ionomy.com/api/v1/account/balance?currency=hive"

    def test_query_keeps_insertion_order(self):
        params = {"price": "0.00005000", "market": "btc-hive", "amount": "1.00000000"}
        assert canonical_query(params) == "price=0.00005000&market=btc-hive&amount=1.00000000"

    def test_form_encoding(self):
        """Spaces become '+', reserved characters are percent-encoded"""
        query = canonical_query({"address": "a b&c=d/e~f*g"})
        assert query == "address=a+b%26c%3Dd%2Fe%7Ef*g"

    def test_scalar_values(self):
        assert canonical_query({"limit": 0, "flag": False, "on": True}) == "limit=0&flag=false&on=true"


class TestSign:
    """Tests for sign()"""

    def test_matches_reference_hmac(self):
        token = sign(BASE, "account/balance", {"currency": "hive"}, 1704110400, "secret")
        expected = reference_hmac("https://ionomy.com/api/v1/account/balance?currency=hive1704110400", "secret")
        assert token == expected

    def test_empty_params_signs_url_without_question_mark(self):
        token = sign(BASE, "account/balances", {}, 1704110400, "secret")
        expected = reference_hmac("https://ionomy.com/api/v1/account/balances1704110400", "secret")
        assert token == expected

    def test_output_is_lowercase_hex(self):
        token = sign(BASE, "account/balances", {}, 1, "secret")
        assert len(token) == 128
        assert token == token.lower()
        int(token, 16)

    def test_is_deterministic(self):
        args = (BASE, "market/buy-limit", {"market": "btc-hive", "amount": "1.00000000"}, 1704110400, "s")
        assert sign(*args) == sign(*args)

    @pytest.mark.parametrize("changed", [
        ("https://example.com/api/v1/", "market/buy-limit", {"market": "btc-hive"}, 1704110400, "s"),
        (BASE, "market/sell-limit", {"market": "btc-hive"}, 1704110400, "s"),
        (BASE, "market/buy-limit", {"market": "btc-bit"}, 1704110400, "s"),
        (BASE, "market/buy-limit", {"market": "btc-hive"}, 1704110401, "s"),
        (BASE, "market/buy-limit", {"market": "btc-hive"}, 1704110400, "t"),
    ])
    def test_any_input_change_changes_signature(self, changed):
        original = sign(BASE, "market/buy-limit", {"market": "btc-hive"}, 1704110400, "s")
        assert sign(*changed) != original


class TestBuildSignedHeaders:
    """Tests for SignedHeaders construction"""

    def test_headers_carry_time_key_and_token(self):
        creds = Credentials(api_key="key", api_secret="secret")
        signed = build_signed_headers(BASE, "account/balances", {}, creds, 1704110400)

        assert signed.auth_time == 1704110400
        assert signed.auth_key == "key"
        assert signed.auth_token == sign(BASE, "account/balances", {}, 1704110400, "secret")

        headers = signed.to_headers()
        assert headers == {
            "api-auth-time": "1704110400",
            "api-auth-key": "key",
            "api-auth-token": signed.auth_token,
        }

    def test_secret_not_in_repr(self):
        creds = Credentials(api_key="key", api_secret="very-secret")
        assert "very-secret" not in repr(creds)
