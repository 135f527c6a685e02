"""
Unit Tests for Request Signers

These tests verify that:
- Each signer assembles the exact message its exchange expects
- Signatures match recorded reference values (computed independently with openssl)
- Signatures are deterministic and change when any input changes

Run with:
    pytest tests/unit/test_signing.py -v
"""

import pytest

from core.signing import FcoinSigner, GateioSigner, Signer


SECRET = "test-secret"
SERVER_TIME_URL = "https://api.fcoin.com/v2/public/server-time"
ORDERS_URL = "https://api.fcoin.com/v2/orders"
ORDER_BODY = "amount=100.0&price=100.0&side=buy&symbol=btcusdt&type=limit"


# ============================================
# Fcoin (HMAC-SHA1, timestamp-bound)
# ============================================

class TestFcoinMessage:
    """Tests for FcoinSigner.build_message"""

    def test_get_without_query(self):
        """GET message: METHOD + URL + TIMESTAMP when there is no query"""
        signer = FcoinSigner(SECRET)
        message = signer.build_message("GET", SERVER_TIME_URL, 1000, "")
        assert message == "GEThttps://api.fcoin.com/v2/public/server-time1000"

    def test_get_with_query(self):
        """GET message puts '?query' between URL and timestamp"""
        signer = FcoinSigner(SECRET)
        message = signer.build_message("GET", ORDERS_URL, 1000, "limit=20&symbol=btcusdt")
        assert message == "GEThttps://api.fcoin.com/v2/orders?limit=20&symbol=btcusdt1000"

    def test_post_puts_body_after_timestamp(self):
        """POST message: METHOD + URL + TIMESTAMP + body"""
        signer = FcoinSigner(SECRET)
        message = signer.build_message("POST", ORDERS_URL, 1523069544359, ORDER_BODY)
        assert message == f"POST{ORDERS_URL}1523069544359{ORDER_BODY}"

    def test_method_is_upper_cased(self):
        signer = FcoinSigner(SECRET)
        assert signer.build_message("get", SERVER_TIME_URL, 1000, "").startswith("GET")


class TestFcoinSignature:
    """Tests for FcoinSigner.sign against recorded values"""

    def test_server_time_vector(self):
        """base64(HMAC-SHA1(secret, base64(message))) for the server-time example"""
        signer = FcoinSigner(SECRET)
        assert signer.sign("GET", SERVER_TIME_URL, 1000, "") == "EgLm8+FIT5MNfda248UEvVffbJA="

    def test_signed_get_with_query_vector(self):
        signer = FcoinSigner(SECRET)
        signature = signer.sign("GET", ORDERS_URL, 1000, "limit=20&states=submitted&symbol=btcusdt")
        assert signature == "DUaFrN/mjyAJFt6V13I4lOorSIw="

    def test_post_vector(self):
        signer = FcoinSigner(SECRET)
        assert signer.sign("POST", ORDERS_URL, 1523069544359, ORDER_BODY) == "EQB5X4bYhsUXxSnz8v/l17Hxhiw="

    def test_deterministic(self):
        signer = FcoinSigner(SECRET)
        first = signer.sign("POST", ORDERS_URL, 1, ORDER_BODY)
        assert all(signer.sign("POST", ORDERS_URL, 1, ORDER_BODY) == first for _ in range(5))

    @pytest.mark.parametrize("method,url,timestamp,body", [
        ("GET", ORDERS_URL, 1000, ORDER_BODY),
        ("POST", SERVER_TIME_URL, 1000, ORDER_BODY),
        ("POST", ORDERS_URL, 1001, ORDER_BODY),
        ("POST", ORDERS_URL, 1000, ORDER_BODY.replace("buy", "sell")),
    ])
    def test_any_input_change_changes_signature(self, method, url, timestamp, body):
        """Method, URL, timestamp and body all participate in the signature"""
        signer = FcoinSigner(SECRET)
        reference = signer.sign("POST", ORDERS_URL, 1000, ORDER_BODY)
        assert signer.sign(method, url, timestamp, body) != reference

    def test_secret_changes_signature(self):
        assert FcoinSigner("a").sign("GET", SERVER_TIME_URL, 1000, "") != \
            FcoinSigner("b").sign("GET", SERVER_TIME_URL, 1000, "")


# ============================================
# Gate.io (HMAC-SHA512 over decoded body)
# ============================================

class TestGateioSigner:
    """Tests for GateioSigner"""

    def test_message_is_url_decoded_body(self):
        """Only the decoded body is signed"""
        signer = GateioSigner(SECRET)
        message = signer.build_message("POST", "https://x/private/withdraw", None, "address=addr+1&currency=btc")
        assert message == "address=addr 1&currency=btc"

    def test_order_vector(self):
        signer = GateioSigner(SECRET)
        signature = signer.sign("POST", "", None, "amount=1&currencyPair=ltc_btc&orderType=&rate=0.023")
        assert signature == (
            "160dc81b86d90ef229a5d18bfb92afef3478c6b150f48e4bd3cbdbed3979462f"
            "c66f90cb32d31b7248213010696700a2648e78ea6c73a2d0a710d202373132f4"
        )

    def test_encoded_body_vector(self):
        """The signature is computed over the decoded form of the body"""
        signer = GateioSigner(SECRET)
        signature = signer.sign("POST", "", None, "address=addr+1&currency=btc")
        assert signature == (
            "429d594836830a88fd90d6e3adec11fad433ae30cac4302f3f729fbc891a0df2"
            "1b760da241b24e147fed6fe5715b1f85663f74ceb8e5a21f31e6f75bf5e5d818"
        )

    def test_empty_body_vector(self):
        signer = GateioSigner(SECRET)
        assert signer.sign("POST", "", None, "") == (
            "c0808ff7536f5f1daad4a5ef4452b9c7804b44ea29e509106ea392cfda7980f4"
            "54d5b3d188fe2b861f22bbf7a47843c0dca143ea6431104a46a86ac2caa0d086"
        )

    def test_method_url_and_timestamp_are_ignored(self):
        """No method, URL or timestamp is part of the Gate.io signature"""
        signer = GateioSigner(SECRET)
        body = "currency=BTC"
        assert signer.sign("POST", "https://a/", 1, body) == signer.sign("GET", "https://b/", 2, body)

    def test_body_change_changes_signature(self):
        signer = GateioSigner(SECRET)
        assert signer.sign("POST", "", None, "currency=BTC") != signer.sign("POST", "", None, "currency=ETH")


class TestSignerInterface:
    """Tests for the Signer base class"""

    def test_cannot_instantiate_abstract_signer(self):
        with pytest.raises(TypeError):
            Signer(SECRET)

    def test_repr_hides_secret(self):
        assert SECRET not in repr(FcoinSigner(SECRET))
        assert SECRET not in repr(GateioSigner(SECRET))
