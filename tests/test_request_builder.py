import math

import pytest

from bridge_client.core.errors import InvalidAmount, UnsupportedCurrency
from bridge_client.models.constants import CURRENCIES, CRYPTO_CURRENCIES, is_supported
from bridge_client.services import request_builder


class TestParseAmount:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1", 1.0),
            ("0", 0.0),
            ("  2.5", 2.5),
            ("12abc", 12.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("1e", 1.0),
            ("-3", -3.0),
        ],
    )
    def test_numeric_prefix(self, raw, expected):
        assert request_builder.parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "-", ".", "e5"])
    def test_unparseable_is_nan(self, raw):
        assert math.isnan(request_builder.parse_amount(raw))

    def test_infinity(self):
        assert request_builder.parse_amount("Infinity") == math.inf
        assert request_builder.parse_amount("-Infinity") == -math.inf


class TestBuild:
    def test_builds_request(self):
        req = request_builder.build("1", "BTC", "USD")
        assert req.amount == 1.0
        assert req.from_currency == "BTC"
        assert req.to_currency == "USD"

    def test_zero_amount_is_forwarded(self):
        assert request_builder.build("0", "BTC", "USD").amount == 0.0

    def test_nan_amount_is_forwarded(self):
        req = request_builder.build("not a number", "EUR", "ETH")
        assert math.isnan(req.amount)
        assert req.to_payload()["amount"] is None

    def test_same_currency_allowed(self):
        req = request_builder.build("5", "USD", "USD")
        assert req.from_currency == req.to_currency == "USD"

    @pytest.mark.parametrize("from_c, to_c", [("btc", "USD"), ("BTC", "DOGE"), ("", "USD")])
    def test_unknown_currency_rejected(self, from_c, to_c):
        with pytest.raises(UnsupportedCurrency):
            request_builder.build("1", from_c, to_c)

    def test_strict_mode_rejects_nan(self):
        with pytest.raises(InvalidAmount):
            request_builder.build("abc", "BTC", "USD", strict=True)


class TestValidate:
    def test_zero_passes(self):
        req = request_builder.build("0", "BTC", "USD")
        assert request_builder.validate(req) is req

    @pytest.mark.parametrize("raw", ["-1", "abc", "Infinity"])
    def test_rejects_negative_and_non_finite(self, raw):
        with pytest.raises(InvalidAmount):
            request_builder.validate(request_builder.build(raw, "BTC", "USD"))


def test_payload_uses_wire_field_names():
    req = request_builder.build("2.5", "GBP", "SOL")
    assert req.to_payload() == {"amount": 2.5, "from_currency": "GBP", "to_currency": "SOL"}


def test_registry_order_and_membership():
    assert CURRENCIES[0] == "USD"
    assert CURRENCIES[-1] == "NEAR"
    assert len(CURRENCIES) == len(set(CURRENCIES)) == 29
    assert CURRENCIES.index("PEN") + 1 == CURRENCIES.index("BTC")
    assert "USDT" in CRYPTO_CURRENCIES
    assert is_supported("MATIC")
    assert not is_supported("matic")
