"""
Unit Tests for Canonical Parameter Encoding

These tests verify that:
- Serialization does not depend on key insertion order
- Keys are sorted by code point, case-sensitively
- Empty mappings encode to "" (never "?" or "{}")
- None values, booleans, nested mappings and lists are handled consistently

Run with:
    pytest tests/unit/test_canonical.py -v
"""

import json
import itertools
from decimal import Decimal

from core.canonical import canonical_pairs, canonicalize, to_json_body, to_query_string


class TestCanonicalize:
    """Tests for canonicalize()"""

    def test_order_independent(self):
        """Every insertion order of the same parameters gives identical output"""
        items = [("symbol", "btcusdt"), ("states", "submitted"), ("limit", 20), ("after", "abc")]
        outputs = {canonicalize(dict(order)) for order in itertools.permutations(items)}
        assert outputs == {"after=abc&limit=20&states=submitted&symbol=btcusdt"}

    def test_empty_mapping_is_empty_string(self):
        """Empty and missing parameters both encode to an empty string"""
        assert canonicalize({}) == ""
        assert canonicalize(None) == ""

    def test_sorting_is_case_sensitive_code_point_order(self):
        """Upper-case keys sort before lower-case keys"""
        assert canonicalize({"b": 1, "B": 2, "a": 3}) == "B=2&a=3&b=1"

    def test_values_are_form_encoded(self):
        """Spaces become '+' and reserved characters are percent-encoded"""
        assert canonicalize({"address": "addr 1", "memo": "a&b=c"}) == "address=addr+1&memo=a%26b%3Dc"

    def test_none_values_are_dropped(self):
        """None means 'not sent'"""
        assert canonicalize({"before_id": None, "limit": 20}) == "limit=20"

    def test_empty_string_values_are_kept(self):
        """Empty strings are still sent (Gate.io orderType='')"""
        assert canonicalize({"orderType": "", "rate": "0.1"}) == "orderType=&rate=0.1"

    def test_booleans_become_digits(self):
        """True/False serialize as 1/0"""
        assert canonicalize({"a": True, "b": False}) == "a=1&b=0"

    def test_nested_mapping_uses_brackets(self):
        """Nested mappings are flattened with sorted sub-keys"""
        assert canonicalize({"a": {"y": 1, "x": 2}}) == "a%5Bx%5D=2&a%5By%5D=1"

    def test_list_uses_indexes(self):
        """Lists keep their order and use numeric indexes"""
        assert canonical_pairs({"ids": ["b", "a"]}) == [("ids[0]", "b"), ("ids[1]", "a")]


class TestQueryString:
    """Tests for to_query_string()"""

    def test_leading_question_mark(self):
        assert to_query_string({"limit": 20}) == "?limit=20"

    def test_empty_has_no_question_mark(self):
        """No '?' is emitted when there is nothing to send"""
        assert to_query_string({}) == ""
        assert to_query_string({"before_id": None}) == ""


class TestJsonBody:
    """Tests for to_json_body()"""

    def test_compact_and_sorted(self):
        """Keys are sorted and no whitespace is emitted"""
        body = to_json_body({"symbol": "btcusdt", "amount": "1.0", "side": "buy"})
        assert body == '{"amount":"1.0","side":"buy","symbol":"btcusdt"}'

    def test_round_trips_to_same_mapping(self):
        params = {"type": "limit", "price": "100.0"}
        assert json.loads(to_json_body(params)) == params

    def test_decimal_values_match_canonical_text(self):
        """Decimals are sent as the same text canonicalize() signs"""
        params = {"price": Decimal("7000.1"), "amount": Decimal("0.01")}
        assert to_json_body(params) == '{"amount":"0.01","price":"7000.1"}'
        assert canonicalize(params) == "amount=0.01&price=7000.1"

    def test_empty_body_is_empty_string(self):
        """No '{}' or '[]' body for empty parameters"""
        assert to_json_body({}) == ""
        assert to_json_body(None) == ""
        assert to_json_body({"before": None}) == ""
