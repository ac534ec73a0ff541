"""Tests for request URL construction."""

import asyncio
from datetime import date

import httpx
import pytest

from finnhubapi.client import FinnhubClient
from finnhubapi.config import DEFAULT_BASE_URL
from finnhubapi.errors import FinnhubError, FinnhubErrorCode
from finnhubapi.urls import build_url, redact_token


class TestBuildUrl:
    def test_quote_example(self):
        url = build_url(DEFAULT_BASE_URL, "/quote", "T1", [("symbol", "SPY")])
        assert str(url) == "https://finnhub.io/api/v1/quote?token=T1&symbol=SPY"

    def test_token_only(self):
        url = build_url(DEFAULT_BASE_URL, "/stock/exchange", "secret")
        assert url.params.multi_items() == [("token", "secret")]

    def test_token_first_then_input_order(self):
        url = build_url(
            DEFAULT_BASE_URL,
            "/company-news",
            "T1",
            [("symbol", "AAPL"), ("to", "2024-01-31"), ("from", "2024-01-01")],
        )
        assert url.params.multi_items() == [
            ("token", "T1"),
            ("symbol", "AAPL"),
            ("to", "2024-01-31"),
            ("from", "2024-01-01"),
        ]

    def test_duplicate_keys_preserved(self):
        url = build_url(DEFAULT_BASE_URL, "/quote", "T1", [("symbol", "A"), ("symbol", "B")])
        assert url.params.get_list("symbol") == ["A", "B"]
        assert str(url).endswith("?token=T1&symbol=A&symbol=B")

    def test_none_values_skipped(self):
        url = build_url(DEFAULT_BASE_URL, "/company-news", "T1", [("symbol", "AAPL"), ("from", None)])
        assert url.params.multi_items() == [("token", "T1"), ("symbol", "AAPL")]

    def test_value_rendering(self):
        url = build_url(
            DEFAULT_BASE_URL, "/x", "T1",
            [("from", date(2024, 1, 2)), ("flag", True), ("n", 5)],
        )
        assert url.params.multi_items()[1:] == [("from", "2024-01-02"), ("flag", "true"), ("n", "5")]

    def test_token_is_encoded(self):
        url = build_url(DEFAULT_BASE_URL, "/quote", "a&b=c", [("symbol", "SPY")])
        assert url.params.get_list("token") == ["a&b=c"]
        assert len(url.params.multi_items()) == 2

    def test_nested_path_without_leading_slash(self):
        url = build_url(DEFAULT_BASE_URL, "stock/peers", "T1")
        assert url.path == "/api/v1/stock/peers"

    def test_base_trailing_slash(self):
        url = build_url("https://finnhub.io/api/v1/", "/quote", "T1")
        assert url.path == "/api/v1/quote"

    def test_equal_inputs_equal_urls(self):
        a = build_url(DEFAULT_BASE_URL, "/quote", "T1", [("symbol", "SPY")])
        b = build_url(DEFAULT_BASE_URL, "/quote", "T1", [("symbol", "SPY")])
        assert a == b
        assert isinstance(a, httpx.URL)

    @pytest.mark.parametrize(
        "path",
        ["", "/", "quote/", "/stock//peers", "quo te", "quote?x=1", "quote#frag", "/stock/../quote"],
    )
    def test_malformed_path(self, path):
        with pytest.raises(FinnhubError) as exc_info:
            build_url(DEFAULT_BASE_URL, path, "T1")
        assert exc_info.value.code == FinnhubErrorCode.MALFORMED_URL

    @pytest.mark.parametrize("base", ["not a url", "ftp://finnhub.io/api/v1", "/api/v1"])
    def test_malformed_base(self, base):
        with pytest.raises(FinnhubError) as exc_info:
            build_url(base, "/quote", "T1")
        assert exc_info.value.code == FinnhubErrorCode.MALFORMED_URL


class TestClientUrlFor:
    def test_matches_build_url(self):
        client = FinnhubClient(token="T1")
        try:
            assert client.url_for("/quote", [("symbol", "SPY")]) == build_url(
                DEFAULT_BASE_URL, "/quote", "T1", [("symbol", "SPY")]
            )
        finally:
            asyncio.run(client.aclose())

    def test_custom_base(self):
        client = FinnhubClient(token="T1", base_url="http://localhost:8080/v1")
        try:
            assert str(client.url_for("/quote")) == "http://localhost:8080/v1/quote?token=T1"
        finally:
            asyncio.run(client.aclose())


class TestRedactToken:
    def test_token_masked(self):
        url = build_url(DEFAULT_BASE_URL, "/quote", "supersecret", [("symbol", "SPY")])
        rendered = redact_token(url)
        assert "supersecret" not in rendered
        assert rendered.endswith("?token=REDACTED&symbol=SPY")
