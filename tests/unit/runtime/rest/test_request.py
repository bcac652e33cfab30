"""Unit tests for the request descriptor and media type parsing."""

from __future__ import annotations

import dataclasses

import pytest

from krakenspot.core.enums import MediaType
from krakenspot.runtime.rest import Request, parse_media_type


class TestRequest:
    def test_is_immutable(self):
        request = Request(method="GET", url="https://api.kraken.com/0/public/Time")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.method = "POST"

    def test_with_headers_returns_new_request(self):
        request = Request(method="GET", url="https://x/0/public/Time", headers={"User-Agent": "a"})
        updated = request.with_headers({"API-Key": "k"})
        assert updated.headers == {"User-Agent": "a", "API-Key": "k"}
        assert request.headers == {"User-Agent": "a"}

    def test_form_and_path(self):
        request = Request(
            method="POST",
            url="https://api.kraken.com/0/private/Balance?x=1",
            body=b"nonce=5&otp=",
        )
        assert request.path == "/0/private/Balance"
        assert request.form() == {"nonce": "5", "otp": ""}


class TestParseMediaType:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("application/json", MediaType.JSON),
            ("application/json; charset=utf-8", MediaType.JSON),
            ("Application/Octet-Stream", MediaType.OCTET_STREAM),
            ("application/zip", MediaType.ZIP),
            ("text/html", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse(self, header, expected):
        assert parse_media_type(header) is expected

    def test_stream_types(self):
        assert MediaType.ZIP.is_stream
        assert MediaType.OCTET_STREAM.is_stream
        assert not MediaType.JSON.is_stream
