"""
Unit tests for core/data_uri.py
"""

import pytest

from core.data_uri import encode_data_uri, parse_data_uri
from core.errors import InvalidInputFormat, QuizGenerationError


class TestEncode:

    def test_encodes_with_mime_and_base64_marker(self):
        assert encode_data_uri(b"hello", "application/pdf") == "data:application/pdf;base64,aGVsbG8="

    def test_parse_recovers_bytes(self):
        uri = encode_data_uri(b"%PDF-1.7\x00\xff", "application/pdf")
        assert parse_data_uri(uri) == ("application/pdf", b"%PDF-1.7\x00\xff")


class TestParse:

    def test_extra_parameters_are_allowed(self):
        mime, data = parse_data_uri("data:application/pdf;name=notes.pdf;base64,aGVsbG8=")
        assert mime == "application/pdf"
        assert data == b"hello"

    def test_mime_type_is_lowercased(self):
        assert parse_data_uri("data:Application/PDF;base64,aGVsbG8=")[0] == "application/pdf"

    @pytest.mark.parametrize("uri", [
        "",
        "hello",
        "data:application/pdf,aGVsbG8=",          # not base64
        "data:;base64,aGVsbG8=",                  # no mime type
        "data:application/pdf;base64,",           # empty payload
        "data:application/pdf;base64,not*base64", # bad alphabet
        "http://example.com/file.pdf",
    ])
    def test_malformed_uris_rejected(self, uri):
        with pytest.raises(InvalidInputFormat):
            parse_data_uri(uri)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidInputFormat):
            parse_data_uri(b"data:application/pdf;base64,aGVsbG8=")

    def test_is_a_generation_error(self):
        with pytest.raises(QuizGenerationError):
            parse_data_uri("nope")
