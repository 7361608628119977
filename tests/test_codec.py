"""Tests for the base64 payload codec in utils/util.py"""

import base64

import pytest

from utils.util import decode, encode


@pytest.mark.parametrize("text", [
    "",
    "print('Hello, World!')",
    "héllo wörld ✓ 日本語 🐍",
    "tab\tnewline\ncarriage\rnull\x00bell\x07",
])
def test_round_trip(text):
    assert decode(encode(text)) == text


def test_encode_is_base64_of_utf8():
    assert encode("é") == base64.b64encode("é".encode("utf-8")).decode("ascii")


def test_encode_treats_none_as_empty():
    assert encode(None) == ""
    assert encode("") == ""


def test_decode_treats_missing_as_empty():
    assert decode(None) == ""
    assert decode("") == ""


def test_decode_invalid_utf8_does_not_raise():
    data = base64.b64encode(b"ok \xff\xfe\xc3").decode("ascii")

    text = decode(data)

    assert isinstance(text, str)
    assert text.startswith("ok ")
    assert "�" in text
