from crash_report_sender.exceptions import EncodingError
from crash_report_sender.text import from_wire_text
from crash_report_sender.text import to_wire_text

import pytest


def test_ascii():
    assert to_wire_text("MyApp 1.0") == b"MyApp 1.0"
    assert to_wire_text("") == b""


def test_non_ascii_becomes_multi_byte_utf8():
    assert to_wire_text("é") == b"\xc3\xa9"
    assert to_wire_text("€") == b"\xe2\x82\xac"
    assert to_wire_text("😀") == b"\xf0\x9f\x98\x80"
    for text in ["é", "€", "日本語", "😀"]:
        assert len(to_wire_text(text)) > len(text)
        assert from_wire_text(to_wire_text(text)) == text


def test_surrogate_pair_is_joined():
    assert to_wire_text("a\ud83d\ude00b") == "a😀b".encode("utf-8")
    assert to_wire_text("\ud83d\ude00") == b"\xf0\x9f\x98\x80"


def test_lone_surrogate_is_an_error():
    with pytest.raises(EncodingError):
        to_wire_text("bad \ud800 text")


def test_non_text_is_an_error():
    with pytest.raises(EncodingError):
        to_wire_text(b"bytes")
    with pytest.raises(EncodingError):
        to_wire_text(1)


def test_invalid_utf8_is_an_error():
    with pytest.raises(EncodingError):
        from_wire_text(b"\xff\xfe")
