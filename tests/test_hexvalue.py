import pytest

from psqlkit.hexvalue import Hex


def test_value_encodes_lowercase_hex():
    assert Hex(bytes([0xFF, 0x00, 0xBE, 0xEF])).value() == "ff00beef"


def test_round_trip():
    original = Hex(b"\x01\x02\x7f\x80")
    restored = Hex()
    restored.scan(original.value())
    assert restored == original


def test_scan_bytes_input():
    h = Hex()
    h.scan(b"ff00beef")
    assert bytes(h) == bytes([0xFF, 0x00, 0xBE, 0xEF])


def test_scan_uppercase():
    h = Hex()
    h.scan("FF00BEEF")
    assert h.value() == "ff00beef"


def test_scan_replaces_content():
    h = Hex(b"\x01\x02\x03")
    h.scan("ff")
    assert bytes(h) == b"\xff"


def test_empty_value():
    h = Hex()
    h.scan("")
    assert h.value() == ""


def test_odd_length_rejected():
    h = Hex(b"\x01")
    with pytest.raises(ValueError):
        h.scan("abc")
    assert bytes(h) == b"\x01"


def test_invalid_chars_rejected():
    with pytest.raises(ValueError):
        Hex().scan("zz")


def test_unsupported_type():
    with pytest.raises(TypeError, match="unsupported input format"):
        Hex().scan(42)