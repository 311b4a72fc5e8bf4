from charstats.decoders import decode_utf8, decode_utf16le, decode_utf16be


def test_utf8_ascii_only():
    assert decode_utf8(b" ") == " "
    assert decode_utf8(b"\n") == "\n"
    assert decode_utf8(b"\xc3") is None
    assert decode_utf8(b"\xa9") is None
    assert decode_utf8(b"\xff") is None


def test_window_width_must_match():
    assert decode_utf8(b"") is None
    assert decode_utf8(b"ab") is None
    assert decode_utf16le(b"a") is None
    assert decode_utf16be(b"\x00a\x00") is None


def test_utf16_byte_order():
    assert decode_utf16le(b" \x00") == " "
    assert decode_utf16be(b"\x00 ") == " "
    assert decode_utf16le(b"\x00 ") == " "
    assert decode_utf16be("あ".encode("utf-16-be")) == "あ"


def test_utf16_lone_surrogate_fails():
    assert decode_utf16le(b"\x00\xd8") is None
    assert decode_utf16le(b"\x00\xdc") is None
    assert decode_utf16be(b"\xd8\x00") is None
