import pytest

from cgl.color import Color


def test_constants():
    assert Color.WHITE == Color(1.0, 1.0, 1.0)
    assert Color.BLACK == Color()


def test_white_to_hex():
    assert Color.WHITE.to_hex() == "ffffff"


def test_black_to_hex_is_unpadded():
    assert Color.BLACK.to_hex() == "000"


def test_str_format():
    assert str(Color(1.0, 1.0, 1.0)) == "(r=1 g=1 b=1)"


def test_from_bytes_to_hex_round_trip():
    assert Color.from_bytes(bytes([0x12, 0x34, 0x56])).to_hex() == "123456"


def test_from_bytes_accepts_list():
    assert Color.from_bytes([255, 0, 255]) == Color(1.0, 0.0, 1.0)


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        Color.from_bytes(b"\x01\x02")


@pytest.mark.parametrize("text", ["#a1b2c3", "a1b2c3", "#A1B2C3"])
def test_from_hex_round_trip(text):
    assert Color.from_hex(text).to_hex() == "a1b2c3"


def test_from_hex_matches_from_bytes():
    assert Color.from_hex("#1020f0") == Color.from_bytes(bytes([0x10, 0x20, 0xF0]))


def test_from_hex_primary():
    assert Color.from_hex("#ff0000") == Color(1.0, 0.0, 0.0)


def test_from_hex_stops_at_non_hex():
    assert Color.from_hex("#abcdefzz") == Color.from_hex("#abcdef")


def test_from_hex_invalid():
    with pytest.raises(ValueError):
        Color.from_hex("#zzzzzz")


def test_to_hex_clamps_out_of_range():
    assert Color(2.0, -1.0, 1.0).to_hex() == Color(1.0, 0.0, 1.0).to_hex()


def test_colors_are_immutable():
    color = Color(0.25, 0.5, 0.75)
    with pytest.raises(AttributeError):
        setattr(color, "r", 0.5)
    assert color == Color(0.25, 0.5, 0.75)