import pytest
from src.thumb_asm.utils import u16, is_unsigned_nbit, to_bin, to_hex, parse_number

def test_to_bin_pads_left():
    assert to_bin(5, 8) == "00000101"
    assert to_bin(0, 3) == "000"

def test_to_bin_does_not_truncate():
    with pytest.raises(ValueError):
        to_bin(8, 3)

def test_hex_tokens_are_lowercase_and_unpadded():
    assert to_hex(0x2005) == "2005"
    assert to_hex(0xDE02) == "de02"
    assert to_hex(0) == "0"
    assert u16(0x1FFFF) == 0xFFFF

@pytest.mark.parametrize("text, value", [
    ("5", 5),
    ("05", 5),
    ("0x1F", 31),
    ("0X10", 16),
])
def test_parse_number(text, value):
    assert parse_number(text) == value

def test_nbit_checks():
    assert is_unsigned_nbit(255, 8)
    assert not is_unsigned_nbit(256, 8)
    assert not is_unsigned_nbit(-1, 8)
