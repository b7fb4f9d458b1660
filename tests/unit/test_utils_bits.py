from src.rvasm.utils import u32, is_signed_nbit, le32, to_hex_bytes

def test_u32_truncates_like_a_cast():
    assert u32(-1) == 0xFFFFFFFF
    assert u32(0x1_0000_0001) == 1

def test_le32():
    assert le32(1) == b"\x01\x00\x00\x00"
    assert le32(0x12345678) == b"\x78\x56\x34\x12"
    assert le32(-2) == b"\xfe\xff\xff\xff"

def test_nbit_checks():
    assert is_signed_nbit(2047, 12)
    assert is_signed_nbit(-2048, 12)
    assert not is_signed_nbit(2048, 12)
    assert is_signed_nbit(-(1 << 63), 64)
    assert not is_signed_nbit(1 << 63, 64)

def test_to_hex_bytes():
    assert to_hex_bytes(b"AB\x00") == "41 42 00"
    assert to_hex_bytes(b"") == ""
