from chunk_codec import crc32


def test_crc32_known_values():
    assert crc32(b"") == 0
    assert crc32(b"hello") == 0x3610A686
    assert crc32(b"123456789") == 0xCBF43926


def test_crc32_parts_match_concatenation():
    assert crc32(b"RuSt", b"payload") == crc32(b"RuStpayload")
