import zlib

from phrasesieve.matching.checksums import checksum_pair, sequence_checksum, text_checksum


def test_text_checksum_is_crc32_of_space_joined_text():
    assert text_checksum(["a", "b"]) == zlib.crc32(b"a b")
    assert text_checksum(["123456789"]) == 0xCBF43926


def test_text_checksum_encodes_utf8():
    assert text_checksum(["café", "au", "lait"]) == zlib.crc32("café au lait".encode("utf-8"))


def test_sequence_checksum_values():
    assert sequence_checksum([]) == 0
    assert sequence_checksum([1, 1]) == 2 * 256 + 3
    assert sequence_checksum([254, 3]) == 2 * 256 + 1
    assert sequence_checksum([255]) == 0


def test_sequence_checksum_is_order_sensitive():
    assert sequence_checksum([1, 2]) != sequence_checksum([2, 1])


def test_checksum_pair():
    assert checksum_pair(["x", "y"], [4, 7]) == (text_checksum(["x", "y"]), sequence_checksum([4, 7]))
