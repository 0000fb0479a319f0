"""Tests for the Topic value type."""

import dataclasses

import pytest

from hashtopic.topics.domain.topic import EMPTY_TOPIC, TOPIC_LENGTH, Topic


@pytest.mark.unit
class TestTopic:
    """Test suite for Topic."""

    def test_topic_holds_four_bytes(self) -> None:
        """Test that a topic keeps its raw bytes."""
        topic = Topic(b"\xde\xad\xbe\xef")
        assert bytes(topic) == b"\xde\xad\xbe\xef"
        assert len(topic.value) == TOPIC_LENGTH

    @pytest.mark.parametrize("value", [b"", b"abc", b"abcde", bytes(32)])
    def test_wrong_length_rejected(self, value: bytes) -> None:
        """Test that only 4-byte values are accepted."""
        with pytest.raises(ValueError, match="exactly 4 bytes"):
            Topic(value)

    def test_non_bytes_rejected(self) -> None:
        """Test that non bytes-like values are rejected."""
        with pytest.raises(ValueError, match="bytes-like"):
            Topic("abcd")  # type: ignore[arg-type]

    def test_bytearray_normalized_to_bytes(self) -> None:
        """Test that mutable input is copied into immutable bytes."""
        raw = bytearray(b"abcd")
        topic = Topic(raw)
        raw[0] = ord("z")
        assert isinstance(topic.value, bytes)
        assert topic.value == b"abcd"

    def test_topic_is_immutable(self) -> None:
        """Test that a topic cannot be modified after construction."""
        topic = Topic(b"abcd")
        with pytest.raises(dataclasses.FrozenInstanceError):
            topic.value = b"efgh"  # type: ignore[misc]

    def test_equality_is_bytewise(self) -> None:
        """Test that topics with equal bytes are equal and hash alike."""
        assert Topic(b"abcd") == Topic(bytearray(b"abcd"))
        assert hash(Topic(b"abcd")) == hash(Topic(b"abcd"))
        assert Topic(b"abcd") != Topic(b"abce")

    def test_usable_as_mapping_key(self) -> None:
        """Test that topics work as dict keys and set members."""
        index = {Topic(b"abcd"): "first"}
        assert index[Topic(b"abcd")] == "first"
        assert len({Topic(b"abcd"), Topic(b"abcd"), Topic(b"wxyz")}) == 2

    def test_from_digest_takes_prefix(self) -> None:
        """Test that from_digest keeps the first 4 bytes."""
        assert Topic.from_digest(b"\x01\x02\x03\x04\x05\x06") == Topic(b"\x01\x02\x03\x04")

    def test_from_digest_rejects_short_digest(self) -> None:
        """Test that a digest shorter than a topic is rejected."""
        with pytest.raises(ValueError, match="at least 4 bytes"):
            Topic.from_digest(b"\x01\x02")

    def test_hex_roundtrip(self) -> None:
        """Test hex encoding and parsing with and without prefix."""
        topic = Topic(b"\xde\xad\xbe\xef")
        assert topic.hex() == "deadbeef"
        assert Topic.from_hex("deadbeef") == topic
        assert Topic.from_hex("0xDEADBEEF") == topic

    @pytest.mark.parametrize("text", ["xyz", "0xdead", "deadbeef00", "0x"])
    def test_from_hex_rejects_invalid(self, text: str) -> None:
        """Test that malformed hex strings are rejected."""
        with pytest.raises(ValueError):
            Topic.from_hex(text)

    def test_int_conversion_is_big_endian(self) -> None:
        """Test conversion from and to unsigned integers."""
        topic = Topic.from_int(0x01020304)
        assert topic.value == b"\x01\x02\x03\x04"
        assert topic.to_int() == 0x01020304

    @pytest.mark.parametrize("number", [-1, 2**32])
    def test_from_int_out_of_range(self, number: int) -> None:
        """Test that integers outside 32 bits are rejected."""
        with pytest.raises(ValueError, match="out of range"):
            Topic.from_int(number)

    def test_sentinel(self) -> None:
        """Test that only the all-zero topic is the sentinel."""
        assert EMPTY_TOPIC.is_sentinel()
        assert Topic(bytes(4)).is_sentinel()
        assert not Topic(b"\x00\x00\x00\x01").is_sentinel()

    def test_display_string_renders_raw_bytes(self) -> None:
        """Test that the display string maps each byte to one character."""
        assert Topic(b"chat").to_display_string() == "chat"
        rendered = Topic(b"\xff\x00\x80a").to_display_string()
        assert len(rendered) == 4
        assert rendered[3] == "a"

    def test_str_uses_hex(self) -> None:
        """Test that str and repr show the hex form."""
        topic = Topic(b"\xde\xad\xbe\xef")
        assert str(topic) == "Topic(0xdeadbeef)"
        assert repr(topic) == str(topic)
