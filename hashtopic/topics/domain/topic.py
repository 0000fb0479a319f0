"""
Topic value type.
A fixed-width, probabilistic classifier of message content.
"""

from dataclasses import dataclass

TOPIC_LENGTH = 4


@dataclass(frozen=True)
class Topic:
    """
    A 4-byte opaque topic identifier.

    Topics are derived from the leading bytes of a cryptographic digest
    (see TopicDeriver). Equality and hashing are byte-wise, so a Topic can be
    used as a set member or a mapping key.

    The all-zero topic is reserved as the wildcard sentinel and must not be
    carried by real messages. This is a convention only: the type does not
    reject it.

    Attributes:
        value: The raw 4 topic bytes.
    """

    value: bytes

    def __post_init__(self) -> None:
        """Validate and normalize the topic bytes."""
        if not isinstance(self.value, bytes | bytearray | memoryview):
            raise ValueError(
                f"Topic value must be bytes-like, got {type(self.value).__name__}"
            )
        value = bytes(self.value)
        if len(value) != TOPIC_LENGTH:
            raise ValueError(f"Topic must be exactly {TOPIC_LENGTH} bytes, got {len(value)}")
        # Normalize bytearray/memoryview input to immutable bytes
        object.__setattr__(self, "value", value)

    @classmethod
    def from_digest(cls, digest: bytes) -> "Topic":
        """
        Create a topic from the first 4 bytes of a hash digest.

        Args:
            digest: Digest bytes, at least 4 bytes long.

        Returns:
            Topic holding the digest prefix.
        """
        if len(digest) < TOPIC_LENGTH:
            raise ValueError(
                f"Digest must be at least {TOPIC_LENGTH} bytes, got {len(digest)}"
            )
        return cls(bytes(digest[:TOPIC_LENGTH]))

    @classmethod
    def from_hex(cls, text: str) -> "Topic":
        """
        Parse a topic from its hex form, with or without a 0x prefix.

        Examples:
            >>> Topic.from_hex("0xdeadbeef").hex()
            'deadbeef'
        """
        if text[:2].lower() == "0x":
            text = text[2:]
        try:
            value = bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"Invalid topic hex string: {text!r}") from e
        return cls(value)

    @classmethod
    def from_int(cls, number: int) -> "Topic":
        """Create a topic from an unsigned 32-bit integer (big-endian)."""
        try:
            value = number.to_bytes(TOPIC_LENGTH, "big")
        except OverflowError as e:
            raise ValueError(f"Topic integer out of range: {number}") from e
        return cls(value)

    def hex(self) -> str:
        """Stable lowercase hex encoding of the topic bytes."""
        return self.value.hex()

    def to_int(self) -> int:
        return int.from_bytes(self.value, "big")

    def is_sentinel(self) -> bool:
        """Check whether this is the reserved all-zero wildcard sentinel."""
        return self.value == bytes(TOPIC_LENGTH)

    def to_display_string(self) -> str:
        """
        Render the raw bytes as text for log output.

        The rendering is lossy and non-semantic. Never compare, key, or
        transmit it; use hex() for a stable textual form.
        """
        return self.value.decode("latin-1")

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return f"Topic(0x{self.hex()})"

    def __repr__(self) -> str:
        return self.__str__()


EMPTY_TOPIC = Topic(bytes(TOPIC_LENGTH))
