"""
Topic Deriver.
Turns arbitrary payloads into topics via a digest prefix.
"""

import logging
from collections.abc import Iterable

from hashtopic.topics.domain.hasher_port import HasherPort
from hashtopic.topics.domain.topic import TOPIC_LENGTH, Topic

logger = logging.getLogger(__name__)

TopicData = bytes | bytearray | memoryview | str


class TopicDeriver:
    """
    Deterministic topic derivation.

    A topic is the first 4 bytes of the digest of the payload. Identical
    payloads always yield identical topics. Distinct payloads collide with
    probability of about 2^-32, so topic equality is a classification
    hint and never proof of content equality.

    The deriver holds no mutable state and may be shared between threads.
    """

    def __init__(self, hasher: HasherPort) -> None:
        """
        Initialize the deriver.

        Args:
            hasher: Hash function to derive from.

        Raises:
            ValueError: If the hasher produces digests shorter than a topic.
        """
        self._hasher = hasher
        if self._hasher.digest_size < TOPIC_LENGTH:
            raise ValueError(
                f"Hasher '{self._hasher.name}' digest of {self._hasher.digest_size} bytes "
                f"is shorter than a {TOPIC_LENGTH}-byte topic"
            )

    @property
    def hasher(self) -> HasherPort:
        return self._hasher

    def derive(self, data: TopicData) -> Topic:
        """
        Derive a topic from a payload.

        Args:
            data: Payload bytes. Strings are encoded as UTF-8 first.

        Returns:
            Topic made of the first 4 digest bytes.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, bytes | bytearray | memoryview):
            raise TypeError(f"Cannot derive a topic from {type(data).__name__}")
        return Topic.from_digest(self._hasher.digest(bytes(data)))

    def derive_many(self, items: Iterable[TopicData]) -> list[Topic]:
        """
        Derive one topic per payload, preserving order and length.

        Empty and duplicate payloads each produce their own entry.
        """
        return [self.derive(item) for item in items]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(hasher={self._hasher!r})"


def to_display_string(topic: Topic) -> str:
    """Lossy text rendering of a topic, for diagnostics only."""
    return topic.to_display_string()
