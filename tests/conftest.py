"""Pytest configuration and shared fixtures."""

import pytest

from hashtopic.topics.domain.hasher_port import HasherPort
from hashtopic.topics.domain.topic import Topic
from hashtopic.topics.domain.topic_deriver import TopicDeriver
from hashtopic.topics.infrastructure.hashlib_hasher import HashlibHasher
from hashtopic.topics.utils.topic_matcher import TopicMatcher


class FixedHasher(HasherPort):
    """Test hasher returning a fixed digest and recording its inputs."""

    def __init__(self, digest: bytes = b"\x01\x02\x03\x04\x05\x06") -> None:
        self._digest = digest
        self.calls: list[bytes] = []

    @property
    def name(self) -> str:
        return "fixed"

    @property
    def digest_size(self) -> int:
        return len(self._digest)

    def digest(self, data: bytes) -> bytes:
        self.calls.append(data)
        return self._digest


def make_topic(name: str) -> Topic:
    """Build a readable topic from a name of at most 4 ASCII characters."""
    return Topic(name.encode("ascii").ljust(4, b"_"))


@pytest.fixture
def deriver() -> TopicDeriver:
    """Create a default SHA3-256 topic deriver."""
    return TopicDeriver(HashlibHasher())


@pytest.fixture
def sample_matcher() -> TopicMatcher:
    """Create the four-position matcher [{A1, A2, A3}, {B}, *, {D1, D2}]."""
    return TopicMatcher.compile(
        [
            {make_topic("A1"), make_topic("A2"), make_topic("A3")},
            {make_topic("B")},
            set(),
            {make_topic("D1"), make_topic("D2")},
        ]
    )
