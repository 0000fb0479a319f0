"""Shared SHA3-256 topic deriver and the module-level derivation helpers."""

from hashtopic.topics.domain.topic import Topic
from hashtopic.topics.domain.topic_deriver import TopicData, TopicDeriver

from .hashlib_hasher import HashlibHasher

_default_deriver = TopicDeriver(HashlibHasher())


def get_default_deriver() -> TopicDeriver:
    """Returns the shared SHA3-256 deriver."""
    return _default_deriver


def derive_topic(data: TopicData) -> Topic:
    """
    Derive a topic with the default deriver.

    Examples:
        >>> derive_topic(b"chat") == derive_topic(b"chat")
        True
    """
    return _default_deriver.derive(data)


def derive_topics(*items: TopicData) -> list[Topic]:
    """
    Derive a list of topics with the default deriver.

    Examples:
        >>> len(derive_topics(b"a", b"b", b"a"))
        3
    """
    return _default_deriver.derive_many(items)
