"""Infrastructure layer exports."""

from .default_deriver import derive_topic, derive_topics, get_default_deriver
from .hashlib_hasher import DEFAULT_ALGORITHM, HashlibHasher

__all__ = [
    "DEFAULT_ALGORITHM",
    "HashlibHasher",
    "derive_topic",
    "derive_topics",
    "get_default_deriver",
]
