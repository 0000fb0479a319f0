from abc import ABC, abstractmethod


class HasherPort(ABC):
    """
    An abstract port for the cryptographic hash function topics are derived from.
    Implementations must be pure: the same input always yields the same digest.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Returns the name of the hash algorithm."""
        raise NotImplementedError

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Returns the size of the produced digest in bytes."""
        raise NotImplementedError

    @abstractmethod
    def digest(self, data: bytes) -> bytes:
        """Returns the digest of the given data."""
        raise NotImplementedError
