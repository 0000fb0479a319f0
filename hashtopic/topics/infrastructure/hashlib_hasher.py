import hashlib
import logging

from hashtopic.topics.domain.hasher_port import HasherPort

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "sha3_256"


class HashlibHasher(HasherPort):
    """
    A hashlib-based implementation of the HasherPort.

    Any fixed-size algorithm known to hashlib can be used. Extendable-output
    functions (shake_128, shake_256) are rejected because they have no fixed
    digest size.
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        """
        Initialize the hasher.

        Args:
            algorithm: hashlib algorithm name (default: sha3_256).

        Raises:
            ValueError: If the algorithm is unknown or has no fixed digest size.
        """
        try:
            hasher = hashlib.new(algorithm)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Unsupported hash algorithm '{algorithm}'") from e

        if hasher.digest_size <= 0:
            raise ValueError(f"Hash algorithm '{algorithm}' has no fixed digest size")

        self._algorithm = algorithm
        self._digest_size = hasher.digest_size
        logger.debug(f"Initialized HashlibHasher with {algorithm} ({self._digest_size} bytes)")

    @property
    def name(self) -> str:
        return self._algorithm

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def digest(self, data: bytes) -> bytes:
        """
        Hash the data with a fresh hash object.

        Args:
            data: Bytes to hash.

        Returns:
            The full digest.
        """
        return hashlib.new(self._algorithm, data).digest()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(algorithm={self._algorithm!r})"
