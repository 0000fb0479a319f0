"""Tests for HashlibHasher."""

import hashlib

import pytest

from hashtopic.topics.domain.hasher_port import HasherPort
from hashtopic.topics.infrastructure.hashlib_hasher import DEFAULT_ALGORITHM, HashlibHasher


@pytest.mark.unit
class TestHashlibHasher:
    """Test suite for HashlibHasher."""

    def test_default_is_sha3_256(self) -> None:
        """Test that the default hasher is SHA3-256."""
        hasher = HashlibHasher()
        assert isinstance(hasher, HasherPort)
        assert hasher.name == DEFAULT_ALGORITHM == "sha3_256"
        assert hasher.digest_size == 32
        assert hasher.digest(b"abc") == hashlib.sha3_256(b"abc").digest()

    @pytest.mark.parametrize("algorithm,size", [("sha256", 32), ("blake2b", 64), ("sha3_512", 64)])
    def test_fixed_size_algorithms(self, algorithm: str, size: int) -> None:
        """Test that fixed-size hashlib algorithms are accepted."""
        hasher = HashlibHasher(algorithm)
        assert hasher.digest_size == size
        assert len(hasher.digest(b"data")) == size

    def test_unknown_algorithm_rejected(self) -> None:
        """Test that unknown algorithms are rejected."""
        with pytest.raises(ValueError, match="Unsupported hash algorithm"):
            HashlibHasher("not-a-hash")

    @pytest.mark.parametrize("algorithm", ["shake_128", "shake_256"])
    def test_variable_length_algorithm_rejected(self, algorithm: str) -> None:
        """Test that extendable-output functions are rejected."""
        with pytest.raises(ValueError, match="no fixed digest size"):
            HashlibHasher(algorithm)

    def test_digest_uses_fresh_state(self) -> None:
        """Test that successive digests do not accumulate input."""
        hasher = HashlibHasher()
        first = hasher.digest(b"payload")
        hasher.digest(b"other")
        assert hasher.digest(b"payload") == first

    def test_repr(self) -> None:
        """Test the representation names the algorithm."""
        assert repr(HashlibHasher("sha256")) == "HashlibHasher(algorithm='sha256')"
