"""
termindex Digest Function
Deterministic fixed-width hashing of normalized term strings
"""

import hashlib
from functools import lru_cache

from .bitvector import ContractViolation

DEFAULT_ALGORITHM = "sha256"


def normalize(text: str) -> str:
    """
    Case-normalize a term or candidate token

    The compiler and the probe must both go through this function, otherwise
    membership tests stop being sound.
    """
    return text.lower()


@lru_cache(maxsize=None)
def digest_width(algorithm: str = DEFAULT_ALGORITHM) -> int:
    """
    Output width in bytes for a hash algorithm

    Args:
        algorithm: Any fixed-width algorithm known to hashlib

    Returns:
        Digest size in bytes

    Raises:
        ValueError: If the algorithm is unknown or has variable-length output
    """
    try:
        hasher = hashlib.new(algorithm)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Unsupported digest algorithm: {algorithm}") from e

    # shake_* report digest_size 0 and need an explicit length
    if hasher.digest_size <= 0:
        raise ValueError(f"Digest algorithm {algorithm} does not have a fixed width")
    return hasher.digest_size


def digest(text: str, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Hash an already-normalized string

    Args:
        text: Normalized input (see ``normalize``)
        algorithm: hashlib algorithm name

    Returns:
        Digest bytes of exactly ``digest_width(algorithm)`` bytes
    """
    width = digest_width(algorithm)
    value = hashlib.new(algorithm, text.encode("utf-8")).digest()
    # Guard only; fixed-width algorithms always return digest_size bytes
    if len(value) != width:
        raise ContractViolation(
            f"{algorithm} produced {len(value)} bytes, expected {width}"
        )
    return value
