"""
termindex Term Index
The compiled, read-only fingerprint plus exact lookup table
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from . import bitvector
from .vocabulary import TermRecord


@dataclass(frozen=True)
class TermIndex:
    """
    Compiled term-recognition index

    Attributes:
        fingerprint: OR of the digests of every non-blank normalized text
        terms: key -> record table, read-only
        algorithm: Digest algorithm the fingerprint was built with
        text_keys: normalized text -> key, the axis exact confirmation uses
    """
    fingerprint: bytes
    terms: Mapping[str, TermRecord]
    algorithm: str
    text_keys: Mapping[str, str]

    @property
    def width(self) -> int:
        return len(self.fingerprint)

    def __len__(self) -> int:
        return len(self.terms)

    def __contains__(self, key: object) -> bool:
        return key in self.terms

    def get(self, key: str) -> Optional[TermRecord]:
        """Exact lookup by key. Reaches lookup-only entries too."""
        return self.terms.get(key)

    def popcount(self) -> int:
        return bitvector.popcount(self.fingerprint)

    def density(self) -> float:
        """Fraction of fingerprint bits set; false positives grow with it"""
        return self.popcount() / (self.width * 8)

    def fingerprint_hex(self) -> str:
        return self.fingerprint.hex()
