"""
termindex Membership Probe
Fast fingerprint pre-check followed by exact confirmation
"""

from typing import Iterable, Iterator, Optional, Tuple

from . import bitvector
from .digest import digest, normalize
from .index import TermIndex
from .vocabulary import TermRecord


def might_contain(index: TermIndex, candidate: str) -> bool:
    """
    Fingerprint pre-check only

    False means the candidate is definitely not an indexed text. True only
    means it might be.
    """
    if not candidate or not candidate.strip():
        return False
    return bitvector.contains(index.fingerprint, digest(normalize(candidate), index.algorithm))


def probe(index: TermIndex, candidate: str) -> Optional[TermRecord]:
    """
    Look up a candidate token

    Args:
        index: Compiled term index
        candidate: Token picked out by the caller's tokenizer, any casing

    Returns:
        The matching record, or None. A filtered false positive looks exactly
        like a plain miss.
    """
    if not candidate or not candidate.strip():
        return None

    normalized = normalize(candidate)
    if not bitvector.contains(index.fingerprint, digest(normalized, index.algorithm)):
        return None

    # Pre-check passed; only the exact table decides
    key = index.text_keys.get(normalized)
    if key is None:
        return None
    return index.terms.get(key)


def find_terms(index: TermIndex, candidates: Iterable[str]) -> Iterator[Tuple[str, TermRecord]]:
    """Yield (candidate, record) for every candidate that is a known term, in order"""
    for candidate in candidates:
        record = probe(index, candidate)
        if record is not None:
            yield candidate, record
