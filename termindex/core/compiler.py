"""
termindex Vocabulary Compiler
Builds a TermIndex from a key -> entry vocabulary mapping
"""

from dataclasses import replace
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Set
import logging

from . import bitvector
from .config import CompilerConfig, ON_MALFORMED_SKIP
from .digest import digest, digest_width, normalize
from .index import TermIndex
from .vocabulary import MalformedVocabularyEntry, TermRecord

logger = logging.getLogger(__name__)


def _record_text(record: TermRecord) -> str:
    return record.text


class VocabularyCompiler:
    """
    Compiles a static vocabulary into an immutable TermIndex
    """

    def __init__(self,
                 config: Optional[CompilerConfig] = None,
                 text_of: Optional[Callable[[TermRecord], str]] = None):
        """
        Initialize compiler

        Args:
            config: Compiler settings (digest algorithm, malformed-entry policy)
            text_of: Picks the value of a record that gets digested and
                confirmed against. Defaults to the record's text.
        """
        self.config = config or CompilerConfig()
        self.config.validate()
        self.text_of = text_of or _record_text

    def compile(self, vocabulary: Mapping[str, Any]) -> TermIndex:
        """
        Compile a vocabulary

        Args:
            vocabulary: Mapping of key -> TermRecord or mapping of record fields

        Returns:
            TermIndex whose fingerprint covers every non-blank text

        Raises:
            MalformedVocabularyEntry: If an entry is unusable and the policy is "raise"
            ContractViolation: If digest widths disagree
        """
        algorithm = self.config.digest_algorithm
        width = digest_width(algorithm)

        terms: Dict[str, TermRecord] = {}
        text_keys: Dict[str, str] = {}
        digests: List[bytes] = []
        skipped = 0

        # Keys given explicitly; a key derived from text may not take one of them
        given_keys = {str(k) for k in vocabulary if k is not None and str(k).strip()}

        for raw_key, entry in vocabulary.items():
            try:
                record = self._build_record(raw_key, entry, given_keys)
                if record.key in terms:
                    raise MalformedVocabularyEntry(f"Duplicate key {record.key!r}")
            except MalformedVocabularyEntry as e:
                if self.config.on_malformed != ON_MALFORMED_SKIP:
                    raise
                logger.warning(f"Skipping malformed vocabulary entry: {e}")
                skipped += 1
                continue

            terms[record.key] = record

            text = self.text_of(record)
            if not text or not text.strip():
                # Lookup-only: reachable by key, never through the fingerprint
                continue

            normalized = normalize(text)
            previous = text_keys.get(normalized)
            if previous is not None and previous != record.key:
                logger.warning(
                    f"Text {text!r} of {record.key!r} shadows {previous!r} for probing"
                )
            text_keys[normalized] = record.key
            digests.append(digest(normalized, algorithm))

        fingerprint = bitvector.union(digests, width)

        index = TermIndex(
            fingerprint=fingerprint,
            terms=MappingProxyType(terms),
            algorithm=algorithm,
            text_keys=MappingProxyType(text_keys),
        )

        logger.info(
            f"Compiled vocabulary with {len(terms)} terms "
            f"({len(text_keys)} probeable, {skipped} skipped), "
            f"fingerprint density {index.density():.2%}"
        )
        return index

    def _build_record(self, raw_key: Any, entry: Any, given_keys: Set[str]) -> TermRecord:
        """Turn one vocabulary entry into a record carrying its key"""
        key = "" if raw_key is None else str(raw_key)

        if isinstance(entry, TermRecord):
            record = replace(entry, key=key)
        else:
            record = TermRecord.from_entry(key, entry)

        if key.strip():
            return record

        text = self.text_of(record)
        if not text or not text.strip():
            raise MalformedVocabularyEntry("Entry has neither a key nor text")

        # No key given: the entry is known by its normalized text
        derived = normalize(text)
        if derived in given_keys:
            raise MalformedVocabularyEntry(
                f"Entry without a key would take existing key {derived!r}"
            )
        return replace(record, key=derived)


def compile_vocabulary(vocabulary: Mapping[str, Any],
                       config: Optional[CompilerConfig] = None,
                       text_of: Optional[Callable[[TermRecord], str]] = None) -> TermIndex:
    """Compile ``vocabulary`` with a one-off VocabularyCompiler"""
    return VocabularyCompiler(config, text_of).compile(vocabulary)
