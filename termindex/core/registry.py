"""
termindex Index Registry
Explicit initialization and copy-on-write publication of term indexes
"""

from typing import Any, Mapping, Optional
import logging

from .compiler import VocabularyCompiler
from .config import TermIndexConfig
from .index import TermIndex
from .vocabulary import load_default_vocabulary

logger = logging.getLogger(__name__)


def build_default_index(config: Optional[TermIndexConfig] = None) -> TermIndex:
    """
    Compile the embedded vocabulary

    Args:
        config: Optional configuration, defaults to a fresh TermIndexConfig

    Returns:
        New TermIndex for the embedded acronym/jargon vocabulary
    """
    config = config or TermIndexConfig()
    return VocabularyCompiler(config.compiler).compile(load_default_vocabulary())


class IndexHandle:
    """
    Shared reference to the current TermIndex

    Readers take ``current`` and probe it without locking. A rebuild compiles a
    whole new index first and then swaps the reference in one assignment; a
    published index is never modified.
    """

    def __init__(self, index: TermIndex):
        self._index = index

    @property
    def current(self) -> TermIndex:
        return self._index

    def publish(self, index: TermIndex) -> TermIndex:
        """Replace the published index, returning the previous one"""
        previous = self._index
        self._index = index
        logger.info(f"Published term index with {len(index)} terms (was {len(previous)})")
        return previous

    def rebuild(self,
                vocabulary: Mapping[str, Any],
                compiler: Optional[VocabularyCompiler] = None) -> TermIndex:
        """Compile ``vocabulary`` off to the side, then publish it"""
        compiler = compiler or VocabularyCompiler()
        index = compiler.compile(vocabulary)
        self.publish(index)
        return index
