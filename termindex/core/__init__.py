from .bitvector import ContractViolation
from .compiler import VocabularyCompiler, compile_vocabulary
from .config import CompilerConfig, TermIndexConfig
from .digest import digest, normalize
from .index import TermIndex
from .probe import find_terms, might_contain, probe
from .registry import IndexHandle, build_default_index
from .vocabulary import MalformedVocabularyEntry, TermRecord

__all__ = [
    "CompilerConfig",
    "ContractViolation",
    "IndexHandle",
    "MalformedVocabularyEntry",
    "TermIndex",
    "TermIndexConfig",
    "TermRecord",
    "VocabularyCompiler",
    "build_default_index",
    "compile_vocabulary",
    "digest",
    "find_terms",
    "might_contain",
    "normalize",
    "probe",
]
