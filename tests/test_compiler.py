"""Tests for vocabulary compilation."""

import dataclasses
import hashlib
import itertools
import logging

import pytest

from termindex.core import bitvector
from termindex.core.compiler import VocabularyCompiler, compile_vocabulary
from termindex.core.config import CompilerConfig
from termindex.core.probe import probe
from termindex.core.vocabulary import MalformedVocabularyEntry, TermRecord


def _or(a, b):
    return bytes(x | y for x, y in zip(a, b))


def test_fingerprint_is_union_of_lowercased_digests(index):
    expected = _or(hashlib.sha256(b"ato").digest(), hashlib.sha256(b"atc").digest())

    assert index.fingerprint == expected
    assert index.width == 32
    assert index.algorithm == "sha256"


def test_records_carry_their_key(index):
    record = index.terms["ato"]

    assert record.key == "ato"
    assert record.text == "ATO"
    assert record.brief == "Air Tasking Order"
    assert record.kind == "acronym"
    assert record.definition == ""


def test_empty_vocabulary():
    index = compile_vocabulary({})

    assert index.fingerprint == bytes(32)
    assert len(index) == 0


def test_order_independence():
    entries = [
        ("ato", {"text": "ATO"}),
        ("atc", {"text": "ATC"}),
        ("tdy", {"text": "TDY"}),
        ("block 20", {"text": "Block 20"}),
    ]
    fingerprints = {
        compile_vocabulary(dict(perm)).fingerprint
        for perm in itertools.permutations(entries)
    }

    assert len(fingerprints) == 1


def test_fingerprint_monotonic(vocabulary):
    smaller = compile_vocabulary(vocabulary)
    larger = compile_vocabulary({**vocabulary, "wrt": {"text": "WRT"}})

    assert bitvector.is_superset(larger.fingerprint, smaller.fingerprint)


def test_blank_text_is_lookup_only():
    index = compile_vocabulary({
        "ghost": {"brief": "no text here"},
        "blank": {"text": "   "},
    })

    assert index.fingerprint == bytes(32)
    assert index.get("ghost").brief == "no text here"
    assert "blank" in index
    assert dict(index.text_keys) == {}


def test_capitalized_fields_and_type_alias():
    index = compile_vocabulary({
        "ato": {"Text": "ATO", "Brief": "Air Tasking Order", "Definition": "long", "Type": "acronym"},
    })
    record = index.terms["ato"]

    assert record.text == "ATO"
    assert record.definition == "long"
    assert record.kind == "acronym"


def test_empty_kind_is_unclassified():
    index = compile_vocabulary({"secaf": {"text": "SecAF", "kind": ""}})

    assert index.terms["secaf"].kind is None


def test_term_record_entries_take_the_mapping_key():
    index = compile_vocabulary({"ato": TermRecord(key="other", text="ATO")})

    assert index.terms["ato"].key == "ato"
    assert "other" not in index


def test_blank_key_falls_back_to_text():
    index = compile_vocabulary({"": {"text": "NATO"}})

    assert index.terms["nato"].text == "NATO"


def test_missing_key_and_text_raises_by_default():
    with pytest.raises(MalformedVocabularyEntry):
        compile_vocabulary({"": {"brief": "orphan"}})


def test_unknown_kind_raises():
    with pytest.raises(MalformedVocabularyEntry):
        compile_vocabulary({"ato": {"text": "ATO", "kind": "slang"}})


def test_non_mapping_entry_raises():
    with pytest.raises(MalformedVocabularyEntry):
        compile_vocabulary({"ato": "Air Tasking Order"})


def test_skip_policy_drops_malformed_entries(caplog):
    config = CompilerConfig(on_malformed="skip")

    with caplog.at_level(logging.WARNING):
        index = compile_vocabulary({
            "": {"brief": "orphan"},
            "ato": {"text": "ATO"},
        }, config=config)

    assert list(index.terms) == ["ato"]
    assert "Skipping malformed vocabulary entry" in caplog.text


def test_duplicate_text_last_entry_wins(caplog):
    with caplog.at_level(logging.WARNING):
        index = compile_vocabulary({
            "block20": {"text": "B20"},
            "b20": {"text": "b20"},
        })

    assert index.text_keys["b20"] == "b20"
    assert "block20" in index
    assert "shadows" in caplog.text


def test_custom_text_accessor():
    compiler = VocabularyCompiler(text_of=lambda record: record.brief)
    index = compiler.compile({"ato": {"text": "ATO", "brief": "Air Tasking Order"}})

    assert index.fingerprint == hashlib.sha256(b"air tasking order").digest()
    assert dict(index.text_keys) == {"air tasking order": "ato"}


def test_configured_algorithm_sets_width():
    index = compile_vocabulary({"ato": {"text": "ATO"}}, config=CompilerConfig(digest_algorithm="sha512"))

    assert index.width == 64
    assert index.algorithm == "sha512"


def test_index_is_immutable(index):
    with pytest.raises(TypeError):
        index.terms["new"] = TermRecord(key="new", text="NEW")

    with pytest.raises(dataclasses.FrozenInstanceError):
        index.fingerprint = bytes(32)


def test_compile_logs_summary(caplog, vocabulary):
    with caplog.at_level(logging.INFO):
        compile_vocabulary(vocabulary)

    assert "Compiled vocabulary with 2 terms" in caplog.text


def test_blank_key_cannot_take_an_existing_key():
    vocabulary = {"ato": {"text": "Foo"}, "": {"text": "ATO"}}

    with pytest.raises(MalformedVocabularyEntry):
        compile_vocabulary(vocabulary)

    index = compile_vocabulary(vocabulary, config=CompilerConfig(on_malformed="skip"))

    assert index.terms["ato"].text == "Foo"
    assert probe(index, "Foo").key == "ato"
    assert probe(index, "ATO") is None
    assert index.fingerprint == hashlib.sha256(b"foo").digest()


def test_blank_key_cannot_take_a_later_key():
    with pytest.raises(MalformedVocabularyEntry):
        compile_vocabulary({"": {"text": "ATO"}, "ato": {"text": "Foo"}})


def test_keys_equal_as_strings_are_duplicates():
    index = compile_vocabulary(
        {1: {"text": "One"}, "1": {"text": "Uno"}},
        config=CompilerConfig(on_malformed="skip"),
    )

    assert index.terms["1"].text == "One"
    assert probe(index, "uno") is None
    assert index.fingerprint == hashlib.sha256(b"one").digest()
