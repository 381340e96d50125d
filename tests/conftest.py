import pytest

from termindex.core.compiler import compile_vocabulary


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TERMINDEX_DIGEST_ALGORITHM",
        "TERMINDEX_ON_MALFORMED",
        "TERMINDEX_LOG_LEVEL",
        "TERMINDEX_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def vocabulary():
    return {
        "ato": {"text": "ATO", "brief": "Air Tasking Order", "kind": "acronym"},
        "atc": {"text": "ATC", "brief": "Air Tasking Cycle", "kind": "acronym"},
    }


@pytest.fixture
def index(vocabulary):
    return compile_vocabulary(vocabulary)
