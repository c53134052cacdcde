"""Unit test fixtures"""

import pytest

from amharic_search.analysis import AmharicAnalyzer, AmharicStemmer


@pytest.fixture
def stemmer():
    return AmharicStemmer()


@pytest.fixture
def analyzer():
    """Analyzer with the default stopword set and no stem exclusions"""
    return AmharicAnalyzer()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Keep configuration tests independent of the developer's shell.

    Unit tests build settings from explicit monkeypatched variables only.
    Each variable is set before deletion so monkeypatch restores it even
    when a test loads a .env file that writes os.environ directly.
    """
    for var in (
        "LOG_LEVEL",
        "AMHARIC_LOG_FILE",
        "AMHARIC_STOPWORDS_FILE",
        "AMHARIC_STEM_EXCLUSIONS_FILE",
    ):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
