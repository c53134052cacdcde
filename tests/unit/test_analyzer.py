"""
Unit tests for the Amharic analyzer pipeline.
"""

import pytest

from amharic_search.analysis.analyzer import AmharicAnalyzer
from amharic_search.analysis.stopwords import (
    DEFAULT_STOPWORD_FILE,
    get_default_stopwords,
    load_word_list,
    parse_word_list,
)
from amharic_search.config import Settings


class TestAmharicAnalyzer:
    """Test text → terms"""

    def test_default_stopwords(self, analyzer):
        assert analyzer.analyze("ግን ይህ ረቂቅ ነው") == ["ረቂቅ"]

    def test_ignores_marks(self, analyzer):
        """Test ፣ and ። are separators, not part of terms"""
        assert analyzer.analyze("ግን። ይህ በጣም፣ረቂቅ። ነው ።") == ["በጣ", "ረቂቅ"]

    def test_english_input(self, analyzer):
        """Test non-Amharic text is split and lowercased only"""
        assert analyzer.analyze("English text.") == ["english", "text"]

    def test_custom_stopwords(self):
        analyzer = AmharicAnalyzer(stopwords=["የእነሱ"])

        assert analyzer.analyze("የእነሱ ሀዲስ ዓለማየሁ") == ["ሀዲስ", "ኣለማየሁ"]

    def test_empty_stopwords_keep_everything(self):
        analyzer = AmharicAnalyzer(stopwords=[])

        assert analyzer.analyze("ረቂቅ ይህ") == ["ረቂቅ", "ይህ"]

    def test_spelling_variants_share_a_term(self, analyzer):
        assert analyzer.analyze("ሐዲስ") == analyzer.analyze("ኀዲስ") == analyzer.analyze("ሀዲስ")

    def test_inflected_forms_share_a_term(self, analyzer):
        """Test 'ፈልጊ' with and without a 5-codepoint suffix"""
        assert analyzer.analyze("ፈልጊአችኋለሁ") == analyzer.analyze("ፈልጊ")

    def test_digits_folded(self, analyzer):
        assert analyzer.analyze("ዓመት ٢٠١٥") == ["ኣመ", "2015"]

    def test_empty_text(self, analyzer):
        assert analyzer.analyze("") == []
        assert analyzer.analyze(" ። ") == []


class TestStemExclusions:
    """Test words protected from stemming"""

    def test_excluded_word_not_stemmed(self):
        analyzer = AmharicAnalyzer(stem_exclusions=["ቤቶች"])

        assert analyzer.analyze("ቤቶች ሰላም") == ["ቤቶች", "ሰላ"]

    def test_exclusion_matches_any_spelling(self):
        """Test an archaic spelling in the exclusion set still protects the word"""
        analyzer = AmharicAnalyzer(stem_exclusions=["ሠላም"])

        assert analyzer.stem_exclusions == frozenset({"ሰላም"})
        assert analyzer.analyze("ሠላም ሰላም") == ["ሰላም", "ሰላም"]

    def test_keyword_flag_exposed(self):
        analyzer = AmharicAnalyzer(stem_exclusions=["ቤቶች"])
        tokens = analyzer.analyze_tokens("ቤቶች ሰላም")

        assert [t.keyword for t in tokens] == [True, False]
        assert [(t.start, t.end) for t in tokens] == [(0, 3), (4, 7)]


class TestQueryNormalization:
    """Test normalize() for whole query strings"""

    def test_normalize_keeps_text_shape(self, analyzer):
        assert analyzer.normalize("ሠላም ዓለም ٢٠") == "ሰላም ኣለም 20"

    def test_normalize_lowercases(self, analyzer):
        assert analyzer.normalize("ENGLISH") == "english"

    def test_normalize_does_not_stem(self, analyzer):
        assert analyzer.normalize("ፈልጊአችኋለሁ") == "ፈልጊአችኋለሁ"


class TestFromSettings:
    """Test analyzer construction from configuration"""

    def test_defaults(self):
        analyzer = AmharicAnalyzer.from_settings(Settings())

        assert analyzer.stopwords == get_default_stopwords()
        assert analyzer.stem_exclusions == frozenset()

    def test_files(self, tmp_path):
        stopwords = tmp_path / "stop.txt"
        stopwords.write_text("ረቂቅ\n", encoding="utf-8")
        exclusions = tmp_path / "keep.txt"
        exclusions.write_text("ቤቶች  # plural kept as is\n", encoding="utf-8")

        analyzer = AmharicAnalyzer.from_settings(
            Settings(stopwords_file=stopwords, stem_exclusions_file=exclusions)
        )

        assert analyzer.analyze("ረቂቅ ቤቶች ግን") == ["ቤቶች", "ግ"]


class TestStopwords:
    """Test stopword list loading"""

    def test_default_set_loaded(self):
        stopwords = get_default_stopwords()

        assert DEFAULT_STOPWORD_FILE.exists()
        assert {"ግን", "ይህ", "ነው", "እና"} <= stopwords
        assert not any(word.startswith("#") for word in stopwords)

    def test_default_set_cached(self):
        assert get_default_stopwords() is get_default_stopwords()

    def test_parse_comments_and_blanks(self):
        words = parse_word_list(["# header", "", "ግን  # but", "  ነው  "])

        assert words == frozenset({"ግን", "ነው"})

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.txt")
