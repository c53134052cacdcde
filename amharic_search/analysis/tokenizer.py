"""
Tokenizer for Amharic text.

Splits raw text into word tokens:
1. Runs of letters and digits form a token (Ethiopic syllables, Latin, digits);
   combining marks (Ethiopic gemination/vowel-length marks U+135D-U+135F,
   Latin diacritics) stay inside the word, as does an apostrophe between
   letters ("don't")
2. Everything else separates tokens, including Ethiopic punctuation:
   ፡ (wordspace) ። (full stop) ፣ (comma) ፤ ፥ ፦ ፧ ፨
3. Each token keeps its character offsets in the source text

Examples:
- "ሰላም፡ዓለም።"        → ["ሰላም", "ዓለም"]
- "English text."     → ["English", "text"]
- "በ2015 ዓ.ም"         → ["በ2015", "ዓ", "ም"]
"""

import re
from typing import Iterator, List

from .buffer import TermBuffer

# Letters and digits in any script; underscore is a separator
_LETTER = r"[^\W_]"
_MARK = r"[\u0300-\u036F\u135D-\u135F]"
_PIECE = rf"{_LETTER}(?:{_LETTER}|{_MARK})*"

# Pieces joined by an internal apostrophe form one word
WORD_PATTERN = re.compile(rf"{_PIECE}(?:['’]{_PIECE})*")


class Token:
    """A word token flowing through the analysis pipeline"""

    __slots__ = ("term", "start", "end", "keyword")

    def __init__(self, text: str, start: int, end: int, keyword: bool = False):
        self.term = TermBuffer(text)
        self.start = start
        self.end = end
        self.keyword = keyword  # keyword tokens are never stemmed

    @property
    def text(self) -> str:
        return self.term.text

    def __repr__(self) -> str:
        flag = ", keyword=True" if self.keyword else ""
        return f"Token({self.text!r}, {self.start}, {self.end}{flag})"


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield word tokens with their source offsets"""
    if not text:
        return
    for match in WORD_PATTERN.finditer(text):
        yield Token(match.group(), match.start(), match.end())


def tokenize(text: str) -> List[str]:
    """
    Split text into raw word strings (no case folding or stemming).

    Examples:
        >>> tokenize("ግን። ይህ በጣም፣ረቂቅ።")
        ['ግን', 'ይህ', 'በጣም', 'ረቂቅ']

        >>> tokenize("   ")
        []
    """
    return [token.text for token in iter_tokens(text)]
