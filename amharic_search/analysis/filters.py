"""
Token filters for the Amharic analysis pipeline.

Each filter takes an iterable of tokens and yields tokens, editing the term
buffer in place, so filters compose lazily:

    tokens = iter_tokens(text)
    tokens = lowercase_filter(tokens)
    tokens = decimal_digit_filter(tokens)
    tokens = stop_filter(tokens, stopwords)
    tokens = normalization_filter(tokens)
    tokens = keyword_marker_filter(tokens, exclusions)
    tokens = stem_filter(tokens)
"""

import unicodedata
from typing import AbstractSet, Iterable, Iterator, Optional

from .normalizer import normalize
from .stemmer import AmharicStemmer, stem
from .tokenizer import Token


def fold_digits(text: str) -> str:
    """
    Replace every Unicode decimal digit with its ASCII form.

    Only category Nd digits are folded; Ethiopic numerals (፩, ፲, ...) are
    not decimal digits and pass through unchanged.

    Examples:
        >>> fold_digits("٢٠١٥")
        '2015'
    """
    if text.isascii():
        return text
    return "".join(
        str(unicodedata.decimal(ch)) if ch.isdecimal() and not ch.isascii() else ch
        for ch in text
    )


def lowercase_filter(tokens: Iterable[Token]) -> Iterator[Token]:
    for token in tokens:
        text = token.text
        lowered = text.lower()
        if lowered != text:
            token.term.set_text(lowered)
        yield token


def decimal_digit_filter(tokens: Iterable[Token]) -> Iterator[Token]:
    for token in tokens:
        text = token.text
        folded = fold_digits(text)
        if folded != text:
            token.term.set_text(folded)
        yield token


def stop_filter(tokens: Iterable[Token], stopwords: AbstractSet[str]) -> Iterator[Token]:
    """Drop tokens whose text is in stopwords"""
    for token in tokens:
        if token.text not in stopwords:
            yield token


def normalization_filter(tokens: Iterable[Token]) -> Iterator[Token]:
    """Fold orthographic variants; keyword tokens are left as written"""
    for token in tokens:
        if not token.keyword:
            term = token.term
            term.length = normalize(term.chars, term.length)
        yield token


def keyword_marker_filter(tokens: Iterable[Token], keywords: AbstractSet[str]) -> Iterator[Token]:
    """Mark tokens found in keywords so later filters skip them"""
    for token in tokens:
        if token.text in keywords:
            token.keyword = True
        yield token


def stem_filter(tokens: Iterable[Token], stemmer: Optional[AmharicStemmer] = None) -> Iterator[Token]:
    """Strip affixes from every non-keyword token"""
    for token in tokens:
        if not token.keyword:
            term = token.term
            if stemmer is None:
                term.length = stem(term.chars, term.length)
            else:
                term.length = stemmer.stem_buffer(term.chars, term.length)
        yield token
