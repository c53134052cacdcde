"""
Amharic stopword sets.

The default list ships in data/stopwords.txt: one word per line, blank lines
ignored, and everything after "#" treated as a comment.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Union

logger = logging.getLogger(__name__)

DEFAULT_STOPWORD_FILE = Path(__file__).parent / "data" / "stopwords.txt"


def parse_word_list(lines: Iterable[str], comment: str = "#") -> FrozenSet[str]:
    """
    Parse a word-per-line list.

    Examples:
        >>> sorted(parse_word_list(["ግን  # but", "", "# header", "ነው"]))
        ['ነው', 'ግን']
    """
    words = set()
    for line in lines:
        word = line.split(comment, 1)[0].strip()
        if word:
            words.add(word)
    return frozenset(words)


def load_word_list(path: Union[str, Path], comment: str = "#") -> FrozenSet[str]:
    """
    Load a word-per-line file (UTF-8).

    Raises:
        FileNotFoundError: If path does not exist
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        words = parse_word_list(f, comment)
    logger.debug(f"Loaded {len(words)} words from {path}")
    return words


@lru_cache(maxsize=None)
def get_default_stopwords() -> FrozenSet[str]:
    """Default Amharic stopword set, loaded once per process"""
    try:
        return load_word_list(DEFAULT_STOPWORD_FILE)
    except OSError as e:
        # data/stopwords.txt ships as package data
        raise RuntimeError("Unable to load default stopword set") from e
