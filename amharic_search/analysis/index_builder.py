"""
Term index builder - aggregates analyzed term frequencies from text chunks.

Creates a minimal document-level term frequency index for keyword search.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional

from .analyzer import AmharicAnalyzer

logger = logging.getLogger(__name__)


def build_term_index(
    chunks_texts: List[str],
    analyzer: Optional[AmharicAnalyzer] = None,
) -> Dict[str, Dict[str, int]]:
    """
    Build a document-level term index from chunk texts.

    Aggregates term frequencies across all chunks into a single
    document-level term frequency dictionary. Spelling variants and
    inflected forms land on the same term.

    Args:
        chunks_texts: List of chunk text strings
        analyzer: Analyzer to use (default: AmharicAnalyzer())

    Returns:
        Dict with structure:
        {
            "term_frequencies": {
                "term1": count1,
                ...
            }
        }

    Example:
        >>> index = build_term_index(["ሠላም ለሁሉም", "ሰላም"])
        >>> index["term_frequencies"]["ሰላ"]
        2
    """
    if analyzer is None:
        analyzer = AmharicAnalyzer()

    term_frequencies = defaultdict(int)

    for chunk_text in chunks_texts:
        for term in analyzer.analyze(chunk_text):
            term_frequencies[term] += 1

    # Plain dict for JSON serialization
    result = {
        "term_frequencies": dict(term_frequencies)
    }

    logger.debug(f"Built term index: {len(result['term_frequencies'])} unique terms from {len(chunks_texts)} chunks")

    return result
