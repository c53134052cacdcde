"""
Affix rule tables for the Amharic stemmer.

The tables are kept as data (data/affixes.yaml) and loaded once at import
into immutable tuples shared by every stemmer instance. Each tier groups
affixes of one length with the minimum word length required before the tier
is attempted:

    suffix tier (length=5, min_length=7): "አችኋለሁ", "አችዋለሁ", "አችዋለሽ"

Affixes are normalized on load so they match normalized term buffers.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Tuple

import yaml

from .normalizer import normalize_word

logger = logging.getLogger(__name__)

AFFIX_FILE = Path(__file__).parent / "data" / "affixes.yaml"


class RuleTableError(ValueError):
    """Affix table data is malformed"""


@dataclass(frozen=True)
class AffixTier:
    """Affixes of one length sharing a length guard"""
    length: int
    min_length: int
    affixes: Tuple[str, ...]

    def applies_to(self, word_length: int) -> bool:
        return word_length >= self.min_length


def _parse_tier(side: str, index: int, raw: Any) -> AffixTier:
    if not isinstance(raw, dict):
        raise RuleTableError(f"{side}[{index}]: tier must be a mapping, got {type(raw).__name__}")

    try:
        length = int(raw["length"])
        min_length = int(raw["min_length"])
        raw_affixes = raw["affixes"]
    except KeyError as e:
        raise RuleTableError(f"{side}[{index}]: missing key {e}") from e
    except (TypeError, ValueError) as e:
        raise RuleTableError(f"{side}[{index}]: {e}") from e

    if length < 1:
        raise RuleTableError(f"{side}[{index}]: affix length must be positive, got {length}")
    # Stripping must always leave a non-empty remainder
    if min_length <= length:
        raise RuleTableError(
            f"{side}[{index}]: min_length {min_length} must exceed affix length {length}"
        )
    if not raw_affixes:
        raise RuleTableError(f"{side}[{index}]: tier has no affixes")

    affixes: List[str] = []
    for affix in raw_affixes:
        affix = normalize_word(str(affix))
        if len(affix) != length:
            raise RuleTableError(
                f"{side}[{index}]: affix {affix!r} has length {len(affix)}, tier expects {length}"
            )
        if affix not in affixes:
            affixes.append(affix)

    return AffixTier(length=length, min_length=min_length, affixes=tuple(affixes))


def parse_tiers(side: str, raw_tiers: Any) -> Tuple[AffixTier, ...]:
    """
    Build validated tiers for one side (prefixes or suffixes).

    Raises:
        RuleTableError: On malformed tiers, tiers out of longest-first
            order, or guards that shrink as affixes get longer
    """
    if not isinstance(raw_tiers, list) or not raw_tiers:
        raise RuleTableError(f"{side}: expected a non-empty list of tiers")

    tiers = tuple(_parse_tier(side, i, raw) for i, raw in enumerate(raw_tiers))

    for previous, current in zip(tiers, tiers[1:]):
        if current.length > previous.length:
            raise RuleTableError(
                f"{side}: tiers must be ordered longest affix first "
                f"({previous.length} before {current.length})"
            )
        if current.length < previous.length and current.min_length > previous.min_length:
            raise RuleTableError(
                f"{side}: shorter affixes cannot need a longer word "
                f"(min_length {current.min_length} after {previous.min_length})"
            )

    return tiers


def load_rules(path: Path = AFFIX_FILE) -> Tuple[Tuple[AffixTier, ...], Tuple[AffixTier, ...]]:
    """
    Load prefix and suffix tiers from a YAML affix file.

    Returns:
        (prefix_tiers, suffix_tiers)
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise RuleTableError(f"{path}: expected a mapping with 'prefixes' and 'suffixes'")

    prefixes = parse_tiers("prefixes", data.get("prefixes"))
    suffixes = parse_tiers("suffixes", data.get("suffixes"))

    logger.debug(
        f"Loaded affix rules from {path.name}: "
        f"{sum(len(t.affixes) for t in prefixes)} prefixes in {len(prefixes)} tiers, "
        f"{sum(len(t.affixes) for t in suffixes)} suffixes in {len(suffixes)} tiers"
    )
    return prefixes, suffixes


PREFIX_TIERS, SUFFIX_TIERS = load_rules()
