"""
Comune (municipality) name normalization and fuzzy matching.

Comuni are not in the province table, so they are compared on a
normalized form instead of an exact lookup:
  1. Lowercase and trim
  2. Strip accents ("Città" -> "citta")
  3. Expand abbreviations ("S. Giovanni" -> "san giovanni")
  4. Collapse whitespace
  5. Drop a leading elision ("L'Aquila" -> "aquila")

The normalized form is an equivalence-class approximation: it is not
unique per comune and cannot be turned back into the display name.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

MIN_NAME_LENGTH = 2

# Max length ratio for a substring to count as the same comune
# ("pesaro" vs "pesaros" passes, "roma" vs "roma capitale" does not).
MAX_LENGTH_RATIO = 1.2

# Order matters: "s." is tried before "s.ta".
_ABBREVIATIONS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\b" + abbr + r"\s", re.IGNORECASE), full + " ")
    for abbr, full in (
        (r"s\.", "san"),
        (r"st\.", "santo"),
        (r"sta\.", "santa"),
        (r"s\.ta", "santa"),
        (r"n\.", "nuovo"),
        (r"v\.", "vecchio"),
    )
]

_ELISION_RE = re.compile(r"^(?:l'|d'|dell')\s*", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Drop combining marks after NFD decomposition ("Forlì" -> "Forli")."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_municipality(name: Optional[str]) -> str:
    """
    Normalize a comune name for comparison. Inputs shorter than two
    characters (after trimming) normalize to "".
    """
    if not name:
        return ""
    normalized = name.strip().lower()
    if len(normalized) < MIN_NAME_LENGTH:
        return ""

    normalized = strip_accents(normalized)

    for pattern, full in _ABBREVIATIONS:
        normalized = pattern.sub(full, normalized)

    normalized = _WHITESPACE_RE.sub(" ", normalized).strip()

    return _ELISION_RE.sub("", normalized)


def match_municipality(a: Optional[str], b: Optional[str]) -> bool:
    """
    Fuzzy comune equality. True when the normalized names are equal, or
    when one contains the other and their lengths differ by at most 20%.

    Symmetric, not transitive. Two names that both normalize to "" never
    match.
    """
    if not a or not b:
        return False

    norm_a = normalize_municipality(a)
    norm_b = normalize_municipality(b)
    if not norm_a or not norm_b:
        return False

    if norm_a == norm_b:
        return True

    if norm_a in norm_b or norm_b in norm_a:
        shorter, longer = sorted((len(norm_a), len(norm_b)))
        return longer / shorter <= MAX_LENGTH_RATIO

    return False
