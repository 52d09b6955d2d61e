"""
Province registry: canonicalization, region lookup and autocomplete.

The registry is built once from the static province table and never
mutated afterwards, so concurrent readers need no locking.

Lookup index:
  - Every token of a province (code, name, seat, aliases) is folded to an
    index key: accents stripped, uppercased, whitespace collapsed.
  - Each token is also indexed with the administrative prefixes
    "PROVINCIA DI ", "PROV. " and "PROV. DI ".
  - A key may point to exactly one province code. A clash is a data error
    and aborts the build with RegistryConflictError.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from italy_geo.municipality import match_municipality, normalize_municipality, strip_accents
from italy_geo.provinces import PROVINCE_RECORDS, ProvinceRecord

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
SEARCH_LIMIT = 10

ADMIN_PREFIXES = ("PROVINCIA DI ", "PROV. ", "PROV. DI ")

_PROVINCIA_PREFIX_RE = re.compile(r"^PROVINCIA\s+(?:DI\s+)?", re.IGNORECASE)
_PROV_PREFIX_RE = re.compile(r"^PROV\.\s+(?:DI\s+)?", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


class RegistryConflictError(ValueError):
    """Two provinces claim the same code or lookup token."""


def index_key(text: str) -> str:
    key = strip_accents(text.strip()).upper()
    return _WHITESPACE_RE.sub(" ", key)


def _fold(text: str) -> str:
    return strip_accents(text).lower()


class GeoRegistry:
    """
    Read-only catalog of ProvinceRecords plus the derived lookup index.

    Use build_registry() to construct one; get_registry() returns the
    process-wide instance built from PROVINCE_RECORDS.
    """

    def __init__(self, records: tuple[ProvinceRecord, ...], index: dict[str, str]):
        self._records = records
        self._by_code = {r.code: r for r in records}
        self._index = MappingProxyType(index)

    @property
    def records(self) -> tuple[ProvinceRecord, ...]:
        return self._records

    @property
    def lookup_index(self) -> Mapping[str, str]:
        return self._index

    def __len__(self) -> int:
        return len(self._records)

    def get_province(self, code: str) -> Optional[ProvinceRecord]:
        if not code:
            return None
        return self._by_code.get(code.strip().upper())

    def canonicalize_province(self, text: Optional[str]) -> Optional[str]:
        """
        Map free text ("MI", "milano", "Provincia di Milano") to the
        official province code. Returns None when nothing matches.
        """
        if not text:
            return None
        trimmed = text.strip()
        if len(trimmed) < MIN_QUERY_LENGTH:
            return None

        key = index_key(trimmed)
        code = self._index.get(key)
        if code:
            return code

        without_prefix = _PROVINCIA_PREFIX_RE.sub("", key)
        without_prefix = _PROV_PREFIX_RE.sub("", without_prefix).strip()
        return self._index.get(without_prefix)

    def resolve_province(self, text: Optional[str]) -> Optional[ProvinceRecord]:
        code = self.canonicalize_province(text)
        return self._by_code[code] if code else None

    def find_provinces_in_region(self, region: Optional[str]) -> list[ProvinceRecord]:
        """Exact, case-insensitive region match. No fuzzy matching."""
        if not region:
            return []
        wanted = region.strip().lower()
        if not wanted:
            return []
        return [r for r in self._records if r.region.lower() == wanted]

    def search_provinces(self, query: Optional[str], limit: int = SEARCH_LIMIT) -> list[ProvinceRecord]:
        """
        Autocomplete helper: substring match on code, name, seat or any
        alias. Registry order, first `limit` hits, no ranking.
        """
        if not query:
            return []
        needle = _fold(query.strip())
        if len(needle) < MIN_QUERY_LENGTH:
            return []

        results = []
        for record in self._records:
            if any(needle in _fold(token) for token in record.tokens()):
                results.append(record)
                if len(results) >= limit:
                    break
        return results

    def regions(self) -> list[str]:
        seen: dict[str, None] = {}
        for record in self._records:
            seen.setdefault(record.region, None)
        return list(seen)

    # Comune matching is independent of the province table; exposed here so
    # callers only need the registry handle.
    normalize_municipality = staticmethod(normalize_municipality)
    match_municipality = staticmethod(match_municipality)


def build_registry(records: Iterable[ProvinceRecord]) -> GeoRegistry:
    """
    Build a registry and its lookup index from province records.
    Raises RegistryConflictError on duplicate codes or shared tokens.
    """
    records = tuple(records)
    index: dict[str, str] = {}
    codes: set[str] = set()

    for record in records:
        if record.code in codes:
            raise RegistryConflictError(f"Duplicate province code '{record.code}'")
        codes.add(record.code)

        for token in record.tokens():
            base = index_key(token)
            for key in (base, *(prefix + base for prefix in ADMIN_PREFIXES)):
                owner = index.get(key)
                if owner is not None and owner != record.code:
                    raise RegistryConflictError(
                        f"Token '{key}' claimed by both {owner} and {record.code}"
                    )
                index[key] = record.code

    logger.info("Province registry built: %d provinces, %d lookup tokens",
                len(records), len(index))
    return GeoRegistry(records, index)


@lru_cache(maxsize=1)
def get_registry() -> GeoRegistry:
    """Singleton registry over the bundled province table."""
    return build_registry(PROVINCE_RECORDS)


# ── Module-level shortcuts over the singleton ─────────────────────────

def canonicalize_province(text: Optional[str]) -> Optional[str]:
    return get_registry().canonicalize_province(text)


def find_provinces_in_region(region: Optional[str]) -> list[ProvinceRecord]:
    return get_registry().find_provinces_in_region(region)


def search_provinces(query: Optional[str], limit: int = SEARCH_LIMIT) -> list[ProvinceRecord]:
    return get_registry().search_provinces(query, limit=limit)
