"""
Location filters for lead search results.

Each filter is lenient about its own criterion: an unknown province, an
unknown region or a too-short comune logs a warning and leaves the leads
untouched instead of returning nothing.
"""

from __future__ import annotations

import logging
from typing import Optional

from italy_geo.models import Lead, LocationCriteria
from italy_geo.municipality import MIN_NAME_LENGTH, match_municipality
from italy_geo.registry import GeoRegistry, get_registry

logger = logging.getLogger(__name__)


def filter_by_province(leads: list[Lead], province: str,
                       registry: Optional[GeoRegistry] = None) -> list[Lead]:
    """Keep leads whose provincia resolves to the same code ("MI" == "Milano")."""
    registry = registry or get_registry()
    code = registry.canonicalize_province(province)
    if not code:
        logger.warning("Unknown provincia filter '%s', skipping", province)
        return leads

    filtered = [
        lead for lead in leads
        if lead.provincia and registry.canonicalize_province(lead.provincia) == code
    ]
    logger.info("Provincia '%s' -> %s: matched %d/%d leads",
                province, code, len(filtered), len(leads))
    return filtered


def filter_by_region(leads: list[Lead], region: str,
                     registry: Optional[GeoRegistry] = None) -> list[Lead]:
    """Keep leads whose provincia belongs to the region."""
    registry = registry or get_registry()
    codes = {p.code for p in registry.find_provinces_in_region(region)}
    if not codes:
        logger.warning("Unknown regione filter '%s', skipping", region)
        return leads

    filtered = [
        lead for lead in leads
        if lead.provincia and registry.canonicalize_province(lead.provincia) in codes
    ]
    logger.info("Regione '%s' (%s): matched %d/%d leads",
                region, ", ".join(sorted(codes)), len(filtered), len(leads))
    return filtered


def filter_by_municipality(leads: list[Lead], comune: str) -> list[Lead]:
    """Keep leads whose citta fuzzy-matches the comune."""
    if not comune or len(comune.strip()) < MIN_NAME_LENGTH:
        logger.warning("Comune filter too short '%s', skipping", comune)
        return leads

    filtered = [lead for lead in leads if lead.citta and match_municipality(lead.citta, comune)]
    logger.info("Comune '%s': matched %d/%d leads", comune, len(filtered), len(leads))
    return filtered


def apply_location_filters(leads: list[Lead], criteria: LocationCriteria,
                           registry: Optional[GeoRegistry] = None) -> list[Lead]:
    if criteria.provincia:
        leads = filter_by_province(leads, criteria.provincia, registry)
    if criteria.regione:
        leads = filter_by_region(leads, criteria.regione, registry)
    if criteria.comune:
        leads = filter_by_municipality(leads, criteria.comune)
    return leads
