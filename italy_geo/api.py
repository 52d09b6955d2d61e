"""
FastAPI service exposing the province registry and comune matching.

Endpoints:
  GET  /provinces                     - Autocomplete search (?q=)
  GET  /provinces/resolve             - Canonicalize free text to a code
  GET  /provinces/{code}              - Single province record
  GET  /regions                       - Region names
  GET  /regions/{region}/provinces    - Provinces of a region
  GET  /municipalities/normalize      - Normalized comune name
  GET  /municipalities/match          - Fuzzy comune comparison
  POST /leads/filter                  - Filter leads by location
  GET  /health                        - Registry stats
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from italy_geo.config import get_settings
from italy_geo.lead_filter import apply_location_filters
from italy_geo.models import (
    HealthResponse,
    LeadFilterRequest,
    LeadFilterResponse,
    MatchResponse,
    NormalizeResponse,
    ProvinceResponse,
    RegionResponse,
    ResolveResponse,
)
from italy_geo.municipality import match_municipality, normalize_municipality
from italy_geo.registry import SEARCH_LIMIT, get_registry

logger = logging.getLogger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the registry before the first request is served."""
    registry = get_registry()
    logger.info("API ready with %d provinces", len(registry))
    yield


# ── App ───────────────────────────────────────────────────────────────

app = FastAPI(
    title="Italy Geo API",
    description="Italian province canonicalization and comune matching",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().api.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ══════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ══════════════════════════════════════════════════════════════════════

@app.get("/provinces", response_model=list[ProvinceResponse])
async def search_provinces(
    q: str = Query("", max_length=100, description="Code, name, seat or alias fragment"),
    limit: int = Query(SEARCH_LIMIT, ge=1, description="Max results"),
):
    """Autocomplete suggestions. Queries under two characters return []."""
    limit = min(limit, get_settings().api.max_search_results)
    records = get_registry().search_provinces(q, limit=limit)
    return [ProvinceResponse.from_record(r) for r in records]


@app.get("/provinces/resolve", response_model=ResolveResponse)
async def resolve_province(q: str = Query(..., max_length=100)):
    """
    Canonicalize free text to a province code. An unresolved query is not
    an error: the response carries code=null.
    """
    record = get_registry().resolve_province(q)
    if record is None:
        return ResolveResponse(query=q)
    return ResolveResponse(query=q, code=record.code, province=ProvinceResponse.from_record(record))


@app.get("/provinces/{code}", response_model=ProvinceResponse)
async def get_province(code: str):
    record = get_registry().get_province(code)
    if record is None:
        raise HTTPException(404, f"Province '{code}' not found")
    return ProvinceResponse.from_record(record)


@app.get("/regions", response_model=list[str])
async def list_regions():
    return get_registry().regions()


@app.get("/regions/{region}/provinces", response_model=RegionResponse)
async def region_provinces(region: str):
    records = get_registry().find_provinces_in_region(region)
    return RegionResponse(
        region=region,
        provinces=[ProvinceResponse.from_record(r) for r in records],
    )


@app.get("/municipalities/normalize", response_model=NormalizeResponse)
async def normalize_comune(name: str = Query(..., max_length=200)):
    return NormalizeResponse(name=name, normalized=normalize_municipality(name))


@app.get("/municipalities/match", response_model=MatchResponse)
async def match_comuni(
    a: str = Query(..., max_length=200),
    b: str = Query(..., max_length=200),
):
    return MatchResponse(
        a=a,
        b=b,
        normalized_a=normalize_municipality(a),
        normalized_b=normalize_municipality(b),
        match=match_municipality(a, b),
    )


@app.post("/leads/filter", response_model=LeadFilterResponse)
async def filter_leads(request: LeadFilterRequest):
    """Apply provincia, regione and comune filters to a batch of leads."""
    leads = apply_location_filters(request.leads, request)
    return LeadFilterResponse(leads=leads, total=len(request.leads), matched=len(leads))


@app.get("/health", response_model=HealthResponse)
async def health_check():
    registry = get_registry()
    return HealthResponse(
        status="ok",
        provinces=len(registry),
        regions=len(registry.regions()),
        lookup_tokens=len(registry.lookup_index),
    )
