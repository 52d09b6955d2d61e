"""
Pydantic models for the API and the lead filters.
ProvinceRecord itself stays a frozen dataclass; these are the wire shapes.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from italy_geo.provinces import ProvinceRecord


# ── Lead models ───────────────────────────────────────────────────────

class Lead(BaseModel):
    """A lead as stored by the lead finder. Only location fields are typed."""
    ragione_sociale: str
    citta: Optional[str] = None
    provincia: Optional[str] = None
    regione: Optional[str] = None

    model_config = {"extra": "allow"}


class LocationCriteria(BaseModel):
    """Location filters applied in order: provincia, regione, comune."""
    provincia: Optional[str] = None
    regione: Optional[str] = None
    comune: Optional[str] = None

    @field_validator("provincia", "regione", "comune", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Form fields arrive as "" when left empty."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_empty(self) -> bool:
        return not (self.provincia or self.regione or self.comune)


# ── API response models ───────────────────────────────────────────────

class ProvinceResponse(BaseModel):
    code: str
    name: str
    seat: str
    region: str
    aliases: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: ProvinceRecord) -> "ProvinceResponse":
        return cls(
            code=record.code,
            name=record.name,
            seat=record.seat,
            region=record.region,
            aliases=list(record.aliases),
        )


class ResolveResponse(BaseModel):
    query: str
    code: Optional[str] = None
    province: Optional[ProvinceResponse] = None


class RegionResponse(BaseModel):
    region: str
    provinces: list[ProvinceResponse] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    name: str
    normalized: str


class MatchResponse(BaseModel):
    a: str
    b: str
    normalized_a: str
    normalized_b: str
    match: bool


class LeadFilterRequest(LocationCriteria):
    leads: list[Lead] = Field(default_factory=list)


class LeadFilterResponse(BaseModel):
    leads: list[Lead]
    total: int
    matched: int


class HealthResponse(BaseModel):
    status: str = "ok"
    provinces: int = 0
    regions: int = 0
    lookup_tokens: int = 0
