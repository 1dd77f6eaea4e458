"""
Flat CVE summary schema
"""

from datetime import datetime
from typing import List, Optional
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# Projection of a decoded CveItem, one row per CVE
class CveSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    cve_id: str = Field(..., max_length=20)
    description: Optional[str] = None
    published_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    cvss_v3_score: Optional[Decimal] = Field(None, ge=0, le=10)
    cvss_v3_vector: Optional[str] = Field(None, max_length=255)
    cvss_v2_score: Optional[Decimal] = Field(None, ge=0, le=10)
    cvss_v2_vector: Optional[str] = Field(None, max_length=255)
    severity: Optional[str] = Field(None, max_length=20)
    cwe_ids: List[str] = []
    affected_products: List[str] = []
    reference_urls: List[str] = []
    exploitability_score: Optional[Decimal] = Field(None, ge=0, le=10)
    impact_score: Optional[Decimal] = Field(None, ge=0, le=10)
