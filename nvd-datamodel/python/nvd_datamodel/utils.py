"""
Utility functions for the data model layer
"""

import gzip
import json
import logging
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from .config import ExtraFields
from .decoder import decode_cve_feed
from .exceptions import DocumentLoadError, SummaryError
from .schemas.cve import CveFeed, CveItem
from .schemas.vulnerabilities import CveSummary

logger = logging.getLogger(__name__)

def parse_nvd_timestamp(value: str) -> datetime:
    """Parse an NVD timestamp such as '2019-01-01T05:29Z' into an aware datetime"""
    parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

def _score(value: Optional[float]) -> Optional[Decimal]:
    return Decimal(str(value)) if value is not None else None

def load_json_document(path: Union[str, Path]) -> Any:
    """Read a .json or .json.gz feed file into a generic tree"""
    path = Path(path)
    opener = gzip.open if path.suffix == '.gz' else open
    try:
        with opener(path, 'rt', encoding='utf-8') as handle:
            return json.load(handle)
    except (OSError, EOFError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load feed document {path}: {e}")
        raise DocumentLoadError(f"Cannot load {path}: {e}") from e

def load_cve_feed(path: Union[str, Path], *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> CveFeed:
    """Load and decode a CVE feed file"""
    feed = decode_cve_feed(load_json_document(path), extra_fields=extra_fields)
    logger.info(f"Loaded {len(feed.cve_items)} CVE items from {path}")
    return feed

def summarize_cve_item(item: CveItem) -> CveSummary:
    """Flatten a decoded CVE item into a CveSummary row.

    Raises SummaryError when a value decodes fine but cannot be stored in a
    CveSummary, such as a score above 10 or an unparseable timestamp.
    """
    cve = item.cve
    v3 = item.impact.base_metric_v3 if item.impact else None
    v2 = item.impact.base_metric_v2 if item.impact else None

    description = next(
        (d.value for d in cve.description.description_data if d.lang.lower() == 'en'),
        None
    )

    if v3:
        severity = v3.cvss_v3.base_severity.value
    elif v2:
        severity = v2.severity.value
    else:
        severity = None

    scored = v3 or v2
    try:
        return CveSummary(
            cve_id=item.cve_id,
            description=description,
            published_date=parse_nvd_timestamp(item.published_date),
            modified_date=parse_nvd_timestamp(item.last_modified_date),
            cvss_v3_score=_score(v3.cvss_v3.base_score) if v3 else None,
            cvss_v3_vector=v3.cvss_v3.vector_string if v3 else None,
            cvss_v2_score=_score(v2.cvss_v2.base_score) if v2 else None,
            cvss_v2_vector=v2.cvss_v2.vector_string if v2 else None,
            severity=severity,
            cwe_ids=cve.problemtype.cwe_ids,
            affected_products=item.configurations.vulnerable_cpes(),
            reference_urls=[ref.url for ref in cve.references.reference_data],
            exploitability_score=_score(scored.exploitability_score) if scored else None,
            impact_score=_score(scored.impact_score) if scored else None,
        )
    except (ValidationError, ValueError) as e:
        logger.error(f"Failed to summarize CVE item {item.cve_id}: {e}")
        raise SummaryError(item.cve_id, str(e)) from e
