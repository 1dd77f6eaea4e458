"""
NVD Data Model Layer
Typed schemas and a validating decoder for NVD JSON feed records
"""

from .schemas import *
from .decoder import (
    decode, decode_cve_feed, decode_cve_item, decode_cve, decode_cve_comment,
    decode_cpe_item, decode_cpe_items, encode, format_path
)
from .config import ExtraFields, get_extra_field_policy
from .utils import load_json_document, load_cve_feed, parse_nvd_timestamp, summarize_cve_item
from .exceptions import *

__version__ = "1.0.0"
