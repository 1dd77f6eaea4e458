"""
Environment-driven settings for the data model layer
"""

import os
import logging
from enum import Enum

logger = logging.getLogger(__name__)

EXTRA_FIELDS_ENV = 'NVD_EXTRA_FIELDS'


class ExtraFields(str, Enum):
    """What to do with keys the NVD schema does not declare"""
    IGNORE = "ignore"
    FORBID = "forbid"


def get_extra_field_policy() -> ExtraFields:
    """Read the unknown-field policy from the environment (default: ignore)"""
    raw = os.getenv(EXTRA_FIELDS_ENV, ExtraFields.IGNORE.value).strip().lower()
    try:
        return ExtraFields(raw)
    except ValueError:
        logger.warning(f"Unknown {EXTRA_FIELDS_ENV} value '{raw}', falling back to 'ignore'")
        return ExtraFields.IGNORE
