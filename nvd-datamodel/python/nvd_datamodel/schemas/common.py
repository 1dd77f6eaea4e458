"""
Schemas shared by CVE and CPE records
"""

from pydantic import StrictStr

from .base import BaseSchema

class Description(BaseSchema):
    lang: StrictStr  # e.g. 'EN'
    value: StrictStr
