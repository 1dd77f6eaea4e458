"""
CPE dictionary schemas
"""

from typing import Annotated, Any, Optional, Tuple

from pydantic import BeforeValidator, Field, StrictBool, StrictStr

from .base import BaseSchema, NotNull
from .common import Description


def _as_list(value: Any) -> Any:
    # The feed emits a bare object when a CPE has exactly one reference
    if isinstance(value, dict):
        return [value]
    return value


class CpeReference(BaseSchema):
    value: StrictStr
    href: StrictStr

class CpeReferences(BaseSchema):
    reference: Annotated[Tuple[CpeReference, ...], BeforeValidator(_as_list)]

class DeprecatedBy(BaseSchema):
    name: StrictStr
    type: StrictStr

class Cpe23Deprecation(BaseSchema):
    date: StrictStr
    deprecated_by: DeprecatedBy = Field(..., alias='deprecated-by')

class Cpe23Item(BaseSchema):
    name: StrictStr
    deprecation: Annotated[Optional[Cpe23Deprecation], NotNull] = None

    @property
    def superseded_by(self) -> Optional[str]:
        return self.deprecation.deprecated_by.name if self.deprecation else None

class CpeItem(BaseSchema):
    name: StrictStr
    deprecated: Annotated[Optional[StrictBool], NotNull] = None
    deprecation_date: Annotated[Optional[StrictStr], NotNull] = None
    title: Description
    references: CpeReferences
    cpe23_item: Cpe23Item = Field(..., alias='cpe23-item')
