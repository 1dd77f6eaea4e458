"""
Schema-validating decoder for NVD feed documents

Takes an already-parsed JSON tree and returns typed, immutable records, or
raises a DecodeError subclass naming the path of the first violation.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from .config import ExtraFields, get_extra_field_policy
from .exceptions import (
    ConfigurationError, DecodeError, MissingField, TypeMismatch, EnumViolation, LiteralViolation, UnexpectedField
)
from .schemas.base import BaseSchema
from .schemas.cve import CveFeed, CveItem, Cve, CveComment
from .schemas.cpe import CpeItem

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=BaseSchema)

_CPE_ITEMS = TypeAdapter(List[CpeItem])

# pydantic error type -> wire kind that was expected
_EXPECTED_KINDS = {
    'string_type': 'string',
    'bool_type': 'boolean',
    'int_type': 'integer',
    'float_type': 'number',
    'list_type': 'array',
    'tuple_type': 'array',
    'model_type': 'object',
    'model_attributes_type': 'object',
    'dict_type': 'object',
    'null_forbidden': 'non-null value',
}


def format_path(loc: Sequence[Union[str, int]]) -> str:
    """Render a validation location as ``CVE_Items[3].impact.baseMetricV3``"""
    path = ''
    for part in loc:
        if isinstance(part, int):
            path += f'[{part}]'
        elif path:
            path += f'.{part}'
        else:
            path = str(part)
    return path or '<root>'


def _translate(error: Dict[str, Any]) -> DecodeError:
    kind = error['type']
    loc = tuple(error['loc'])
    ctx = error.get('ctx') or {}
    actual = error.get('input')
    path = format_path(loc)

    if kind == 'missing':
        return MissingField(path)
    if kind == 'enum_violation':
        return EnumViolation(path, tuple(ctx['permitted']), actual)
    if kind == 'literal_violation':
        return LiteralViolation(path, ctx['expected'], actual)
    if kind == 'unexpected_field':
        field = ctx['field']
        return UnexpectedField(format_path(loc + (field,)), actual.get(field) if isinstance(actual, dict) else None)
    return TypeMismatch(path, _EXPECTED_KINDS.get(kind, error['msg']), actual)


def _resolve_policy(extra_fields: Optional[Union[ExtraFields, str]]) -> ExtraFields:
    if extra_fields is None:
        return get_extra_field_policy()
    try:
        return ExtraFields(extra_fields)
    except ValueError as e:
        permitted = ', '.join(policy.value for policy in ExtraFields)
        raise ConfigurationError(f"extra_fields must be one of {permitted}, got {extra_fields!r}") from e


def _validate(adapter: Any, data: Any, extra_fields: Optional[Union[ExtraFields, str]], label: str) -> Any:
    context = {'extra_fields': _resolve_policy(extra_fields)}
    try:
        if isinstance(adapter, TypeAdapter):
            return adapter.validate_python(data, context=context)
        return adapter.model_validate(data, context=context)
    except ValidationError as e:
        # errors arrive in field declaration order; report only the first
        error = _translate(e.errors()[0])
        logger.warning(f"Rejected {label} document: {error}")
        raise error from e


def decode(schema: Type[S], data: Any, *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> S:
    """Decode ``data`` into ``schema`` or raise the first violation"""
    return _validate(schema, data, extra_fields, schema.__name__)


def decode_cve_feed(data: Any, *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> CveFeed:
    feed = decode(CveFeed, data, extra_fields=extra_fields)
    logger.debug(f"Decoded CVE feed with {len(feed.cve_items)} items (declared {feed.cve_data_number_of_cves})")
    return feed


def decode_cve_item(data: Any, *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> CveItem:
    item = decode(CveItem, data, extra_fields=extra_fields)
    logger.debug(f"Decoded CVE item {item.cve_id}")
    return item


def decode_cve(data: Any, *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> Cve:
    return decode(Cve, data, extra_fields=extra_fields)


def decode_cve_comment(data: Any, *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> CveComment:
    return decode(CveComment, data, extra_fields=extra_fields)


def decode_cpe_item(data: Any, *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> CpeItem:
    item = decode(CpeItem, data, extra_fields=extra_fields)
    logger.debug(f"Decoded CPE item {item.name}")
    return item


def decode_cpe_items(data: Any, *, extra_fields: Optional[Union[ExtraFields, str]] = None) -> List[CpeItem]:
    """Decode a JSON array of CPE items; paths start at the array index"""
    items = _validate(_CPE_ITEMS, data, extra_fields, 'CpeItem list')
    logger.debug(f"Decoded {len(items)} CPE items")
    return items


def encode(record: Union[BaseSchema, List[BaseSchema]]) -> Any:
    """Turn decoded records back into a generic JSON tree with wire names.

    Only fields present at decode time are emitted, and CPE references are
    always written as an array.
    """
    if isinstance(record, list):
        return [encode(r) for r in record]
    return record.model_dump(mode='json', by_alias=True, exclude_unset=True)
