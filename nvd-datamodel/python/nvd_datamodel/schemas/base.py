"""
Base schemas, enumerations and field builders
"""

from typing import Annotated, Any, Literal, Type
from enum import Enum

from pydantic import BaseModel, ConfigDict, BeforeValidator, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError, PydanticKnownError

from ..config import ExtraFields

# Enums for validation
class Operator(str, Enum):
    AND = "AND"
    OR = "OR"

class AttackVector(str, Enum):
    ADJACENT_NETWORK = "ADJACENT_NETWORK"
    LOCAL = "LOCAL"
    NETWORK = "NETWORK"
    PHYSICAL = "PHYSICAL"

class AttackComplexity(str, Enum):
    HIGH = "HIGH"
    LOW = "LOW"

class ImpactLevel(str, Enum):
    """Shared by privileges required and the CIA impacts in CVSS v3"""
    HIGH = "HIGH"
    LOW = "LOW"
    NONE = "NONE"

class UserInteraction(str, Enum):
    NONE = "NONE"
    REQUIRED = "REQUIRED"

class Scope(str, Enum):
    CHANGED = "CHANGED"
    UNCHANGED = "UNCHANGED"

class BaseSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

class AccessVector(str, Enum):
    ADJACENT_NETWORK = "ADJACENT_NETWORK"
    LOCAL = "LOCAL"
    NETWORK = "NETWORK"

class AccessComplexity(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

class Authentication(str, Enum):
    MULTIPLE = "MULTIPLE"
    SINGLE = "SINGLE"
    NONE = "NONE"

class ImpactV2(str, Enum):
    COMPLETE = "COMPLETE"
    NONE = "NONE"
    PARTIAL = "PARTIAL"

class SeverityV2(str, Enum):
    HIGH = "HIGH"
    LOW = "LOW"
    MEDIUM = "MEDIUM"


# Field builders
def closed(enum_cls: Type[Enum]) -> Any:
    """Field type accepting only the wire values of ``enum_cls``.

    Non-strings are a type error; strings outside the set raise
    ``enum_violation`` with the permitted values in the error context.
    """
    permitted = tuple(member.value for member in enum_cls)

    def check(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise PydanticKnownError('string_type')
        if value not in permitted:
            raise PydanticCustomError(
                'enum_violation',
                "Input should be one of {permitted}",
                {'permitted': permitted},
            )
        return enum_cls(value)

    return Annotated[enum_cls, BeforeValidator(check)]


def fixed(constant: str) -> Any:
    """Field type that must equal ``constant`` exactly"""

    def check(value: Any) -> Any:
        if not isinstance(value, str) or value != constant:
            raise PydanticCustomError(
                'literal_violation',
                "Input should be exactly '{expected}'",
                {'expected': constant},
            )
        return value

    return Annotated[Literal[constant], BeforeValidator(check)]


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError('null_forbidden', "Optional field may be omitted but not null")
    return value

# Optional fields: absent means None, explicit null is an error
NotNull = BeforeValidator(_reject_null)


# Base schemas
class BaseSchema(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

    @model_validator(mode='before')
    @classmethod
    def check_unknown_fields(cls, data: Any, info: ValidationInfo) -> Any:
        policy = (info.context or {}).get('extra_fields', ExtraFields.IGNORE)
        if policy != ExtraFields.FORBID or not isinstance(data, dict):
            return data

        known = {field.alias or name for name, field in cls.model_fields.items()}
        for key in data:
            if key not in known:
                raise PydanticCustomError(
                    'unexpected_field',
                    "Unexpected field '{field}'",
                    {'field': key},
                )
        return data
