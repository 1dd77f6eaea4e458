"""
Custom exceptions for the data model layer
"""

from typing import Any, Optional

__all__ = [
    'NvdDataModelError', 'DecodeError', 'MissingField', 'TypeMismatch',
    'EnumViolation', 'LiteralViolation', 'UnexpectedField', 'DocumentLoadError',
    'SummaryError', 'ConfigurationError'
]


class NvdDataModelError(Exception):
    """Base exception for data model layer"""
    pass


class DecodeError(NvdDataModelError):
    """A document does not match the shape it claims to have.

    Carries the dotted path of the first violation, the constraint that was
    expected there and the value actually observed.
    """

    def __init__(self, path: str, expected: Any, actual: Any, message: Optional[str] = None):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"{path}: expected {expected}, got {actual!r}")


class MissingField(DecodeError):
    """Required field absent"""

    def __init__(self, path: str, expected: Any = "required field", actual: Any = None):
        super().__init__(path, expected, actual, f"{path}: missing required field")


class TypeMismatch(DecodeError):
    """Field present but of the wrong kind"""
    pass


class EnumViolation(DecodeError):
    """Value is not one of the declared options"""

    def __init__(self, path: str, expected: tuple, actual: Any):
        super().__init__(
            path, expected, actual,
            f"{path}: expected one of {', '.join(expected)}, got {actual!r}"
        )


class LiteralViolation(DecodeError):
    """Fixed-value field does not equal its constant"""

    def __init__(self, path: str, expected: str, actual: Any):
        super().__init__(path, expected, actual, f"{path}: expected exactly {expected!r}, got {actual!r}")


class UnexpectedField(DecodeError):
    """Unknown field rejected by the forbid policy"""

    def __init__(self, path: str, actual: Any):
        super().__init__(path, "no such field", actual, f"{path}: unexpected field")


class DocumentLoadError(NvdDataModelError):
    """Feed file could not be read or parsed"""
    pass


class SummaryError(NvdDataModelError):
    """Decoded CVE item cannot be flattened into a CveSummary"""

    def __init__(self, cve_id: str, reason: str):
        self.cve_id = cve_id
        super().__init__(f"Cannot summarize {cve_id}: {reason}")


class ConfigurationError(NvdDataModelError):
    """Invalid setting passed to the data model layer"""
    pass
