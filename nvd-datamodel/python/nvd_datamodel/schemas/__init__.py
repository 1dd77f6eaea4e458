"""
Pydantic schemas for NVD JSON feed records

Schema organization:
- base.py: Base schema, closed enumerations and field builders
- common.py: Shapes shared by CVE and CPE records (descriptions)
- cve.py: CVE feed, items, configurations and CVSS impacts
- cpe.py: CPE dictionary items
- vulnerabilities.py: Flat CVE summary projection
"""

from .base import (
    BaseSchema, NotNull, closed, fixed,
    Operator, AttackVector, AttackComplexity, ImpactLevel, UserInteraction, Scope,
    BaseSeverity, AccessVector, AccessComplexity, Authentication, ImpactV2, SeverityV2
)
from .common import Description
from .cve import (
    CveFeed, CveItem, Cve, CveMetaData, ProblemTypeData, ProblemType,
    CveReference, CveReferences, CveDescriptions, CveComment,
    CpeConfiguration, CpeConfigurationNode, CpeMatch,
    Impact, ImpactBaseMetricV3, ImpactBaseMetricV2, CvssV3, CvssV2
)
from .cpe import CpeItem, Cpe23Item, Cpe23Deprecation, DeprecatedBy, CpeReference, CpeReferences
from .vulnerabilities import CveSummary

# Export all schemas
__all__ = [
    # Base
    'BaseSchema', 'NotNull', 'closed', 'fixed',
    'Operator', 'AttackVector', 'AttackComplexity', 'ImpactLevel', 'UserInteraction', 'Scope',
    'BaseSeverity', 'AccessVector', 'AccessComplexity', 'Authentication', 'ImpactV2', 'SeverityV2',
    # Common
    'Description',
    # CVE
    'CveFeed', 'CveItem', 'Cve', 'CveMetaData', 'ProblemTypeData', 'ProblemType',
    'CveReference', 'CveReferences', 'CveDescriptions', 'CveComment',
    'CpeConfiguration', 'CpeConfigurationNode', 'CpeMatch',
    'Impact', 'ImpactBaseMetricV3', 'ImpactBaseMetricV2', 'CvssV3', 'CvssV2',
    # CPE
    'CpeItem', 'Cpe23Item', 'Cpe23Deprecation', 'DeprecatedBy', 'CpeReference', 'CpeReferences',
    # Summaries
    'CveSummary'
]
