"""
CVE feed schemas

Field aliases carry the NVD wire names; attributes are snake_case.
"""

from typing import Annotated, List, Optional, Tuple

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from .base import (
    BaseSchema, NotNull, closed, fixed,
    Operator, AttackVector, AttackComplexity, ImpactLevel, UserInteraction, Scope,
    BaseSeverity, AccessVector, AccessComplexity, Authentication, ImpactV2, SeverityV2
)
from .common import Description

ASSIGNER = 'cve@mitre.org'
DATA_TYPE = 'CVE'
DATA_FORMAT = 'MITRE'

# CVE body schemas
class CveMetaData(BaseSchema):
    id: StrictStr = Field(..., alias='ID')
    assigner: fixed(ASSIGNER) = Field(..., alias='ASSIGNER')

class ProblemType(BaseSchema):
    description: Tuple[Description, ...]

class ProblemTypeData(BaseSchema):
    """Nested list of CWE descriptions"""
    problemtype_data: Tuple[ProblemType, ...]

    @property
    def cwe_ids(self) -> List[str]:
        return [d.value for entry in self.problemtype_data for d in entry.description]

class CveReference(BaseSchema):
    url: StrictStr
    name: StrictStr
    refsource: StrictStr
    tags: Tuple[StrictStr, ...]

class CveReferences(BaseSchema):
    reference_data: Tuple[CveReference, ...]

class CveDescriptions(BaseSchema):
    description_data: Tuple[Description, ...]

class Cve(BaseSchema):
    data_type: fixed(DATA_TYPE)
    data_format: fixed(DATA_FORMAT)
    data_version: StrictStr
    cve_data_meta: CveMetaData = Field(..., alias='CVE_data_meta')
    problemtype: ProblemTypeData
    references: CveReferences
    description: CveDescriptions

class CveComment(BaseSchema):
    """Vendor supplied comment for a CVE"""
    value: StrictStr
    cvename: StrictStr
    organization: StrictStr
    lastmodified: StrictStr  # YYYY-MM-DD
    contributor: Annotated[Optional[StrictStr], NotNull] = None

# Configuration schemas
class CpeMatch(BaseSchema):
    vulnerable: StrictBool
    cpe23_uri: StrictStr = Field(..., alias='cpe23Uri')

class CpeConfigurationNode(BaseSchema):
    operator: closed(Operator)
    cpe_match: Tuple[CpeMatch, ...]

class CpeConfiguration(BaseSchema):
    cve_data_version: StrictStr = Field(..., alias='CVE_data_version')
    nodes: Tuple[CpeConfigurationNode, ...]

    def vulnerable_cpes(self) -> List[str]:
        """CPE 2.3 URIs flagged vulnerable, in document order"""
        return [m.cpe23_uri for node in self.nodes for m in node.cpe_match if m.vulnerable]

# Impact schemas
class CvssV3(BaseSchema):
    version: StrictStr
    vector_string: StrictStr = Field(..., alias='vectorString')
    attack_vector: closed(AttackVector) = Field(..., alias='attackVector')
    attack_complexity: closed(AttackComplexity) = Field(..., alias='attackComplexity')
    privileges_required: closed(ImpactLevel) = Field(..., alias='privilegesRequired')
    user_interaction: closed(UserInteraction) = Field(..., alias='userInteraction')
    scope: closed(Scope)
    confidentiality_impact: closed(ImpactLevel) = Field(..., alias='confidentialityImpact')
    integrity_impact: closed(ImpactLevel) = Field(..., alias='integrityImpact')
    availability_impact: closed(ImpactLevel) = Field(..., alias='availabilityImpact')
    base_score: StrictFloat = Field(..., alias='baseScore')
    base_severity: closed(BaseSeverity) = Field(..., alias='baseSeverity')

class ImpactBaseMetricV3(BaseSchema):
    cvss_v3: CvssV3 = Field(..., alias='cvssV3')
    exploitability_score: StrictFloat = Field(..., alias='exploitabilityScore')
    impact_score: StrictFloat = Field(..., alias='impactScore')

class CvssV2(BaseSchema):
    version: StrictStr
    vector_string: StrictStr = Field(..., alias='vectorString')
    access_vector: closed(AccessVector) = Field(..., alias='accessVector')
    access_complexity: closed(AccessComplexity) = Field(..., alias='accessComplexity')
    authentication: closed(Authentication)
    confidentiality_impact: closed(ImpactV2) = Field(..., alias='confidentialityImpact')
    integrity_impact: closed(ImpactV2) = Field(..., alias='integrityImpact')
    availability_impact: closed(ImpactV2) = Field(..., alias='availabilityImpact')
    base_score: StrictFloat = Field(..., alias='baseScore')

class ImpactBaseMetricV2(BaseSchema):
    cvss_v2: CvssV2 = Field(..., alias='cvssV2')
    severity: closed(SeverityV2)
    exploitability_score: StrictFloat = Field(..., alias='exploitabilityScore')
    impact_score: StrictFloat = Field(..., alias='impactScore')
    ac_insuf_info: StrictBool = Field(..., alias='acInsufInfo')
    obtain_all_privilege: StrictBool = Field(..., alias='obtainAllPrivilege')
    obtain_user_privilege: StrictBool = Field(..., alias='obtainUserPrivilege')
    obtain_other_privilege: StrictBool = Field(..., alias='obtainOtherPrivilege')
    user_interaction_required: StrictBool = Field(..., alias='userInteractionRequired')

class Impact(BaseSchema):
    base_metric_v3: Annotated[Optional[ImpactBaseMetricV3], NotNull] = Field(None, alias='baseMetricV3')
    base_metric_v2: Annotated[Optional[ImpactBaseMetricV2], NotNull] = Field(None, alias='baseMetricV2')

# Item and feed schemas
class CveItem(BaseSchema):
    cve: Cve
    configurations: CpeConfiguration
    impact: Annotated[Optional[Impact], NotNull] = None
    published_date: StrictStr = Field(..., alias='publishedDate')  # ISO-8601
    last_modified_date: StrictStr = Field(..., alias='lastModifiedDate')  # ISO-8601

    @property
    def cve_id(self) -> str:
        return self.cve.cve_data_meta.id

class CveFeed(BaseSchema):
    """Top most container of an NVD CVE json feed"""
    cve_data_type: StrictStr = Field(..., alias='CVE_data_type')
    cve_data_format: StrictStr = Field(..., alias='CVE_data_format')
    cve_data_version: StrictFloat = Field(..., alias='CVE_data_version')
    cve_data_number_of_cves: StrictInt = Field(..., alias='CVE_data_numberOfCVEs')
    cve_data_timestamp: StrictStr = Field(..., alias='CVE_data_timestamp')
    cve_items: Tuple[CveItem, ...] = Field(..., alias='CVE_Items')
