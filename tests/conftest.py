"""Shared NVD feed documents for decoder tests.

Every fixture returns a fresh deep copy so tests can mutate freely.
"""

from __future__ import annotations

import copy

import pytest

CVE_ITEM = {
    "cve": {
        "data_type": "CVE",
        "data_format": "MITRE",
        "data_version": "4.0",
        "CVE_data_meta": {"ID": "CVE-2020-0001", "ASSIGNER": "cve@mitre.org"},
        "problemtype": {
            "problemtype_data": [
                {"description": [{"lang": "en", "value": "CWE-269"}]}
            ]
        },
        "references": {
            "reference_data": [
                {
                    "url": "https://source.android.com/security/bulletin/2020-01-01",
                    "name": "https://source.android.com/security/bulletin/2020-01-01",
                    "refsource": "MISC",
                    "tags": ["Vendor Advisory"],
                }
            ]
        },
        "description": {
            "description_data": [
                {
                    "lang": "en",
                    "value": "In getProcessRecordLocked of ActivityManagerService.java, "
                    "there is a possible privilege escalation.",
                }
            ]
        },
    },
    "configurations": {
        "CVE_data_version": "4.0",
        "nodes": [
            {
                "operator": "OR",
                "cpe_match": [
                    {"vulnerable": True, "cpe23Uri": "cpe:2.3:o:google:android:8.0:*:*:*:*:*:*:*"},
                    {"vulnerable": True, "cpe23Uri": "cpe:2.3:o:google:android:8.1:*:*:*:*:*:*:*"},
                    {"vulnerable": False, "cpe23Uri": "cpe:2.3:h:google:pixel:-:*:*:*:*:*:*:*"},
                ],
            }
        ],
    },
    "impact": {
        "baseMetricV3": {
            "cvssV3": {
                "version": "3.1",
                "vectorString": "CVSS:3.1/AV:L/AC:L/PR:L/UI:N/S:U/C:H/I:H/A:H",
                "attackVector": "LOCAL",
                "attackComplexity": "LOW",
                "privilegesRequired": "LOW",
                "userInteraction": "NONE",
                "scope": "UNCHANGED",
                "confidentialityImpact": "HIGH",
                "integrityImpact": "HIGH",
                "availabilityImpact": "HIGH",
                "baseScore": 7.8,
                "baseSeverity": "HIGH",
            },
            "exploitabilityScore": 1.8,
            "impactScore": 5.9,
        },
        "baseMetricV2": {
            "cvssV2": {
                "version": "2.0",
                "vectorString": "AV:L/AC:L/Au:N/C:C/I:C/A:C",
                "accessVector": "LOCAL",
                "accessComplexity": "LOW",
                "authentication": "NONE",
                "confidentialityImpact": "COMPLETE",
                "integrityImpact": "COMPLETE",
                "availabilityImpact": "COMPLETE",
                "baseScore": 7.2,
            },
            "severity": "HIGH",
            "exploitabilityScore": 3.9,
            "impactScore": 10,
            "acInsufInfo": False,
            "obtainAllPrivilege": False,
            "obtainUserPrivilege": False,
            "obtainOtherPrivilege": False,
            "userInteractionRequired": False,
        },
    },
    "publishedDate": "2020-01-08T19:15Z",
    "lastModifiedDate": "2020-01-14T21:52Z",
}

CVE_ITEM_NO_IMPACT = {
    "cve": {
        "data_type": "CVE",
        "data_format": "MITRE",
        "data_version": "4.0",
        "CVE_data_meta": {"ID": "CVE-2020-0002", "ASSIGNER": "cve@mitre.org"},
        "problemtype": {"problemtype_data": [{"description": []}]},
        "references": {"reference_data": []},
        "description": {
            "description_data": [{"lang": "en", "value": "** RESERVED **"}]
        },
    },
    "configurations": {"CVE_data_version": "4.0", "nodes": []},
    "publishedDate": "2020-01-09T10:00Z",
    "lastModifiedDate": "2020-01-09T10:00Z",
}

CPE_ITEM = {
    "name": "cpe:/a:apache:http_server:2.4.41",
    "title": {"lang": "en-US", "value": "Apache Software Foundation HTTP Server 2.4.41"},
    "references": {
        "reference": [
            {"value": "Change Log", "href": "https://www.apache.org/dist/httpd/CHANGES_2.4.41"},
            {"value": "Vendor", "href": "https://httpd.apache.org/"},
        ]
    },
    "cpe23-item": {"name": "cpe:2.3:a:apache:http_server:2.4.41:*:*:*:*:*:*:*"},
}

DEPRECATED_CPE_ITEM = {
    "name": "cpe:/a:adobe:acrobat_reader:11.0",
    "deprecated": True,
    "deprecation_date": "2019-08-12T13:00:00.000Z",
    "title": {"lang": "en-US", "value": "Adobe Acrobat Reader 11.0"},
    "references": {
        "reference": {"value": "Product", "href": "https://www.adobe.com/products/reader.html"}
    },
    "cpe23-item": {
        "name": "cpe:2.3:a:adobe:acrobat_reader:11.0:*:*:*:*:*:*:*",
        "deprecation": {
            "date": "2019-08-12T13:00:00.000Z",
            "deprecated-by": {
                "name": "cpe:2.3:a:adobe:acrobat_reader:11.0.0:*:*:*:*:*:*:*",
                "type": "NAME_CORRECTION",
            },
        },
    },
}


@pytest.fixture
def cve_item_doc():
    return copy.deepcopy(CVE_ITEM)


@pytest.fixture
def cve_item_no_impact_doc():
    return copy.deepcopy(CVE_ITEM_NO_IMPACT)


@pytest.fixture
def cve_feed_doc():
    return {
        "CVE_data_type": "CVE",
        "CVE_data_format": "MITRE",
        "CVE_data_version": 4.0,
        "CVE_data_numberOfCVEs": 2,
        "CVE_data_timestamp": "2020-01-15T07:00Z",
        "CVE_Items": [copy.deepcopy(CVE_ITEM), copy.deepcopy(CVE_ITEM_NO_IMPACT)],
    }


@pytest.fixture
def cpe_item_doc():
    return copy.deepcopy(CPE_ITEM)


@pytest.fixture
def deprecated_cpe_item_doc():
    return copy.deepcopy(DEPRECATED_CPE_ITEM)


@pytest.fixture(autouse=True)
def _default_extra_field_policy(monkeypatch):
    monkeypatch.delenv("NVD_EXTRA_FIELDS", raising=False)
