from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    return {
        "SPDXID": "SPDXRef-DOCUMENT",
        "spdxVersion": "SPDX-2.3",
        "name": "demo-project",
        "dataLicense": "CC0-1.0",
        "documentNamespace": "https://example.org/spdx/demo",
        "creationInfo": {
            "created": "2023-04-01T10:20:30Z",
            "creators": ["Tool: sq-test", "Organization: Example"],
            "licenseListVersion": "3.20",
        },
        "documentDescribes": ["SPDXRef-app"],
        "packages": [
            {
                "SPDXID": "SPDXRef-app",
                "name": "app",
                "versionInfo": "1.0.0",
                "supplier": "Organization: Example",
                "licenseConcluded": "MIT",
                "copyrightText": "Copyright Example",
                "filesAnalyzed": True,
                "hasFiles": ["SPDXRef-main", "SPDXRef-missing", "SPDXRef-util"],
            },
            {
                "SPDXID": "SPDXRef-lib",
                "name": "lib",
                "versionInfo": "2.1",
                "licenseConcluded": "Apache-2.0",
            },
            {
                "SPDXID": "SPDXRef-deep",
                "name": "deep",
                "versionInfo": "0.3",
            },
        ],
        "files": [
            {
                "SPDXID": "SPDXRef-main",
                "fileName": "./main.py",
                "checksums": [{"algorithm": "SHA1", "checksumValue": "abc123"}],
                "licenseInfoInFiles": ["MIT"],
            },
            {"SPDXID": "SPDXRef-util", "fileName": "./util.py"},
            {"SPDXID": "SPDXRef-libcore", "fileName": "./lib/core.c"},
            {"SPDXID": "SPDXRef-deepfile", "fileName": "./deep/deep.c"},
        ],
        "relationships": [
            {"spdxElementId": "SPDXRef-DOCUMENT", "relationshipType": "DESCRIBES", "relatedSpdxElement": "SPDXRef-app"},
            {"spdxElementId": "SPDXRef-app", "relationshipType": "DEPENDS_ON", "relatedSpdxElement": "SPDXRef-lib"},
            {"spdxElementId": "SPDXRef-lib", "relationshipType": "CONTAINS", "relatedSpdxElement": "SPDXRef-libcore"},
            {"spdxElementId": "SPDXRef-lib", "relationshipType": "DEPENDS_ON", "relatedSpdxElement": "SPDXRef-deep"},
            {"spdxElementId": "SPDXRef-deep", "relationshipType": "CONTAINS", "relatedSpdxElement": "SPDXRef-deepfile"},
            {"spdxElementId": "SPDXRef-app", "relationshipType": "GENERATED_FROM", "relatedSpdxElement": "SPDXRef-lib"},
        ],
    }


@pytest.fixture
def sample_file(tmp_path: Path, sample_payload: Dict[str, Any]) -> Path:
    path = tmp_path / "sbom.spdx.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path
