from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pytest

from sbom_sq.errors import SpdxLoadError
from sbom_sq.hierarchy_view import print_hierarchy
from sbom_sq.models import RelationshipKind
from sbom_sq.spdx_loader import load_document, parse_document
from sbom_sq.styles import Style


def test_load_document_parses_collections(sample_file: Path) -> None:
    document = load_document(sample_file)

    assert document.name == "demo-project"
    assert document.spdx_version == "SPDX-2.3"
    assert document.describes == ["SPDXRef-app"]
    assert [pkg.spdx_id for pkg in document.packages] == ["SPDXRef-app", "SPDXRef-lib", "SPDXRef-deep"]
    assert document.packages[0].has_files == ["SPDXRef-main", "SPDXRef-missing", "SPDXRef-util"]
    assert document.packages[0].files_analyzed is True
    assert document.packages[1].has_files == []
    assert document.files[0].checksums[0].algorithm == "SHA1"
    assert document.files[0].checksums[0].value == "abc123"
    assert document.files[1].checksums == []
    assert document.creation_info.creators == ["Tool: sq-test", "Organization: Example"]
    assert document.creation_info.created is not None
    assert document.creation_info.created.year == 2023


def test_load_document_keeps_unrecognized_relationships(sample_file: Path) -> None:
    document = load_document(sample_file)

    other = [rel for rel in document.relationships if rel.kind is RelationshipKind.OTHER]
    assert len(other) == 1
    assert other[0].relationship_type == "GENERATED_FROM"


def test_missing_file_yields_empty_document(tmp_path: Path) -> None:
    document = load_document(tmp_path / "does-not-exist.json")

    assert document.packages == []
    assert document.files == []
    assert document.relationships == []


def test_empty_file_is_a_load_failure(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_bytes(b"")

    with pytest.raises(SpdxLoadError):
        load_document(path)


def test_malformed_json_is_a_load_failure(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SpdxLoadError):
        load_document(path)


def test_non_object_payload_is_a_load_failure(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(SpdxLoadError):
        load_document(path)


def test_parse_document_tolerates_missing_keys() -> None:
    document = parse_document({"packages": [{"SPDXID": "P1"}], "creationInfo": {"created": "yesterday"}})

    assert document.packages[0].name == ""
    assert document.packages[0].has_files == []
    assert document.creation_info.created is None


def test_null_values_load_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "nulls.json"
    path.write_text(
        json.dumps(
            {
                "name": None,
                "creationInfo": None,
                "files": None,
                "packages": [
                    {"SPDXID": "P1", "name": None, "versionInfo": None, "hasFiles": None, "externalRefs": None}
                ],
                "relationships": [
                    {"spdxElementId": "DOC", "relationshipType": "DESCRIBES", "relatedSpdxElement": "P1"}
                ],
            }
        ),
        encoding="utf-8",
    )

    document = load_document(path)

    assert document.name == ""
    assert document.files == []
    assert document.packages[0].name == ""
    assert document.packages[0].has_files == []
    lines: List[str] = []
    print_hierarchy(document, Style.plain(), lines.append)
    assert "Pkg 1 ---->  | version: " in lines


def test_null_collections_and_checksums(tmp_path: Path) -> None:
    path = tmp_path / "nulls.json"
    path.write_text(
        json.dumps(
            {
                "packages": None,
                "relationships": None,
                "files": [{"SPDXID": "F1", "fileName": None, "checksums": None, "licenseInfoInFiles": None}],
            }
        ),
        encoding="utf-8",
    )

    document = load_document(path)

    assert document.packages == []
    assert document.relationships == []
    assert document.files[0].file_name == ""
    assert document.files[0].checksums == []


@pytest.mark.parametrize(
    "payload",
    [
        {"packages": ["oops"]},
        {"packages": {"SPDXID": "P1"}},
        {"files": [{"SPDXID": "F1", "checksums": ["sha1"]}]},
        {"relationships": [{"spdxElementId": 7}]},
        {"creationInfo": "today"},
    ],
)
def test_wrongly_shaped_records_are_a_load_failure(tmp_path: Path, payload: dict) -> None:
    path = tmp_path / "shape.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(SpdxLoadError):
        load_document(path)
