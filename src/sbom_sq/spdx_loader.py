from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .errors import SpdxLoadError
from .models import (
    Checksum,
    CreationInfo,
    Document,
    ExternalRef,
    ExtractedLicensingInfo,
    File,
    Package,
    Relationship,
)


LOGGER = logging.getLogger(__name__)


def load_document(path: Path) -> Document:
    """Load an SPDX JSON document.

    A missing file is not an error and yields an empty ``Document``. A file
    that exists but is empty, is not JSON, or holds records of the wrong
    shape raises ``SpdxLoadError``. JSON nulls load as empty values.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        LOGGER.info("SPDX document %s not found, using an empty document", path)
        return Document()
    except OSError as exc:
        raise SpdxLoadError(f"unable to read {path}: {exc}") from exc

    if not raw:
        raise SpdxLoadError(f"{path} is empty")

    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SpdxLoadError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise SpdxLoadError(f"{path} does not contain a JSON object")

    try:
        document = parse_document(payload)
    except (AttributeError, TypeError, ValueError) as exc:
        raise SpdxLoadError(f"{path} is not a valid SPDX document: {exc}") from exc

    LOGGER.info(
        "loaded %s: %d packages, %d files, %d relationships",
        path,
        len(document.packages),
        len(document.files),
        len(document.relationships),
    )
    return document


def _text(entry: Dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _items(entry: Dict[str, Any], key: str) -> List[Any]:
    value = entry.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    return value


def _strings(entry: Dict[str, Any], key: str) -> List[str]:
    return [str(item) for item in _items(entry, key) if item is not None]


def parse_document(payload: Dict[str, Any]) -> Document:
    creation = payload.get("creationInfo") or {}
    return Document(
        spdx_id=_text(payload, "SPDXID"),
        spdx_version=_text(payload, "spdxVersion"),
        name=_text(payload, "name"),
        data_license=_text(payload, "dataLicense"),
        namespace=_text(payload, "documentNamespace"),
        creation_info=CreationInfo(
            created=_parse_timestamp(creation.get("created")),
            creators=_strings(creation, "creators"),
            license_list_version=_text(creation, "licenseListVersion"),
        ),
        extracted_licensing_infos=[
            ExtractedLicensingInfo(
                license_id=_text(entry, "licenseId"),
                extracted_text=_text(entry, "extractedText"),
                name=_text(entry, "name"),
            )
            for entry in _items(payload, "hasExtractedLicensingInfos")
        ],
        describes=_strings(payload, "documentDescribes"),
        packages=list(iter_packages(_items(payload, "packages"))),
        files=list(iter_files(_items(payload, "files"))),
        relationships=list(iter_relationships(_items(payload, "relationships"))),
    )


def iter_packages(entries: Iterable[Dict[str, Any]]) -> Iterable[Package]:
    for entry in entries:
        yield Package(
            spdx_id=_text(entry, "SPDXID"),
            name=_text(entry, "name"),
            version=_text(entry, "versionInfo"),
            supplier=_text(entry, "supplier"),
            homepage=_text(entry, "homepage"),
            download_location=_text(entry, "downloadLocation"),
            license_concluded=_text(entry, "licenseConcluded"),
            license_declared=_text(entry, "licenseDeclared"),
            copyright_text=_text(entry, "copyrightText"),
            files_analyzed=bool(entry.get("filesAnalyzed")),
            has_files=_strings(entry, "hasFiles"),
            external_refs=[
                ExternalRef(
                    reference_category=_text(ref, "referenceCategory"),
                    reference_locator=_text(ref, "referenceLocator"),
                    reference_type=_text(ref, "referenceType"),
                )
                for ref in _items(entry, "externalRefs")
            ],
        )


def iter_files(entries: Iterable[Dict[str, Any]]) -> Iterable[File]:
    for entry in entries:
        yield File(
            spdx_id=_text(entry, "SPDXID"),
            file_name=_text(entry, "fileName"),
            checksums=[
                Checksum(
                    algorithm=_text(checksum, "algorithm"),
                    value=_text(checksum, "checksumValue"),
                )
                for checksum in _items(entry, "checksums")
            ],
            license_concluded=_text(entry, "licenseConcluded"),
            license_info_in_files=_strings(entry, "licenseInfoInFiles"),
            copyright_text=_text(entry, "copyrightText"),
        )


def iter_relationships(entries: Iterable[Dict[str, Any]]) -> Iterable[Relationship]:
    for entry in entries:
        yield Relationship(
            source_id=_text(entry, "spdxElementId"),
            relationship_type=_text(entry, "relationshipType"),
            target_id=_text(entry, "relatedSpdxElement"),
        )


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, TypeError, ValueError):
        LOGGER.debug("ignoring unparseable creation timestamp %r", value)
        return None
