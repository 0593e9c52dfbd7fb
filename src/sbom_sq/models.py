from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class RelationshipKind(str, Enum):
    DESCRIBES = "DESCRIBES"
    CONTAINS = "CONTAINS"
    DEPENDS_ON = "DEPENDS_ON"
    OTHER = "OTHER"

    @classmethod
    def from_tag(cls, tag: str) -> "RelationshipKind":
        if tag in (cls.DESCRIBES.value, cls.CONTAINS.value, cls.DEPENDS_ON.value):
            return cls(tag)
        return cls.OTHER


@dataclass(slots=True)
class CreationInfo:
    created: Optional[datetime] = None
    creators: List[str] = field(default_factory=list)
    license_list_version: str = ""


@dataclass(slots=True)
class ExtractedLicensingInfo:
    license_id: str = ""
    extracted_text: str = ""
    name: str = ""


@dataclass(slots=True)
class ExternalRef:
    reference_category: str = ""
    reference_locator: str = ""
    reference_type: str = ""


@dataclass(slots=True)
class Checksum:
    algorithm: str = ""
    value: str = ""


@dataclass(slots=True)
class Package:
    spdx_id: str
    name: str = ""
    version: str = ""
    supplier: str = ""
    homepage: str = ""
    download_location: str = ""
    license_concluded: str = ""
    license_declared: str = ""
    copyright_text: str = ""
    files_analyzed: bool = False
    has_files: List[str] = field(default_factory=list)
    external_refs: List[ExternalRef] = field(default_factory=list)


@dataclass(slots=True)
class File:
    spdx_id: str
    file_name: str = ""
    checksums: List[Checksum] = field(default_factory=list)
    license_concluded: str = ""
    license_info_in_files: List[str] = field(default_factory=list)
    copyright_text: str = ""


@dataclass(slots=True)
class Relationship:
    """Untyped cross-reference between two SPDX identifiers.

    The original tag is kept verbatim in ``relationship_type`` so tags outside
    the known set survive for flat listings; ``kind`` is the classified view.
    """

    source_id: str
    relationship_type: str
    target_id: str

    @property
    def kind(self) -> RelationshipKind:
        return RelationshipKind.from_tag(self.relationship_type)


@dataclass(slots=True)
class Document:
    spdx_id: str = ""
    spdx_version: str = ""
    name: str = ""
    data_license: str = ""
    namespace: str = ""
    creation_info: CreationInfo = field(default_factory=CreationInfo)
    extracted_licensing_infos: List[ExtractedLicensingInfo] = field(default_factory=list)
    describes: List[str] = field(default_factory=list)
    packages: List[Package] = field(default_factory=list)
    files: List[File] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)
