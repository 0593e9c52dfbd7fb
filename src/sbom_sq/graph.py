from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .models import Document, File, Package, RelationshipKind
from .resolver import ClassifiedRelationships, classify, resolve_file, resolve_package

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SectionStart:
    kind: RelationshipKind


@dataclass(frozen=True, slots=True)
class TopLevelPackage:
    index: int
    package: Package


@dataclass(frozen=True, slots=True)
class ContainsFile:
    owner: Package
    index: int
    file: File


@dataclass(frozen=True, slots=True)
class DependsOn:
    index: int
    dependent: Optional[Package]
    dependency: Optional[Package]


HierarchyEntry = Union[SectionStart, TopLevelPackage, ContainsFile, DependsOn]


class GraphResolver:
    """Streams the package hierarchy implied by a document's relationships.

    Nothing is materialized: every entry is produced while the relationship
    buckets are walked, and each DESCRIBES or DEPENDS_ON edge is expanded on
    its own, one hop deep.
    """

    def __init__(self, document: Document) -> None:
        self.document = document
        self.relationships: ClassifiedRelationships = classify(document.relationships)

    def walk(self) -> Iterator[HierarchyEntry]:
        yield SectionStart(RelationshipKind.DESCRIBES)
        yield from self.describes_pass()
        yield SectionStart(RelationshipKind.DEPENDS_ON)
        yield from self.depends_on_pass()

    def describes_pass(self) -> Iterator[HierarchyEntry]:
        for index, rel in enumerate(self.relationships.describes, start=1):
            package = resolve_package(self.document.packages, rel.target_id)
            if package is None:
                LOGGER.debug("DESCRIBES target %r is not a known package", rel.target_id)
                continue
            yield TopLevelPackage(index=index, package=package)
            yield from self.containment(package)

    def depends_on_pass(self) -> Iterator[HierarchyEntry]:
        packages = self.document.packages
        for index, rel in enumerate(self.relationships.depends_on, start=1):
            dependency = resolve_package(packages, rel.target_id)
            yield DependsOn(
                index=index,
                dependent=resolve_package(packages, rel.source_id),
                dependency=dependency,
            )
            if dependency is not None:
                yield from self.containment(dependency)

    def containment(self, package: Package) -> Iterator[ContainsFile]:
        if package.has_files:
            file_ids = iter(package.has_files)
        else:
            file_ids = (rel.target_id for rel in self.relationships.contained_by(package.spdx_id))

        emitted = 0
        for file_id in file_ids:
            resolved = resolve_file(self.document.files, file_id)
            if resolved is None:
                continue
            emitted += 1
            yield ContainsFile(owner=package, index=emitted, file=resolved)
