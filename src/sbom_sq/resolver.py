from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar

from .models import File, Package, Relationship, RelationshipKind

LOGGER = logging.getLogger(__name__)


class Identified(Protocol):
    spdx_id: str


EntityT = TypeVar("EntityT", bound=Identified)


def resolve(collection: Iterable[EntityT], identifier: str) -> Optional[EntityT]:
    """Return the first entity whose SPDX id equals ``identifier``, else None.

    Linear scan on purpose: duplicates resolve to the earliest record and a
    dangling identifier is an ordinary outcome, not an error.
    """
    for entity in collection:
        if entity.spdx_id == identifier:
            return entity
    LOGGER.debug("no record found for identifier %r", identifier)
    return None


def resolve_package(packages: Sequence[Package], identifier: str) -> Optional[Package]:
    return resolve(packages, identifier)


def resolve_file(files: Sequence[File], identifier: str) -> Optional[File]:
    return resolve(files, identifier)


@dataclass(slots=True)
class ClassifiedRelationships:
    describes: List[Relationship] = field(default_factory=list)
    contains: List[Relationship] = field(default_factory=list)
    depends_on: List[Relationship] = field(default_factory=list)
    unrecognized: List[Relationship] = field(default_factory=list)

    def contained_by(self, source_id: str) -> Iterable[Relationship]:
        return (rel for rel in self.contains if rel.source_id == source_id)


def classify(relationships: Iterable[Relationship]) -> ClassifiedRelationships:
    buckets = ClassifiedRelationships()
    for rel in relationships:
        kind = rel.kind
        if kind is RelationshipKind.DESCRIBES:
            buckets.describes.append(rel)
        elif kind is RelationshipKind.CONTAINS:
            buckets.contains.append(rel)
        elif kind is RelationshipKind.DEPENDS_ON:
            buckets.depends_on.append(rel)
        else:
            buckets.unrecognized.append(rel)
    return buckets


def dedupe(values: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    unique: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


def unique_source_ids(relationships: Iterable[Relationship]) -> List[str]:
    return dedupe(rel.source_id for rel in relationships)
