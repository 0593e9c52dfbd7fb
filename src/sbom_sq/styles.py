from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from rich.markup import escape

from .models import RelationshipKind


class Role(str, Enum):
    HEADING = "heading"
    KEYWORD_DESCRIBES = "keyword_describes"
    KEYWORD_CONTAINS = "keyword_contains"
    KEYWORD_DEPENDS_ON = "keyword_depends_on"
    KEYWORD_OTHER = "keyword_other"
    NAME = "name"
    VERSION = "version"
    INDEX = "index"
    ARROW = "arrow"
    COUNT = "count"


_COLORS: Dict[Role, str] = {
    Role.HEADING: "red",
    Role.KEYWORD_DESCRIBES: "red",
    Role.KEYWORD_CONTAINS: "blue",
    Role.KEYWORD_DEPENDS_ON: "yellow",
    Role.KEYWORD_OTHER: "bright_black",
    Role.NAME: "yellow",
    Role.VERSION: "blue",
    Role.INDEX: "blue",
    Role.ARROW: "yellow",
    Role.COUNT: "red",
}

_KEYWORD_ROLES: Dict[RelationshipKind, Role] = {
    RelationshipKind.DESCRIBES: Role.KEYWORD_DESCRIBES,
    RelationshipKind.CONTAINS: Role.KEYWORD_CONTAINS,
    RelationshipKind.DEPENDS_ON: Role.KEYWORD_DEPENDS_ON,
    RelationshipKind.OTHER: Role.KEYWORD_OTHER,
}


def keyword_role(kind: RelationshipKind) -> Role:
    return _KEYWORD_ROLES[kind]


@dataclass(frozen=True, slots=True)
class Style:
    """Maps (text, role) to markup-safe text for a rich console.

    Text is always escaped, so brackets in names print literally. With no
    colors configured no emphasis tags are added.
    """

    colors: Dict[Role, str] = field(default_factory=dict)

    @classmethod
    def plain(cls) -> "Style":
        return cls()

    @classmethod
    def colored(cls) -> "Style":
        return cls(colors=dict(_COLORS))

    def apply(self, text: str, role: Role) -> str:
        color = self.colors.get(role)
        if color is None:
            return escape(text)
        return f"[{color}]{escape(text)}[/{color}]"
