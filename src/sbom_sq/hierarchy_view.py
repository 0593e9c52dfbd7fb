from __future__ import annotations

from typing import Callable, Optional

from .graph import ContainsFile, DependsOn, GraphResolver, HierarchyEntry, SectionStart, TopLevelPackage
from .models import Document, Package, RelationshipKind
from .resolver import unique_source_ids
from .styles import Role, Style, keyword_role

RULE = "==================="


def _package_label(package: Optional[Package], style: Style, separator: str) -> str:
    if package is None:
        return f"{style.apply('', Role.NAME)} {separator} version: {style.apply('', Role.VERSION)}"
    return (
        f"{style.apply(package.name, Role.NAME)} {separator} "
        f"version: {style.apply(package.version, Role.VERSION)}"
    )


def render_entry(entry: HierarchyEntry, style: Style) -> str:
    arrow = style.apply("---->", Role.ARROW)
    if isinstance(entry, SectionStart):
        return style.apply(f"{RULE}{entry.kind.value}{RULE}", Role.HEADING)
    if isinstance(entry, TopLevelPackage):
        return (
            f"{style.apply('Pkg', Role.KEYWORD_DESCRIBES)} {style.apply(str(entry.index), Role.INDEX)} "
            f"{arrow} {_package_label(entry.package, style, '|')}"
        )
    if isinstance(entry, ContainsFile):
        return (
            f"{_package_label(entry.owner, style, '|')} {arrow} "
            f"{style.apply(RelationshipKind.CONTAINS.value, keyword_role(RelationshipKind.CONTAINS))} "
            f"File {style.apply(str(entry.index), Role.INDEX)} {arrow} "
            f"{style.apply(entry.file.file_name, Role.COUNT)}"
        )
    if isinstance(entry, DependsOn):
        separator = style.apply("|", Role.ARROW)
        keyword = style.apply(
            RelationshipKind.DEPENDS_ON.value, keyword_role(RelationshipKind.DEPENDS_ON)
        )
        return (
            f"{_package_label(entry.dependent, style, separator)} =====> {keyword} "
            f"Pkg {style.apply(str(entry.index), Role.INDEX)} =====> "
            f"{_package_label(entry.dependency, style, separator)}"
        )
    raise TypeError(f"unsupported hierarchy entry: {entry!r}")


def print_hierarchy(document: Document, style: Style, emit: Callable[[str], None]) -> int:
    """Stream the hierarchy walk to ``emit`` one line at a time.

    Returns the number of lines emitted after the unique-source summary.
    """
    emit(f"No. of unique spdxID : {len(unique_source_ids(document.relationships))}")
    count = 0
    for entry in GraphResolver(document).walk():
        emit(render_entry(entry, style))
        count += 1
    return count
